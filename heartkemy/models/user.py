import uuid
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.orm import relationship

from heartkemy.db.base import Base


class User(Base):
    __tablename__ = "users"

    # String ids: seeded demo users use readable ids ("user-demo-1"), new users get uuid4
    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, nullable=True, index=True)
    nickname = Column(String(50), nullable=False, default="익명")
    character = Column(String(16), nullable=False, default="💫")  # emoji avatar
    profile_image = Column(String, nullable=True)
    google_id = Column(String, unique=True, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    posts = relationship("Post", back_populates="author")
    sent_letters = relationship("Letter", foreign_keys="Letter.from_user_id", back_populates="sender")
    received_letters = relationship("Letter", foreign_keys="Letter.to_user_id", back_populates="recipient")
