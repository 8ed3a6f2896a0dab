import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, Float, Integer, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship

from heartkemy.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    preview = Column(String(200), nullable=False)  # short excerpt shown on the map marker
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    likes = Column(Integer, nullable=False, default=0)  # denormalized count of Like rows
    # Python-side default keeps sub-second ordering on SQLite
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    author = relationship("User", back_populates="posts")
    emotions = relationship(
        "EmotionKeyword",
        secondary="post_emotions",
        order_by="EmotionKeyword.type",
        viewonly=True,
    )
    analyses = relationship("AiAnalysis", back_populates="post", order_by="AiAnalysis.created_at.desc()")


class Like(Base):
    __tablename__ = "likes"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    post_id = Column(String(64), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # One like per (user, post); duplicates are rejected by the store and ignored by the API
    __table_args__ = (UniqueConstraint("user_id", "post_id", name="uq_likes_user_post"),)
