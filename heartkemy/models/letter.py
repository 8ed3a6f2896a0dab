"""Letters exchanged between users, delivered by simulated flight."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, String, Text, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from heartkemy.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Letter(Base):
    """
    A letter from one user to another (possibly the same user).

    distance_km and flight_duration_sec are computed once, from the stored
    coordinates, when the letter is sent. They are never recomputed.
    Only is_read / read_at (and is_replied) change after creation, and only
    from False to True.
    """

    __tablename__ = "letters"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    from_user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    to_user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    post_id = Column(String(64), ForeignKey("posts.id", ondelete="SET NULL"), nullable=True)
    subject = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)

    from_latitude = Column(Float, nullable=False)
    from_longitude = Column(Float, nullable=False)
    to_latitude = Column(Float, nullable=False)
    to_longitude = Column(Float, nullable=False)
    distance_km = Column(Float, nullable=False)
    flight_duration_sec = Column(Float, nullable=False)

    is_read = Column(Boolean, nullable=False, default=False)
    is_replied = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
    read_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    sender = relationship("User", foreign_keys=[from_user_id], back_populates="sent_letters")
    recipient = relationship("User", foreign_keys=[to_user_id], back_populates="received_letters")
    emotions = relationship(
        "EmotionKeyword",
        secondary="letter_emotions",
        order_by="EmotionKeyword.type",
        viewonly=True,
    )
