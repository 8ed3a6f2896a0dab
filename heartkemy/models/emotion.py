"""Emotion keyword catalogue and its link tables to posts and letters."""

import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint, func

from heartkemy.db.base import Base

# Keyword families, each rendered with its own color in the client
EMOTION_TYPES = ("warm", "comfort", "excitement", "solitude", "sincerity")


class EmotionKeyword(Base):
    __tablename__ = "emotion_keywords"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(30), nullable=False, unique=True)
    type = Column(String(20), nullable=False, index=True)  # one of EMOTION_TYPES
    color = Column(String(9), nullable=False)  # "#RRGGBB"
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class PostEmotion(Base):
    __tablename__ = "post_emotions"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    post_id = Column(String(64), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    emotion_id = Column(String(64), ForeignKey("emotion_keywords.id"), nullable=False)

    __table_args__ = (UniqueConstraint("post_id", "emotion_id", name="uq_post_emotions_post_emotion"),)


class LetterEmotion(Base):
    __tablename__ = "letter_emotions"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    letter_id = Column(String(64), ForeignKey("letters.id", ondelete="CASCADE"), nullable=False, index=True)
    emotion_id = Column(String(64), ForeignKey("emotion_keywords.id"), nullable=False)

    __table_args__ = (UniqueConstraint("letter_id", "emotion_id", name="uq_letter_emotions_letter_emotion"),)
