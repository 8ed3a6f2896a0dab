"""Stored results of the (stubbed) AI emotion analysis of a post."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, ForeignKey, JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from heartkemy.db.base import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AiAnalysis(Base):
    __tablename__ = "ai_analyses"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    post_id = Column(String(64), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    core_values = Column(JSONType, nullable=False)  # ["진정성", ...]
    emotion_tone = Column(JSONType, nullable=False)  # {"warm": 20, ...} percentages summing to 100
    keywords = Column(JSONType, nullable=False)
    pattern_changes = Column(JSONType, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    post = relationship("Post", back_populates="analyses")
