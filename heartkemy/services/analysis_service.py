"""
AI emotion analysis of a post.

There is no model behind this yet: ``analyze_content`` returns a fixed
placeholder analysis. The surrounding flow (validation, persistence in
ai_analyses, retrieval of the latest analysis) is real, so a model call can
later replace ``analyze_content`` without touching the API.
"""

import copy
import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from heartkemy.core.errors import NotFoundError, StorageError, ValidationError
from heartkemy.models.ai_analysis import AiAnalysis
from heartkemy.models.post import Post
from heartkemy.models.user import User

logger = logging.getLogger(__name__)

PLACEHOLDER_ANALYSIS: dict[str, Any] = {
    "core_values": ["진정성", "공감", "자기이해"],
    "emotion_tone": {
        "warm": 20,
        "comfort": 30,
        "excitement": 10,
        "solitude": 25,
        "sincerity": 15,
    },
    "keywords": ["외로움", "위안", "평화", "고요함", "별"],
    "pattern_changes": None,
}


def analyze_content(content: str) -> dict[str, Any]:
    """Analysis of a journal entry. Currently the same placeholder for every input."""
    logger.debug(f"Analyzing content_length={len(content)} (placeholder analysis)")
    return copy.deepcopy(PLACEHOLDER_ANALYSIS)


def create_analysis(db: Session, post_id: str, user_id: str, content: str) -> AiAnalysis:
    post_id = (post_id or "").strip()
    user_id = (user_id or "").strip()
    if not post_id or not user_id or not (content or "").strip():
        raise ValidationError("Missing required fields")
    if db.query(Post.id).filter(Post.id == post_id).first() is None:
        raise NotFoundError("Post not found")
    if db.query(User.id).filter(User.id == user_id).first() is None:
        raise NotFoundError("User not found")

    result = analyze_content(content)
    analysis = AiAnalysis(post_id=post_id, user_id=user_id, **result)
    db.add(analysis)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Analysis creation error")
        raise StorageError("Failed to create analysis")
    db.refresh(analysis)
    logger.info(f"Stored analysis {analysis.id} for post={post_id} user={user_id}")
    return analysis


def latest_analysis(db: Session, post_id: str) -> Optional[AiAnalysis]:
    return (
        db.query(AiAnalysis)
        .filter(AiAnalysis.post_id == post_id)
        .order_by(AiAnalysis.created_at.desc())
        .first()
    )
