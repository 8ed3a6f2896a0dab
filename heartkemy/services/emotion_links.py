"""Emotion keyword tagging shared by posts and letters."""

import logging
from typing import Iterable, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from heartkemy.core.config import settings
from heartkemy.core.errors import ValidationError

logger = logging.getLogger(__name__)


def normalize_emotion_ids(emotion_ids: Iterable[str] | None, limit: int | None = None) -> list[str]:
    """
    Deduplicate (keeping first-seen order) and drop blank ids.
    More than ``limit`` distinct ids is rejected, not truncated.
    """
    limit = settings.max_emotion_keywords if limit is None else limit
    seen: list[str] = []
    for emotion_id in emotion_ids or []:
        emotion_id = (emotion_id or "").strip()
        if emotion_id and emotion_id not in seen:
            seen.append(emotion_id)
    if len(seen) > limit:
        raise ValidationError(f"At most {limit} emotion keywords may be selected")
    return seen


def link_emotions(
    db: Session,
    link_model: Type,
    owner_column: str,
    owner_id: str,
    emotion_ids: list[str],
) -> bool:
    """
    Insert one link row per emotion id for an already committed owner row.

    Best-effort: on failure the links are rolled back and the error is logged,
    but the owner (post or letter) stays persisted without tags. Returns
    whether the links were written.
    """
    if not emotion_ids:
        return True
    try:
        for emotion_id in emotion_ids:
            db.add(link_model(**{owner_column: owner_id, "emotion_id": emotion_id}))
        db.commit()
        return True
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(
            f"Emotion link insert failed for {link_model.__tablename__} "
            f"{owner_column}={owner_id} emotion_ids={emotion_ids}: {e}"
        )
        return False
