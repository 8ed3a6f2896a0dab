from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from heartkemy.core.errors import StorageError
from heartkemy.db.session import get_db
from heartkemy.models.emotion import EmotionKeyword
from heartkemy.schemas.common import Envelope
from heartkemy.schemas.emotion import EmotionKeywordRead

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/emotions", tags=["emotions"])


@router.get("", response_model=Envelope[list[EmotionKeywordRead]])
def list_emotions(db: Session = Depends(get_db)):
    """The emotion keyword catalogue, grouped by type then name."""
    try:
        emotions = db.query(EmotionKeyword).order_by(EmotionKeyword.type, EmotionKeyword.name).all()
    except SQLAlchemyError:
        logger.exception("Emotions fetch error")
        raise StorageError("Failed to fetch emotions")
    return {"success": True, "data": [EmotionKeywordRead.model_validate(e) for e in emotions]}
