from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from heartkemy.db.session import get_db
from heartkemy.schemas.analysis import AnalysisRead, AnalysisRequest
from heartkemy.schemas.common import Envelope
from heartkemy.services.analysis_service import create_analysis

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.post("", response_model=Envelope[AnalysisRead])
def analyze_post(body: AnalysisRequest, db: Session = Depends(get_db)):
    """Run the (placeholder) emotion analysis on a post and store the result."""
    analysis = create_analysis(db, body.post_id, body.user_id, body.content)
    return {"success": True, "data": AnalysisRead.model_validate(analysis)}
