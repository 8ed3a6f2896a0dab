from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from heartkemy.core.errors import NotFoundError
from heartkemy.core.identity import get_current_user_id
from heartkemy.db.session import get_db
from heartkemy.schemas.analysis import StoredAnalysisRead
from heartkemy.schemas.common import CreatedId, Envelope, SuccessResponse
from heartkemy.schemas.post import LikeCreate, PostCreate, PostLocationUpdate, PostRead
from heartkemy.services import analysis_service, post_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=Envelope[list[PostRead]])
def list_posts(
    limit: Optional[int] = Query(None, description="Maximum number of posts (1-100, default 50)"),
    viewer_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Newest posts for the map, with author, location and emotion keywords."""
    return {"success": True, "data": post_service.list_posts(db, limit=limit, viewer_id=viewer_id)}


@router.post("", response_model=Envelope[CreatedId])
def create_post(body: PostCreate, db: Session = Depends(get_db)):
    """Write a post at a location, tagged with up to 3 emotion keywords."""
    post = post_service.create_post(db, body)
    return {"success": True, "data": {"id": post.id}}


@router.patch("/{post_id}/location", response_model=SuccessResponse)
def update_post_location(post_id: str, body: PostLocationUpdate, db: Session = Depends(get_db)):
    """Move a post's marker on the map."""
    post_service.update_location(db, post_id, body.latitude, body.longitude)
    return {"success": True}


@router.post("/{post_id}/like", response_model=SuccessResponse)
def like_post(post_id: str, body: LikeCreate, db: Session = Depends(get_db)):
    """Like a post. Liking twice succeeds but counts once."""
    post_service.like_post(db, post_id, body.user_id)
    return {"success": True}


@router.get("/{post_id}/analysis", response_model=Envelope[StoredAnalysisRead])
def get_post_analysis(post_id: str, db: Session = Depends(get_db)):
    """Latest AI analysis stored for a post."""
    analysis = analysis_service.latest_analysis(db, post_id)
    if analysis is None:
        raise NotFoundError("Analysis not found")
    return {"success": True, "data": StoredAnalysisRead.model_validate(analysis)}
