import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from heartkemy.core.identity import get_current_user
from heartkemy.db.session import get_db
from heartkemy.models.user import User
from heartkemy.schemas.common import Envelope
from heartkemy.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=Envelope[UserRead])
def get_me(current_user: User = Depends(get_current_user)):
    """Profile of the caller (X-User-Id header, or the demo user)."""
    return {"success": True, "data": UserRead.model_validate(current_user)}


@router.post("", response_model=Envelope[UserRead], status_code=201)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Create a new user."""
    if user.email:
        existing = db.query(User).filter(User.email == user.email).first()
        if existing:
            raise HTTPException(status_code=400, detail="User with this email already exists")
    db_user = User(**user.model_dump())
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with another insert of the same email
        db.rollback()
        logger.warning(f"Duplicate email on user insert: {user.email}")
        raise HTTPException(status_code=400, detail="User with this email already exists")
    db.refresh(db_user)
    logger.info(f"Created user id={db_user.id} nickname={db_user.nickname}")
    return {"success": True, "data": UserRead.model_validate(db_user)}


@router.get("/{user_id}", response_model=Envelope[UserRead])
def get_user(user_id: str, db: Session = Depends(get_db)):
    """Get user by ID."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return {"success": True, "data": UserRead.model_validate(user)}
