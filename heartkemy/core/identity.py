"""
Caller identity.

There is no authentication: the caller names itself with the ``X-User-Id``
header, and requests without it act as the configured demo user. Routers
receive the identity through ``Depends`` so the rest of the code never reads
a global "current user".
"""

import logging
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from heartkemy.core.config import settings
from heartkemy.core.errors import NotFoundError
from heartkemy.db.session import get_db
from heartkemy.models.user import User

logger = logging.getLogger(__name__)


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Identity of the caller: X-User-Id header, else the demo user."""
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return settings.demo_user_id


def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    """Load the caller's User row; 404 if the identity does not exist."""
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        logger.info(f"Caller identity {user_id!r} has no user row")
        raise NotFoundError("User not found")
    return user
