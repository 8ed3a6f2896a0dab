from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from heartkemy.schemas.common import CamelModel


class AuthorRead(CamelModel):
    """Public face of a user, embedded in posts and letters."""
    id: str
    nickname: str
    character: str


class UserCreate(CamelModel):
    email: Optional[str] = None
    nickname: str = Field(min_length=1, max_length=50)
    character: str = Field(default="💫", max_length=16)
    profile_image: Optional[str] = None

    @field_validator("email")
    @classmethod
    def blank_email_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Emails are unique, so a blank one is stored as no email at all."""
        if v is None or not v.strip():
            return None
        return v.strip()


class UserRead(AuthorRead):
    email: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
