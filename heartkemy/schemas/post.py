from datetime import datetime
from typing import Optional

from pydantic import Field

from heartkemy.schemas.common import CamelModel
from heartkemy.schemas.emotion import EmotionKeywordRead
from heartkemy.schemas.user import AuthorRead


class Location(CamelModel):
    lat: float
    lng: float


class PostCreate(CamelModel):
    user_id: str
    content: str
    preview: Optional[str] = Field(default=None, max_length=200)  # defaults to the first characters of content
    latitude: float
    longitude: float
    emotion_ids: Optional[list[str]] = None


class PostLocationUpdate(CamelModel):
    latitude: float
    longitude: float


class LikeCreate(CamelModel):
    user_id: str


class PostRead(CamelModel):
    id: str
    author: AuthorRead
    content: str
    preview: str
    location: Location
    emotion_keywords: list[EmotionKeywordRead] = []
    likes: int
    is_liked: bool = False
    created_at: datetime
