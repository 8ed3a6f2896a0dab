from datetime import datetime
from typing import Optional

from pydantic import Field

from heartkemy.schemas.common import CamelModel
from heartkemy.schemas.emotion import EmotionKeywordRead
from heartkemy.schemas.user import AuthorRead


class LetterCreate(CamelModel):
    """
    Payload of POST /letters.

    Coordinates fall back to the configured default location when omitted.
    distance_km / flight_duration_sec are accepted for compatibility with older
    clients but are advisory only: the server recomputes both.
    """
    from_user_id: str
    to_user_id: str
    post_id: Optional[str] = None
    subject: str = Field(max_length=200)
    content: str
    from_lat: Optional[float] = None
    from_lng: Optional[float] = None
    to_lat: Optional[float] = None
    to_lng: Optional[float] = None
    distance_km: Optional[float] = None
    flight_duration_sec: Optional[float] = None
    emotion_ids: Optional[list[str]] = None  # null or [] means no emotion keywords


class LetterRead(CamelModel):
    id: str
    # "from" is a keyword, so the sender field carries an explicit alias
    sender: AuthorRead = Field(alias="from")
    to: AuthorRead
    subject: str
    content: str
    emotion_keywords: list[EmotionKeywordRead] = []
    distance_km: float
    flight_duration_sec: float
    flight_duration_display: str
    is_read: bool
    is_replied: bool
    created_at: datetime
    read_at: Optional[datetime] = None


class DeliveryEstimateRead(CamelModel):
    distance_km: float
    flight_duration_sec: float
    display: str
    arrives_at: datetime
