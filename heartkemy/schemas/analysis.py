from datetime import datetime
from typing import Any, Optional

from heartkemy.schemas.common import CamelModel


class AnalysisRequest(CamelModel):
    post_id: str
    user_id: str
    content: str


class EmotionTone(CamelModel):
    """Share of each emotion family, in percent."""
    warm: int
    comfort: int
    excitement: int
    solitude: int
    sincerity: int


class AnalysisRead(CamelModel):
    core_values: list[str]
    emotion_tone: EmotionTone
    keywords: list[str]
    pattern_changes: Optional[Any] = None


class StoredAnalysisRead(AnalysisRead):
    id: str
    post_id: str
    user_id: str
    created_at: datetime
