from heartkemy.schemas.common import Envelope, SuccessResponse, ErrorResponse, CreatedId
from heartkemy.schemas.user import AuthorRead, UserCreate, UserRead
from heartkemy.schemas.emotion import EmotionKeywordRead
from heartkemy.schemas.post import Location, PostCreate, PostLocationUpdate, LikeCreate, PostRead
from heartkemy.schemas.letter import LetterCreate, LetterRead, DeliveryEstimateRead
from heartkemy.schemas.analysis import AnalysisRequest, AnalysisRead, StoredAnalysisRead, EmotionTone

__all__ = [
    "Envelope",
    "SuccessResponse",
    "ErrorResponse",
    "CreatedId",
    "AuthorRead",
    "UserCreate",
    "UserRead",
    "EmotionKeywordRead",
    "Location",
    "PostCreate",
    "PostLocationUpdate",
    "LikeCreate",
    "PostRead",
    "LetterCreate",
    "LetterRead",
    "DeliveryEstimateRead",
    "AnalysisRequest",
    "AnalysisRead",
    "StoredAnalysisRead",
    "EmotionTone",
]
