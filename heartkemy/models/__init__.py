from heartkemy.models.user import User
from heartkemy.models.post import Post, Like
from heartkemy.models.emotion import EmotionKeyword, PostEmotion, LetterEmotion
from heartkemy.models.letter import Letter
from heartkemy.models.ai_analysis import AiAnalysis

__all__ = [
    "User",
    "Post",
    "Like",
    "EmotionKeyword",
    "PostEmotion",
    "LetterEmotion",
    "Letter",
    "AiAnalysis",
]
