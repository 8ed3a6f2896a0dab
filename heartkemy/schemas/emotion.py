from heartkemy.schemas.common import CamelModel


class EmotionKeywordRead(CamelModel):
    id: str
    name: str
    type: str
    color: str
