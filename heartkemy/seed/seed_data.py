from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from heartkemy.models.ai_analysis import AiAnalysis
from heartkemy.models.emotion import EmotionKeyword, LetterEmotion, PostEmotion
from heartkemy.models.letter import Letter
from heartkemy.models.post import Like, Post
from heartkemy.models.user import User

# Colors per emotion family, as used by the map markers
EMOTION_COLORS = {
    "warm": "#FFA500",
    "comfort": "#87CEEB",
    "excitement": "#9370DB",
    "solitude": "#A9A9A9",
    "sincerity": "#FFD700",
}

# (id, name, type)
EMOTION_KEYWORDS = [
    ("emotion-warm-1", "따뜻함", "warm"),
    ("emotion-warm-2", "포근함", "warm"),
    ("emotion-warm-3", "고마움", "warm"),
    ("emotion-comfort-1", "위로", "comfort"),
    ("emotion-comfort-2", "평온", "comfort"),
    ("emotion-comfort-3", "안도", "comfort"),
    ("emotion-excitement-1", "설렘", "excitement"),
    ("emotion-excitement-2", "기대", "excitement"),
    ("emotion-excitement-3", "두근거림", "excitement"),
    ("emotion-solitude-1", "외로움", "solitude"),
    ("emotion-solitude-2", "그리움", "solitude"),
    ("emotion-solitude-3", "고요함", "solitude"),
    ("emotion-sincerity-1", "진심", "sincerity"),
    ("emotion-sincerity-2", "다짐", "sincerity"),
    ("emotion-sincerity-3", "용기", "sincerity"),
]

DEMO_USERS = [
    ("user-demo-1", "demo1@heartkemy.com", "감성민지", "💫"),
    ("user-demo-2", "demo2@heartkemy.com", "별빛하늘", "🌙"),
    ("user-demo-3", "demo3@heartkemy.com", "새벽산책", "🌿"),
]


def seed_db(db: Session) -> None:
    """Seed the database with demo users, the emotion catalogue and a few posts."""

    # Clear existing data (children first)
    db.query(AiAnalysis).delete()
    db.query(LetterEmotion).delete()
    db.query(Letter).delete()
    db.query(PostEmotion).delete()
    db.query(Like).delete()
    db.query(Post).delete()
    db.query(EmotionKeyword).delete()
    db.query(User).delete()
    db.commit()

    for user_id, email, nickname, character in DEMO_USERS:
        db.add(User(id=user_id, email=email, nickname=nickname, character=character))

    for emotion_id, name, emotion_type in EMOTION_KEYWORDS:
        db.add(EmotionKeyword(id=emotion_id, name=name, type=emotion_type, color=EMOTION_COLORS[emotion_type]))
    db.commit()

    # Posts around Seoul City Hall, an hour apart
    now = datetime.now(timezone.utc)
    post1 = Post(
        id="post-demo-1",
        user_id="user-demo-1",
        content="오늘은 시청 앞 잔디밭에 앉아 한참 동안 하늘을 올려다봤다. 아무 생각 없이.",
        preview="오늘은 시청 앞 잔디밭에 앉아 한참 동안 하늘을 올려다봤다.",
        latitude=37.5665,
        longitude=126.9780,
        created_at=now - timedelta(hours=2),
    )
    post2 = Post(
        id="post-demo-2",
        user_id="user-demo-2",
        content="늦은 밤 청계천을 따라 걸으며 오래된 친구에게 보내지 못한 말을 떠올렸다.",
        preview="늦은 밤 청계천을 따라 걸으며",
        latitude=37.5700,
        longitude=126.9850,
        created_at=now - timedelta(hours=1),
    )
    db.add(post1)
    db.add(post2)
    db.commit()

    db.add(PostEmotion(post_id=post1.id, emotion_id="emotion-comfort-2"))
    db.add(PostEmotion(post_id=post1.id, emotion_id="emotion-solitude-3"))
    db.add(PostEmotion(post_id=post2.id, emotion_id="emotion-solitude-2"))
    db.commit()
