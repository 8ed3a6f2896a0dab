"""Map posts: creation, listing, relocation and likes."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from heartkemy.core.config import settings
from heartkemy.core.errors import NotFoundError, StorageError, ValidationError
from heartkemy.core.geo import Coordinate
from heartkemy.models.emotion import PostEmotion
from heartkemy.models.post import Like, Post
from heartkemy.models.user import User
from heartkemy.schemas.emotion import EmotionKeywordRead
from heartkemy.schemas.post import Location, PostCreate, PostRead
from heartkemy.schemas.user import AuthorRead
from heartkemy.services.emotion_links import link_emotions, normalize_emotion_ids

logger = logging.getLogger(__name__)


def clamp_limit(limit: Optional[int]) -> int:
    if limit is None:
        return settings.posts_default_limit
    return max(1, min(limit, settings.posts_max_limit))


def list_posts(db: Session, limit: Optional[int] = None, viewer_id: Optional[str] = None) -> list[PostRead]:
    """Newest posts with author and emotions; ``is_liked`` is relative to ``viewer_id``."""
    try:
        posts = (
            db.query(Post)
            .options(selectinload(Post.author), selectinload(Post.emotions))
            .order_by(Post.created_at.desc())
            .limit(clamp_limit(limit))
            .all()
        )
        liked_ids: set[str] = set()
        if viewer_id and posts:
            rows = (
                db.query(Like.post_id)
                .filter(Like.user_id == viewer_id, Like.post_id.in_([p.id for p in posts]))
                .all()
            )
            liked_ids = {row.post_id for row in rows}
    except SQLAlchemyError:
        logger.exception("Posts fetch error")
        raise StorageError("Failed to fetch posts")
    return [format_post(post, is_liked=post.id in liked_ids) for post in posts]


def create_post(db: Session, body: PostCreate) -> Post:
    """
    Validate and insert a post, then tag it with emotion keywords.
    Emotion links are best-effort, as for letters.
    """
    user_id = (body.user_id or "").strip()
    content = (body.content or "").strip()
    if not user_id or not content:
        raise ValidationError("Missing required fields")
    location = Coordinate(body.latitude, body.longitude)
    preview = (body.preview or "").strip() or content[: settings.preview_length]
    emotion_ids = normalize_emotion_ids(body.emotion_ids)

    if db.query(User.id).filter(User.id == user_id).first() is None:
        raise NotFoundError("User not found")

    post = Post(
        user_id=user_id,
        content=content,
        preview=preview,
        latitude=location.lat,
        longitude=location.lng,
    )
    db.add(post)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Post creation error")
        raise StorageError("Failed to create post")
    db.refresh(post)
    post_id = post.id
    logger.info(f"Post {post_id} created by user={user_id} with {len(emotion_ids)} emotion(s)")

    link_emotions(db, PostEmotion, "post_id", post_id, emotion_ids)
    return post


def update_location(db: Session, post_id: str, latitude: float, longitude: float) -> Post:
    location = Coordinate(latitude, longitude)
    post = db.query(Post).filter(Post.id == post_id).first()
    if post is None:
        raise NotFoundError("Post not found")
    post.latitude = location.lat
    post.longitude = location.lng
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Location update error")
        raise StorageError("Failed to update location")
    return post


def like_post(db: Session, post_id: str, user_id: str) -> bool:
    """
    Like a post once per user. A repeated like is a no-op (the unique
    constraint rejects it). Returns True when a new like was recorded.
    """
    user_id = (user_id or "").strip()
    if not user_id:
        raise ValidationError("Missing userId")
    if db.query(Post.id).filter(Post.id == post_id).first() is None:
        raise NotFoundError("Post not found")
    if db.query(User.id).filter(User.id == user_id).first() is None:
        raise NotFoundError("User not found")

    db.add(Like(user_id=user_id, post_id=post_id))
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        already = db.query(Like.id).filter(Like.user_id == user_id, Like.post_id == post_id).first()
        if already is not None:
            logger.debug(f"Duplicate like ignored: user={user_id} post={post_id}")
            return False
        # Not a duplicate, so a real storage failure
        logger.exception(f"Like error: user={user_id} post={post_id}")
        raise StorageError("Failed to like post")

    try:
        db.query(Post).filter(Post.id == post_id).update(
            {Post.likes: Post.likes + 1}, synchronize_session=False
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Like error: user={user_id} post={post_id}")
        raise StorageError("Failed to like post")
    return True


def format_post(post: Post, is_liked: bool = False) -> PostRead:
    return PostRead(
        id=post.id,
        author=AuthorRead.model_validate(post.author),
        content=post.content,
        preview=post.preview,
        location=Location(lat=post.latitude, lng=post.longitude),
        emotion_keywords=[EmotionKeywordRead.model_validate(e) for e in post.emotions],
        likes=post.likes,
        is_liked=is_liked,
        created_at=post.created_at,
    )
