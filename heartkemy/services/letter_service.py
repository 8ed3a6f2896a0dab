"""
Letter delivery.

A letter is "flown" from the sender's location to the recipient's at a
constant speed. Distance and flight time are computed here, on the server,
from the two coordinates at send time and stored with the letter; they are
never recomputed afterwards.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from heartkemy.core.config import settings
from heartkemy.core.errors import NotFoundError, StorageError, ValidationError
from heartkemy.core.flight import flight_duration_sec, format_duration
from heartkemy.core.geo import Coordinate, distance_km
from heartkemy.models.emotion import LetterEmotion
from heartkemy.models.letter import Letter
from heartkemy.models.post import Post
from heartkemy.models.user import User
from heartkemy.schemas.emotion import EmotionKeywordRead
from heartkemy.schemas.letter import LetterRead
from heartkemy.schemas.user import AuthorRead
from heartkemy.services.emotion_links import link_emotions, normalize_emotion_ids

logger = logging.getLogger(__name__)

# Client-reported values further off than this are logged (and ignored either way)
REPORTED_DISTANCE_TOLERANCE_KM = 0.01
REPORTED_RELATIVE_TOLERANCE = 0.01


@dataclass(frozen=True)
class LetterRecord:
    """A validated letter, ready to persist, with its derived flight values."""
    from_user_id: str
    to_user_id: str
    subject: str
    content: str
    origin: Coordinate
    destination: Coordinate
    distance_km: float
    flight_duration_sec: float
    post_id: Optional[str] = None
    emotion_ids: list[str] = field(default_factory=list)

    @property
    def flight_duration_display(self) -> str:
        return format_duration(self.flight_duration_sec)


def coordinate_or_default(lat: Optional[float], lng: Optional[float]) -> Coordinate:
    """
    Coordinate from a request, or the default location when both parts are
    missing (the client had no geolocation). Half a coordinate is an error.
    """
    if lat is None and lng is None:
        return Coordinate(settings.default_latitude, settings.default_longitude)
    if lat is None or lng is None:
        raise ValidationError("Both latitude and longitude must be provided")
    return Coordinate(lat, lng)


def _disagrees(reported: Optional[float], computed: float) -> bool:
    if reported is None:
        return False
    if not math.isfinite(reported):
        return True
    tolerance = max(REPORTED_DISTANCE_TOLERANCE_KM, abs(computed) * REPORTED_RELATIVE_TOLERANCE)
    return abs(reported - computed) > tolerance


def build_letter_record(
    *,
    from_user_id: str,
    to_user_id: str,
    origin: Coordinate,
    destination: Coordinate,
    subject: str,
    content: str,
    emotion_ids: Optional[list[str]] = None,
    post_id: Optional[str] = None,
    reported_distance_km: Optional[float] = None,
    reported_duration_sec: Optional[float] = None,
    speed_kmh: Optional[float] = None,
    min_content_length: Optional[int] = None,
) -> LetterRecord:
    """
    Validate a letter and derive its distance and flight duration.

    Raises ValidationError (or its InvalidCoordinate / InvalidSpeed subclasses)
    before anything touches storage. Self-letters are allowed.
    """
    speed_kmh = settings.letter_speed_kmh if speed_kmh is None else speed_kmh
    min_content_length = settings.letter_min_content_length if min_content_length is None else min_content_length

    from_user_id = (from_user_id or "").strip()
    to_user_id = (to_user_id or "").strip()
    if not from_user_id or not to_user_id:
        raise ValidationError("Missing required fields: sender and recipient")

    subject = (subject or "").strip()
    if not subject:
        raise ValidationError("Missing required fields: subject")

    content = (content or "").strip()
    if len(content) < min_content_length:
        raise ValidationError(f"Letter content must be at least {min_content_length} characters")

    normalized_emotions = normalize_emotion_ids(emotion_ids)

    km = distance_km(origin, destination)
    seconds = flight_duration_sec(km, speed_kmh)

    if _disagrees(reported_distance_km, km):
        logger.warning(
            f"Client-reported distance {reported_distance_km} km differs from computed {km:.4f} km "
            f"(from={from_user_id}, to={to_user_id}); storing computed value"
        )
    if reported_duration_sec is not None and _disagrees(reported_duration_sec / 3600 * speed_kmh, km):
        logger.warning(
            f"Client-reported flight duration {reported_duration_sec} s differs from computed {seconds:.1f} s; "
            f"storing computed value"
        )

    return LetterRecord(
        from_user_id=from_user_id,
        to_user_id=to_user_id,
        subject=subject,
        content=content,
        origin=origin,
        destination=destination,
        distance_km=km,
        flight_duration_sec=seconds,
        post_id=post_id or None,
        emotion_ids=normalized_emotions,
    )


def send_letter(db: Session, record: LetterRecord) -> Letter:
    """
    Persist a built letter, then tag it with its emotion keywords.

    The letter insert is the primary write: if it fails, nothing is stored and
    StorageError is raised. Emotion links are written afterwards and are
    best-effort (see ``link_emotions``).
    """
    user_ids = {record.from_user_id, record.to_user_id}
    found = db.query(User.id).filter(User.id.in_(user_ids)).count()
    if found != len(user_ids):
        raise NotFoundError("User not found")
    if record.post_id and db.query(Post.id).filter(Post.id == record.post_id).first() is None:
        raise NotFoundError("Post not found")

    letter = Letter(
        from_user_id=record.from_user_id,
        to_user_id=record.to_user_id,
        post_id=record.post_id,
        subject=record.subject,
        content=record.content,
        from_latitude=record.origin.lat,
        from_longitude=record.origin.lng,
        to_latitude=record.destination.lat,
        to_longitude=record.destination.lng,
        distance_km=record.distance_km,
        flight_duration_sec=record.flight_duration_sec,
    )
    db.add(letter)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Letter creation error")
        raise StorageError("Failed to send letter")
    db.refresh(letter)
    letter_id = letter.id

    logger.info(
        f"Letter {letter_id} sent from={record.from_user_id} to={record.to_user_id} "
        f"distance_km={record.distance_km:.3f} flight={record.flight_duration_display}"
    )

    link_emotions(db, LetterEmotion, "letter_id", letter_id, record.emotion_ids)
    return letter


def get_inbox(db: Session, user_id: str) -> list[Letter]:
    """Letters addressed to ``user_id``, newest first, with people and emotions loaded."""
    try:
        return (
            db.query(Letter)
            .options(
                selectinload(Letter.sender),
                selectinload(Letter.recipient),
                selectinload(Letter.emotions),
            )
            .filter(Letter.to_user_id == user_id)
            .order_by(Letter.created_at.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Inbox fetch error")
        raise StorageError("Failed to fetch inbox")


def open_letter(db: Session, letter_id: str, reader_id: str) -> Letter:
    """
    Return a letter to its sender or recipient.
    The recipient's first retrieval marks it read; later ones change nothing.
    """
    letter = db.query(Letter).filter(Letter.id == letter_id).first()
    if letter is None or reader_id not in (letter.from_user_id, letter.to_user_id):
        raise NotFoundError("Letter not found")

    if reader_id == letter.to_user_id and not letter.is_read:
        letter.is_read = True
        letter.read_at = datetime.now(timezone.utc)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception(f"Failed to mark letter {letter_id} as read")
            raise StorageError("Failed to open letter")
        db.refresh(letter)
        logger.info(f"Letter {letter_id} read by recipient {reader_id}")
    return letter


def format_letter(letter: Letter) -> LetterRead:
    """Shape a Letter row (relationships loaded) for the API."""
    return LetterRead(
        id=letter.id,
        sender=AuthorRead.model_validate(letter.sender),
        to=AuthorRead.model_validate(letter.recipient),
        subject=letter.subject,
        content=letter.content,
        emotion_keywords=[EmotionKeywordRead.model_validate(e) for e in letter.emotions],
        distance_km=letter.distance_km,
        flight_duration_sec=letter.flight_duration_sec,
        flight_duration_display=format_duration(letter.flight_duration_sec),
        is_read=letter.is_read,
        is_replied=letter.is_replied,
        created_at=letter.created_at,
        read_at=letter.read_at,
    )
