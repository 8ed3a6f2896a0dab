"""
Letter endpoints
================

POST /api/letters            -- send a letter (distance and flight time computed here)
GET  /api/letters/inbox      -- letters addressed to a user
GET  /api/letters/estimate   -- delivery estimate between two points
GET  /api/letters/{id}       -- open a letter (marks it read for the recipient)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from heartkemy.core.config import settings
from heartkemy.core.flight import estimate_delivery
from heartkemy.core.identity import get_current_user_id
from heartkemy.db.session import get_db
from heartkemy.schemas.common import CreatedId, Envelope
from heartkemy.schemas.letter import DeliveryEstimateRead, LetterCreate, LetterRead
from heartkemy.services import letter_service

router = APIRouter(prefix="/letters", tags=["letters"])


@router.post("", response_model=Envelope[CreatedId])
def send_letter(body: LetterCreate, db: Session = Depends(get_db)):
    record = letter_service.build_letter_record(
        from_user_id=body.from_user_id,
        to_user_id=body.to_user_id,
        origin=letter_service.coordinate_or_default(body.from_lat, body.from_lng),
        destination=letter_service.coordinate_or_default(body.to_lat, body.to_lng),
        subject=body.subject,
        content=body.content,
        emotion_ids=body.emotion_ids,
        post_id=body.post_id,
        reported_distance_km=body.distance_km,
        reported_duration_sec=body.flight_duration_sec,
    )
    letter = letter_service.send_letter(db, record)
    return {"success": True, "data": {"id": letter.id}}


@router.get("/inbox", response_model=Envelope[list[LetterRead]])
def get_inbox(
    user_id: Optional[str] = Query(None, alias="userId"),
    caller_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Letters received by ``userId`` (defaults to the caller), newest first."""
    letters = letter_service.get_inbox(db, user_id or caller_id)
    return {"success": True, "data": [letter_service.format_letter(letter) for letter in letters]}


@router.get("/estimate", response_model=Envelope[DeliveryEstimateRead])
def estimate(
    from_lat: Optional[float] = Query(None, alias="fromLat"),
    from_lng: Optional[float] = Query(None, alias="fromLng"),
    to_lat: Optional[float] = Query(None, alias="toLat"),
    to_lng: Optional[float] = Query(None, alias="toLng"),
):
    """How far a letter would fly and how long it would take, without sending it."""
    result = estimate_delivery(
        letter_service.coordinate_or_default(from_lat, from_lng),
        letter_service.coordinate_or_default(to_lat, to_lng),
        speed_kmh=settings.letter_speed_kmh,
    )
    return {
        "success": True,
        "data": DeliveryEstimateRead(
            distance_km=result.distance_km,
            flight_duration_sec=result.flight_duration_sec,
            display=result.display,
            arrives_at=result.arrives_at,
        ),
    }


@router.get("/{letter_id}", response_model=Envelope[LetterRead])
def open_letter(
    letter_id: str,
    reader_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Open a letter as its sender or recipient."""
    letter = letter_service.open_letter(db, letter_id, reader_id)
    return {"success": True, "data": letter_service.format_letter(letter)}
