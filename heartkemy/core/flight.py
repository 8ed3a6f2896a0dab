"""
Letter flight model.

Letters travel between sender and recipient as if carried at a constant
speed (20 km/h by default). Duration is derived from the great-circle
distance and rendered for display in Korean ("약 1시간 30분").
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from heartkemy.core.errors import InvalidSpeed, ValidationError
from heartkemy.core.geo import Coordinate, distance_km

DEFAULT_SPEED_KMH = 20.0
SECONDS_PER_HOUR = 3600


def flight_duration_sec(distance_km: float, speed_kmh: float = DEFAULT_SPEED_KMH) -> float:
    """Seconds needed to cover ``distance_km`` at ``speed_kmh``."""
    if speed_kmh is None or not math.isfinite(speed_kmh) or speed_kmh <= 0:
        raise InvalidSpeed(f"Speed must be a positive number of km/h, got {speed_kmh}")
    if distance_km is None or not math.isfinite(distance_km) or distance_km < 0:
        raise ValidationError(f"Distance must be a non-negative number of km, got {distance_km}")
    return (distance_km / speed_kmh) * SECONDS_PER_HOUR


def format_duration(seconds: float) -> str:
    """
    Render a duration as "약 {m}분" under an hour, else "약 {h}시간 {m}분".
    Minutes are rounded up, so any non-zero flight shows at least 1 minute.
    """
    if seconds is None or not math.isfinite(seconds) or seconds < 0:
        raise ValidationError(f"Duration must be a finite non-negative number of seconds, got {seconds}")
    minutes = math.ceil(seconds / 60)
    if minutes < 60:
        return f"약 {minutes}분"
    hours, remainder = divmod(minutes, 60)
    return f"약 {hours}시간 {remainder}분"


@dataclass(frozen=True)
class DeliveryEstimate:
    distance_km: float
    flight_duration_sec: float
    display: str
    arrives_at: datetime


def estimate_delivery(
    origin: Coordinate,
    destination: Coordinate,
    speed_kmh: float = DEFAULT_SPEED_KMH,
    sent_at: Optional[datetime] = None,
) -> DeliveryEstimate:
    """Distance, flight time and expected arrival for a letter sent now (or at ``sent_at``)."""
    km = distance_km(origin, destination)
    seconds = flight_duration_sec(km, speed_kmh)
    sent_at = sent_at or datetime.now(timezone.utc)
    return DeliveryEstimate(
        distance_km=km,
        flight_duration_sec=seconds,
        display=format_duration(seconds),
        arrives_at=sent_at + timedelta(seconds=seconds),
    )
