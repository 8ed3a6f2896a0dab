"""Geo utilities: coordinate validation and great-circle distance (Haversine)."""

import math
from dataclasses import dataclass

from heartkemy.core.errors import InvalidCoordinate

EARTH_RADIUS_KM = 6371.0

LAT_MIN, LAT_MAX = -90.0, 90.0
LNG_MIN, LNG_MAX = -180.0, 180.0


@dataclass(frozen=True)
class Coordinate:
    """A (latitude, longitude) pair in signed degrees. Validated on construction."""

    lat: float
    lng: float

    def __post_init__(self):
        lat, lng = validate_coordinate(self.lat, self.lng)
        # Numeric strings are accepted; keep the parsed floats
        object.__setattr__(self, "lat", lat)
        object.__setattr__(self, "lng", lng)


def validate_coordinate(lat: float, lng: float) -> tuple[float, float]:
    """Return (lat, lng) as floats; raise InvalidCoordinate unless finite and within range."""
    try:
        lat_f = float(lat)
        lng_f = float(lng)
    except (TypeError, ValueError):
        raise InvalidCoordinate(f"Coordinate must be numeric: ({lat!r}, {lng!r})")
    if not (math.isfinite(lat_f) and math.isfinite(lng_f)):
        raise InvalidCoordinate(f"Coordinate must be finite: ({lat}, {lng})")
    if not LAT_MIN <= lat_f <= LAT_MAX:
        raise InvalidCoordinate(f"Latitude {lat} out of range [-90, 90]")
    if not LNG_MIN <= lng_f <= LNG_MAX:
        raise InvalidCoordinate(f"Longitude {lng} out of range [-180, 180]")
    return lat_f, lng_f


def haversine_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Compute great-circle distance between two (lat, lon) points in kilometers.
    Uses the Haversine formula. Both points are validated first.
    """
    lat1, lon1 = validate_coordinate(lat1, lon1)
    lat2, lon2 = validate_coordinate(lat2, lon2)

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # Rounding can push h just past 1 for near-antipodal points
    h = min(max(h, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates, in kilometers."""
    return haversine_distance_km(a.lat, a.lng, b.lat, b.lng)
