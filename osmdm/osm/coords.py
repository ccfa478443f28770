from __future__ import annotations

COORDINATE_PRECISION = 10_000_000

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


class CoordinateRangeError(ValueError):
    def __init__(self, axis: str, degrees: float, limit: float) -> None:
        super().__init__(f"{axis} {degrees} outside of [-{limit}, {limit}]")
        self.axis = axis
        self.degrees = degrees
        self.limit = limit


def encode(degrees: float) -> int:
    """Fixed-point representation of a coordinate in degrees.

    The result is only meaningful as a 32-bit integer for values inside the
    latitude/longitude ranges; callers validate with `check_latitude` or
    `check_longitude` first.
    """
    return round(round(degrees, 7) * COORDINATE_PRECISION)


def decode(value: int) -> float:
    return value / COORDINATE_PRECISION


def check_latitude(degrees: float) -> float:
    if not -MAX_LATITUDE <= degrees <= MAX_LATITUDE:
        raise CoordinateRangeError("latitude", degrees, MAX_LATITUDE)
    return degrees


def check_longitude(degrees: float) -> float:
    if not -MAX_LONGITUDE <= degrees <= MAX_LONGITUDE:
        raise CoordinateRangeError("longitude", degrees, MAX_LONGITUDE)
    return degrees


def encode_point(lon: float, lat: float) -> tuple[int, int]:
    """Validate and encode an (x, y) point, returning (lat, lon) as stored on a node."""
    return encode(check_latitude(lat)), encode(check_longitude(lon))
