from __future__ import annotations

from datetime import datetime
from datetime import timedelta
from datetime import timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: str) -> datetime:
    """Parse an OSM ISO 8601 timestamp such as "2020-01-01T12:30:00Z" into an aware UTC datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    timestamp = datetime.fromisoformat(value)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def timestamp_from_millis(value: int) -> datetime:
    return EPOCH + timedelta(milliseconds=value)
