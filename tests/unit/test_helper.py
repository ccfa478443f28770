"""Tests for timestamp helpers."""
from datetime import datetime
from datetime import timedelta
from datetime import timezone

import pytest

from osmdm.helper import parse_timestamp
from osmdm.helper import timestamp_from_millis


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_zulu_suffix(self):
        timestamp = parse_timestamp("2020-01-01T12:30:00Z")
        assert timestamp == datetime(2020, 1, 1, 12, 30, tzinfo=timezone.utc)
        assert timestamp.utcoffset() == timedelta(0)

    def test_offset_is_converted_to_utc(self):
        timestamp = parse_timestamp("2020-01-01T14:30:00+02:00")
        assert timestamp == datetime(2020, 1, 1, 12, 30, tzinfo=timezone.utc)
        assert timestamp.tzinfo == timezone.utc

    def test_naive_is_assumed_utc(self):
        assert parse_timestamp("2020-01-01T12:30:00") == datetime(2020, 1, 1, 12, 30, tzinfo=timezone.utc)

    def test_unparseable(self):
        with pytest.raises(ValueError):
            parse_timestamp("yesterday")


class TestTimestampFromMillis:
    """Tests for timestamp_from_millis."""

    def test_epoch(self):
        assert timestamp_from_millis(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_millis(self):
        assert timestamp_from_millis(1577881800000) == datetime(2020, 1, 1, 12, 30, tzinfo=timezone.utc)

    def test_large_values_stay_exact(self):
        assert timestamp_from_millis(253402300799999) == datetime(9999, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)

    def test_negative(self):
        assert timestamp_from_millis(-1) == datetime(1969, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)
