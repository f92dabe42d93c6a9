import pytest
from datetime import datetime, timedelta, timezone

from plistbridge.conversion.dates import to_dynamic_datetime, to_structured_datetime


def test_naive_timestamp_is_tagged_utc():
    result = to_dynamic_datetime(datetime(1970, 1, 1))
    assert result.tzinfo is timezone.utc
    assert result.timestamp() == 0


def test_aware_timestamp_is_converted_to_utc():
    tokyo = timezone(timedelta(hours=9))
    result = to_dynamic_datetime(datetime(2024, 1, 1, 9, 0, tzinfo=tokyo))
    assert result == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
    assert result.utcoffset() == timedelta(0)


def test_structured_timestamp_drops_offset():
    offset = timezone(timedelta(hours=-3, minutes=-30))
    result = to_structured_datetime(datetime(2024, 6, 1, 20, 0, 0, 999999, tzinfo=offset))
    assert result.tzinfo is None
    assert result == datetime(2024, 6, 1, 23, 30, 0, 999999)


def test_structured_timestamp_requires_offset():
    with pytest.raises(ValueError):
        to_structured_datetime(datetime(2024, 6, 1))


def test_round_trip_preserves_microseconds():
    original = datetime(2001, 1, 1, 0, 0, 0, 654321)
    assert to_structured_datetime(to_dynamic_datetime(original)) == original
