"""
Date normalization between property list instants and offset-aware datetimes.

Property lists store absolute instants with no offset; plistlib hands them
out as naive datetimes in UTC. The host shell wants offset-aware values.
"""

from datetime import datetime, timezone


def to_dynamic_datetime(value: datetime) -> datetime:
    """
    Attach a UTC offset to a property list timestamp.

    Args:
        value: Naive datetime in UTC, or an aware datetime

    Returns:
        An aware datetime in UTC with microseconds preserved
    """
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_structured_datetime(value: datetime) -> datetime:
    """
    Reduce an offset-aware datetime to the naive UTC instant plistlib writes.

    The offset is discarded after converting to UTC.

    Raises:
        ValueError: If the datetime carries no offset
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"Expected an offset-aware datetime, got {value!r}")
    return value.astimezone(timezone.utc).replace(tzinfo=None)
