"""
Decoder: property list tree to dynamic values.

Every property list variant has a dynamic counterpart, so decoding only fails
for integers outside the signed 64-bit range.
"""

import logging
from datetime import datetime
from plistlib import UID
from typing import Any, Tuple

from ..errors import IntegerRangeError, PathElement
from ..models import (
    I64_MAX,
    I64_MIN,
    BaseValue,
    BinaryValue,
    BoolValue,
    DateValue,
    FloatValue,
    IntValue,
    ListValue,
    NothingValue,
    RecordValue,
    StringValue,
)
from .dates import to_dynamic_datetime


def decode(value: Any) -> BaseValue:
    """
    Convert a plistlib value tree into a dynamic value tree.

    Args:
        value: Object returned by ``plistlib.loads`` (or built the same way)

    Returns:
        The equivalent dynamic value

    Raises:
        IntegerRangeError: If any integer in the tree does not fit in i64
    """
    return _decode_value(value, ())


def _decode_value(value: Any, path: Tuple[PathElement, ...]) -> BaseValue:
    match value:
        case str():
            return StringValue(val=value)
        # bool must be matched before int
        case bool():
            return BoolValue(val=value)
        case float():
            return FloatValue(val=value)
        case datetime():
            return DateValue(val=to_dynamic_datetime(value))
        case int():
            return IntValue(val=_narrow_integer(value, path))
        case UID():
            # Numeric value of the identifier, not its bit pattern
            return FloatValue(val=float(value.data))
        case bytes() | bytearray():
            return BinaryValue(val=bytes(value))
        case list() | tuple():
            return ListValue(vals=[
                _decode_value(item, path + (index,))
                for index, item in enumerate(value)
            ])
        case dict():
            return RecordValue(val={
                key: _decode_value(item, path + (key,))
                for key, item in value.items()
            })
        case _:
            logging.debug(f"No dynamic mapping for {type(value).__name__}, decoding as nothing")
            return NothingValue()


def _narrow_integer(value: int, path: Tuple[PathElement, ...]) -> int:
    if value < I64_MIN or value > I64_MAX:
        raise IntegerRangeError(value, path)
    return value
