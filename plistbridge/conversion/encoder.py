"""
Encoder: dynamic values to a property list tree.

The result is made of the plain objects ``plistlib.dumps`` accepts. Variants
with no property list representation fail the whole conversion.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Tuple

from ..errors import MaterializationError, PathElement, UnconvertibleValueError
from ..models import (
    BinaryValue,
    BoolValue,
    CellPathValue,
    ClosureValue,
    DateValue,
    ErrorValue,
    FilesizeValue,
    FloatValue,
    IntValue,
    LazyRecordValue,
    ListValue,
    NothingValue,
    RangeValue,
    RecordValue,
    StringValue,
)
from .dates import to_structured_datetime


def encode(value: Any) -> Any:
    """
    Convert a dynamic value tree into a plistlib value tree.

    Args:
        value: Root dynamic value

    Returns:
        A tree of ``str``, ``bool``, ``float``, ``int``, ``bytes``,
        ``datetime``, ``list`` and ``dict`` objects

    Raises:
        UnconvertibleValueError: If any value in the tree has no plist form
        MaterializationError: If a lazy record fails to materialize
    """
    return _encode_value(value, ())


def _encode_value(value: Any, path: Tuple[PathElement, ...]) -> Any:
    match value:
        case StringValue():
            return value.val
        case BoolValue():
            return value.val
        case FloatValue():
            return value.val
        case IntValue():
            return value.val
        case FilesizeValue():
            return value.val
        case BinaryValue():
            return bytes(value.val)
        case DateValue():
            return _encode_date(value, path)
        case ListValue():
            return [
                _encode_value(item, path + (index,))
                for index, item in enumerate(value.vals)
            ]
        case RecordValue():
            return _encode_record(value, path)
        case LazyRecordValue():
            return _encode_record(_collect(value, path), path)
        case NothingValue() | RangeValue() | ClosureValue() | ErrorValue() | CellPathValue():
            raise UnconvertibleValueError(value.type, repr(value), path)
        case _:
            raise UnconvertibleValueError(type(value).__name__, repr(value), path)


def _encode_date(value: DateValue, path: Tuple[PathElement, ...]) -> datetime:
    try:
        return to_structured_datetime(value.val)
    except OverflowError as e:
        # UTC instant falls outside the datetime range
        raise UnconvertibleValueError(value.type, repr(value), path) from e


def _encode_record(record: RecordValue, path: Tuple[PathElement, ...]) -> Dict[str, Any]:
    return {
        key: _encode_value(item, path + (key,))
        for key, item in record.val.items()
    }


def _collect(value: LazyRecordValue, path: Tuple[PathElement, ...]) -> RecordValue:
    try:
        return value.collect()
    except Exception as e:
        logging.error(f"Lazy record materialization failed: {e}")
        raise MaterializationError(str(e), path) from e
