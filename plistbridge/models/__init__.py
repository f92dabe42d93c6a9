"""Data models for plistbridge."""

from .values import (
    BaseValue,
    BinaryValue,
    BoolValue,
    CellPathValue,
    ClosureValue,
    DateValue,
    DynamicValue,
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
    I64_MAX,
    I64_MIN,
    dynamic_from_json,
    dynamic_to_json,
)

__all__ = [
    "BaseValue",
    "BinaryValue",
    "BoolValue",
    "CellPathValue",
    "ClosureValue",
    "DateValue",
    "DynamicValue",
    "ErrorValue",
    "FilesizeValue",
    "FloatValue",
    "IntValue",
    "LazyRecordValue",
    "ListValue",
    "NothingValue",
    "RangeValue",
    "RecordValue",
    "StringValue",
    "I64_MAX",
    "I64_MIN",
    "dynamic_from_json",
    "dynamic_to_json",
]
