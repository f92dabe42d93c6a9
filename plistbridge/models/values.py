"""
Dynamic value models for plistbridge.

This module defines the host shell's runtime value representation. Every
variant is a frozen pydantic model tagged with a ``type`` literal, so a whole
value tree can be validated from, and dumped to, JSON.
"""

from typing import Annotated, Callable, Dict, List, Literal, Optional, Union

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
)

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


class BaseValue(BaseModel):
    """Common configuration shared by every dynamic value variant."""

    model_config = ConfigDict(
        frozen=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )


class StringValue(BaseValue):
    type: Literal["string"] = "string"
    val: StrictStr = Field(..., description="UTF-8 text")


class BoolValue(BaseValue):
    type: Literal["bool"] = "bool"
    val: StrictBool = Field(..., description="Boolean flag")


class FloatValue(BaseValue):
    type: Literal["float"] = "float"
    val: float = Field(..., description="64-bit floating point number")


class IntValue(BaseValue):
    type: Literal["int"] = "int"
    val: StrictInt = Field(
        ...,
        ge=I64_MIN,
        le=I64_MAX,
        description="Signed 64-bit integer"
    )


class FilesizeValue(BaseValue):
    """A byte count. Only meaningful as an input to encoding."""

    type: Literal["filesize"] = "filesize"
    val: StrictInt = Field(
        ...,
        ge=I64_MIN,
        le=I64_MAX,
        description="Size in bytes"
    )


class BinaryValue(BaseValue):
    type: Literal["binary"] = "binary"
    val: bytes = Field(..., description="Raw bytes (base64 encoded in JSON)")


class DateValue(BaseValue):
    type: Literal["date"] = "date"
    val: AwareDatetime = Field(..., description="Offset-aware timestamp")


class ListValue(BaseValue):
    type: Literal["list"] = "list"
    vals: List["DynamicValue"] = Field(
        default_factory=list,
        description="Ordered list of values"
    )


class RecordValue(BaseValue):
    type: Literal["record"] = "record"
    val: Dict[str, "DynamicValue"] = Field(
        default_factory=dict,
        description="Ordered mapping of column name to value"
    )


class LazyRecordValue(BaseValue):
    """
    A record whose columns are computed on demand.

    The materializer is called by ``collect()``; it may raise, and it must
    return a ``RecordValue``. Lazy records are never serialized.
    """

    type: Literal["lazyrecord"] = "lazyrecord"
    materializer: Callable[[], "RecordValue"] = Field(
        ...,
        exclude=True,
        description="Callable producing the concrete record"
    )

    def collect(self) -> RecordValue:
        """
        Materialize the lazy record.

        Returns:
            The concrete record

        Raises:
            TypeError: If the materializer produced something other than a record
        """
        record = self.materializer()
        if not isinstance(record, RecordValue):
            raise TypeError(f"Expected a record, got {type(record).__name__}")
        return record


class NothingValue(BaseValue):
    """Absence marker produced when decoding unrecognized data."""

    type: Literal["nothing"] = "nothing"


class RangeValue(BaseValue):
    type: Literal["range"] = "range"
    start: int = 0
    end: Optional[int] = None
    step: int = 1


class ClosureValue(BaseValue):
    type: Literal["closure"] = "closure"
    block_id: int = Field(..., description="Identifier of the closure's block")


class ErrorValue(BaseValue):
    type: Literal["error"] = "error"
    msg: str = Field(..., description="Error message carried by the value")


class CellPathValue(BaseValue):
    type: Literal["cellpath"] = "cellpath"
    members: List[Union[StrictInt, StrictStr]] = Field(
        default_factory=list,
        description="Column names and row indices making up the path"
    )


DynamicValue = Annotated[
    Union[
        StringValue,
        BoolValue,
        FloatValue,
        IntValue,
        FilesizeValue,
        BinaryValue,
        DateValue,
        ListValue,
        RecordValue,
        LazyRecordValue,
        NothingValue,
        RangeValue,
        ClosureValue,
        ErrorValue,
        CellPathValue,
    ],
    Field(discriminator="type"),
]

# Resolve the self-referencing container models
ListValue.model_rebuild()
RecordValue.model_rebuild()
LazyRecordValue.model_rebuild()

dynamic_value_adapter: TypeAdapter = TypeAdapter(DynamicValue)


def dynamic_from_json(data: Union[str, bytes]) -> BaseValue:
    """
    Validate a tagged JSON document into a dynamic value tree.

    Args:
        data: JSON text such as ``{"type": "string", "val": "hi"}``

    Returns:
        The root dynamic value
    """
    return dynamic_value_adapter.validate_json(data)


def dynamic_to_json(value: BaseValue, indent: Optional[int] = 2) -> str:
    """Dump a dynamic value tree as tagged JSON text."""
    return dynamic_value_adapter.dump_json(value, indent=indent).decode("utf-8")
