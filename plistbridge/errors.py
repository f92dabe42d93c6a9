"""
Error types for plistbridge.

Conversion errors are terminal: the first failing node aborts the whole
conversion and no partial tree is returned.
"""

from typing import Any, Tuple, Union

PathElement = Union[str, int]


class PlistBridgeError(Exception):
    """Base class for all plistbridge errors."""


class ConversionError(PlistBridgeError):
    """
    Raised when a value cannot be converted between the two value models.

    Attributes:
        message: Human-readable description of the failure
        value_description: Description of the offending value
        path: Keys and indices leading from the root to the failing node
    """

    def __init__(self, message: str, value_description: str = "", path: Tuple[PathElement, ...] = ()):
        self.message = message
        self.value_description = value_description
        self.path = tuple(path)
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.message} (at {format_path(self.path)})"


class IntegerRangeError(ConversionError):
    """An integer does not fit in the signed 64-bit range."""

    def __init__(self, value: int, path: Tuple[PathElement, ...] = ()):
        self.value = value
        super().__init__(f"Cannot convert {value} to i64", str(value), path)


class UnconvertibleValueError(ConversionError):
    """A dynamic value has no property list representation."""

    def __init__(self, variant: str, description: str, path: Tuple[PathElement, ...] = ()):
        self.variant = variant
        super().__init__(f"{description} is not convertible", description, path)


class MaterializationError(ConversionError):
    """A lazy record could not be materialized into a concrete record."""

    def __init__(self, reason: str, path: Tuple[PathElement, ...] = ()):
        self.reason = reason
        super().__init__(f"Failed to materialize lazy record: {reason}", "lazy_record", path)


class PlistFormatError(PlistBridgeError):
    """Raised when property list bytes cannot be parsed or written."""


class LabeledError(PlistBridgeError):
    """
    Error reported to the end user by the plugin commands.

    Mirrors the label/message pair the host shell displays.
    """

    def __init__(self, msg: str, label: str = "ERROR from plugin"):
        self.label = label
        self.msg = msg
        super().__init__(f"{label}: {msg}")


def format_path(path: Tuple[Any, ...]) -> str:
    """Render a conversion path like ``$.items[2].name``."""
    parts = ["$"]
    for element in path:
        if isinstance(element, int):
            parts.append(f"[{element}]")
        else:
            parts.append(f".{element}")
    return "".join(parts)
