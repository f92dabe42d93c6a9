"""
plistbridge: Apple property lists to and from shell values.

Converts between plistlib value trees and the dynamic values a scripting
shell works with, plus the ``from plist`` / ``to plist`` commands built on it.
"""

__version__ = "0.1.0"
__author__ = "plistbridge Project"

# Import main components
from .conversion import decode, encode
from .codec import parse_plist, write_plist
from .errors import (
    ConversionError,
    IntegerRangeError,
    LabeledError,
    MaterializationError,
    PlistBridgeError,
    PlistFormatError,
    UnconvertibleValueError,
)
from .plugin import PlistPlugin, CommandSignature

__all__ = [
    "decode",
    "encode",
    "parse_plist",
    "write_plist",
    "ConversionError",
    "IntegerRangeError",
    "LabeledError",
    "MaterializationError",
    "PlistBridgeError",
    "PlistFormatError",
    "UnconvertibleValueError",
    "PlistPlugin",
    "CommandSignature",
]
