"""
Property list codec for plistbridge.

Thin wrapper over ``plistlib`` that reads XML or binary property lists and
writes either encoding, reporting failures as ``PlistFormatError``.
"""

import logging
import plistlib
from typing import Any, Optional, Union
from xml.parsers.expat import ExpatError

from .config import config
from .errors import PlistFormatError


def parse_plist(data: Union[bytes, str]) -> Any:
    """
    Parse property list bytes into a plistlib value tree.

    The encoding (XML or binary) is detected from the data.

    Args:
        data: Raw property list; text is encoded as UTF-8 first

    Returns:
        The root value as returned by ``plistlib.loads``

    Raises:
        PlistFormatError: If the data is not a valid property list
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    try:
        value = plistlib.loads(data)
    except (plistlib.InvalidFileException, ExpatError, ValueError, TypeError, OverflowError) as e:
        raise PlistFormatError(f"Failed to parse property list: {e}") from e

    logging.debug(f"Parsed {len(data)} bytes of property list data")
    return value


def write_plist(value: Any, binary: bool = False, sort_keys: Optional[bool] = None) -> bytes:
    """
    Serialize a plistlib value tree.

    Args:
        value: Tree produced by ``encode``
        binary: Write the binary format instead of XML
        sort_keys: Sort dictionary keys; defaults to the configured value

    Returns:
        The encoded property list

    Raises:
        PlistFormatError: If the tree cannot be written
    """
    if sort_keys is None:
        sort_keys = config.sort_keys
    fmt = plistlib.FMT_BINARY if binary else plistlib.FMT_XML

    try:
        data = plistlib.dumps(value, fmt=fmt, sort_keys=sort_keys)
    except (TypeError, ValueError, OverflowError) as e:
        raise PlistFormatError(f"Failed to write property list: {e}") from e

    logging.debug(f"Wrote {len(data)} bytes of {'binary' if binary else 'XML'} property list")
    return data
