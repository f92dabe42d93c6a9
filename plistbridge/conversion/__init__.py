"""Transcoding between property list trees and dynamic values."""

from .dates import to_dynamic_datetime, to_structured_datetime
from .decoder import decode
from .encoder import encode

__all__ = ["decode", "encode", "to_dynamic_datetime", "to_structured_datetime"]
