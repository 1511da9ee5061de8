"""
vjson Core Scanning Engine.

This module provides the container, scanner and emitter for flat JSON objects.
"""

from .container import JsonObject
from .emitter import is_bare_literal, stringify, to_string
from .engine import (
    deserialize_json,
    is_valid_json_string,
    parse,
    parse_with_status,
    serialize_json,
)
from .error_handling import ScanIssue
from .scanner import ParseResult, Scanner

__all__ = [
    'JsonObject',
    'parse', 'parse_with_status', 'to_string', 'stringify',
    'deserialize_json', 'serialize_json', 'is_valid_json_string',
    'is_bare_literal', 'ParseResult', 'ScanIssue', 'Scanner',
]
