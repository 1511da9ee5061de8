"""
vjson - a very small, permissive parser and serializer for flat JSON objects.

vjson reads a single-level JSON object into an ordered container that keeps
every value as text, and writes it back out. It is meant for places where a
full JSON library is too heavy and the data is a handful of scalar settings.

Key Features:
- Fail-soft parsing: malformed input gives an empty or partial result, never
  an exception
- Insertion order is preserved; duplicate keys keep their first position
- Values stay as text until read with get(), get_number() or get_boolean()
- Numbers and true/false/null are written bare, other text is quoted
- parse_with_status() reports whether the input scanned cleanly

Quick Start:
    import vjson
    obj = vjson.parse('{"a":1,"b":true,"s":"hi"}')
    obj.get_number("a")     # 1
    obj.get_boolean("b")    # True
    obj.set("x", "5")
    vjson.to_string(obj)    # '{"a":1,"b":true,"s":"hi","x":5}'
"""

from .core.container import JsonObject
from .core.emitter import stringify, to_string
from .core.engine import (
    deserialize_json,
    dump,
    is_valid_json_string,
    load,
    parse,
    parse_with_status,
    serialize_json,
)
from .core.error_handling import ScanIssue
from .core.scanner import ParseResult
from .utils.config import ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "vjson contributors"

__all__ = [
    # Parsing and serialization
    "parse", "parse_with_status", "to_string", "stringify", "load", "dump",
    # Aliases
    "deserialize_json", "serialize_json", "is_valid_json_string",
    # Container and results
    "JsonObject", "ParseResult", "ScanIssue",
    # Configuration classes
    "ParseConfig", "ParseLimits",
]
