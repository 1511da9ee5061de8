"""
Public entry points for vjson - parse, serialize and validate flat JSON objects.
"""

from typing import Optional, TextIO, Union

from ..utils.config import ParseConfig
from .container import JsonObject
from .emitter import stringify, to_string
from .scanner import ParseResult, scan

TextInput = Union[str, bytes, bytearray, None]


def _coerce_input(text: TextInput) -> str:
    """Normalise accepted input types to str."""
    if text is None:
        return ""
    if isinstance(text, (bytes, bytearray)):
        return text.decode("utf-8")
    if isinstance(text, str):
        return text
    raise ValueError("Input must be a string, bytes or None")


def parse_with_status(
    text: TextInput, config: Optional[ParseConfig] = None
) -> ParseResult:
    """
    Parse a flat JSON object and report whether the input was well formed.

    Args:
        text: The object text. None and "" give an empty container.
        config: Optional ParseConfig with size limits and a logger.

    Returns:
        ParseResult holding the container, a validity flag and any ScanIssues.

    Raises:
        ValueError: If ``text`` is not a str, bytes, bytearray or None.
    """
    return scan(_coerce_input(text), config)


def parse(text: TextInput, config: Optional[ParseConfig] = None) -> JsonObject:
    """
    Parse a flat JSON object string into a JsonObject.

    Malformed input never raises: it yields an empty container, or the pairs
    read before the scanner gave up.
    """
    return parse_with_status(text, config).container


def deserialize_json(text: TextInput) -> JsonObject:
    """Deserialize a string into its JsonObject representation."""
    return parse(text)


def serialize_json(obj: JsonObject) -> str:
    """Convert a JsonObject into its string representation."""
    return stringify(obj)


def is_valid_json_string(text: TextInput) -> bool:
    """
    Check whether ``text`` scans cleanly as a flat JSON object.

    True when the input is object shaped, every pair was read up to the
    closing brace and every string was terminated. Never raises for
    malformed input.
    """
    return parse_with_status(text).valid


def load(fp: TextIO, config: Optional[ParseConfig] = None) -> JsonObject:
    """Parse a flat JSON object read from a file-like object."""
    return parse(fp.read(), config)


def dump(obj: JsonObject, fp: TextIO) -> None:
    """Write the serialized form of ``obj`` to a file-like object."""
    fp.write(to_string(obj))
