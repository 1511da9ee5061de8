"""
Emitter for vjson - rebuilds a JSON object string from a JsonObject.

Values that look like numbers or keywords are written bare, everything else
is quoted with backslashes and double quotes escaped. Keys are written as-is.
"""

from typing import Optional

from .constants import (
    BACKSLASH,
    COLON,
    COMMA,
    KEYWORD_LITERALS,
    NUMERIC_CHARS,
    OBJECT_END,
    OBJECT_START,
    QUOTE,
)
from .container import JsonObject


def is_bare_literal(value: str) -> bool:
    """
    Decide whether ``value`` is written without quotes.

    This is a character-class test, not a number grammar: any non-empty run
    of digits, '-' and '.' qualifies, so "--.." is bare.
    """
    if value in KEYWORD_LITERALS:
        return True
    return bool(value) and all(c in NUMERIC_CHARS for c in value)


def escape_string(value: str) -> str:
    """Prefix every backslash and double quote with a backslash."""
    if BACKSLASH not in value and QUOTE not in value:
        return value

    result = []
    for c in value:
        if c in (BACKSLASH, QUOTE):
            result.append(BACKSLASH)
        result.append(c)
    return "".join(result)


def render_value(value: Optional[str]) -> str:
    """Render a single raw value as it appears after the colon."""
    text = value if value is not None else ""
    if is_bare_literal(text):
        return text
    return QUOTE + escape_string(text) + QUOTE


def to_string(obj: JsonObject) -> str:
    """Serialize ``obj`` to a JSON object string."""
    parts = [
        QUOTE + key + QUOTE + COLON + render_value(value)
        for key, value in obj.items()
    ]
    return OBJECT_START + COMMA.join(parts) + OBJECT_END


def stringify(obj: JsonObject) -> str:
    """Alias of to_string."""
    return to_string(obj)
