"""
Ordered key/value store for flat JSON objects.

Every value is kept as the text it was parsed from (or set to). Numeric and
boolean interpretation happens only when a typed getter is called.
"""

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Callable, Optional, Union

from .constants import FALSE_TEXT, TRUE_TEXT

_INT_PREFIX = re.compile(r"\s*([+-]?)(.*)", re.DOTALL)
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_DEC_DIGITS = re.compile(r"[0-9]+")


def parse_int_prefix(text: str) -> Union[int, float]:
    """
    Parse the leading integer of ``text`` the way JavaScript's parseInt does.

    Leading whitespace and a sign are accepted, ``0x``/``0X`` switches to
    base 16 and parsing stops at the first character that is not a digit.
    Returns ``float("nan")`` when no digits are found.
    """
    match = _INT_PREFIX.match(text)
    assert match is not None
    sign, rest = match.groups()

    base = 10
    digits_pattern = _DEC_DIGITS
    if rest[:2] in ("0x", "0X"):
        base = 16
        digits_pattern = _HEX_DIGITS
        rest = rest[2:]

    digits = digits_pattern.match(rest)
    if digits is None:
        return float("nan")

    value = int(digits.group(0), base)
    return -value if sign == "-" else value


def to_text(value: Any) -> Optional[str]:
    """Convert a Python value to the raw text stored in a JsonObject."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return TRUE_TEXT if value else FALSE_TEXT
    return str(value)


class JsonObject:
    """
    A flat JSON object with insertion-ordered, string-typed values.

    Keys and values live in two parallel lists. A value slot may be None,
    meaning the value is absent; getters treat it as an empty string.
    """

    def __init__(self) -> None:
        self._keys: list[str] = []
        self._values: list[Optional[str]] = []

    def _index_of_key(self, key: Any) -> int:
        # Keys are stored and compared as text
        key = str(key)
        for i, existing in enumerate(self._keys):
            if existing == key:
                return i
        return -1

    def set(self, key: Any, value: Any) -> None:
        """Insert ``key`` or overwrite its value without moving it."""
        text = to_text(value)
        index = self._index_of_key(key)
        if index >= 0:
            self._values[index] = text
        else:
            self._keys.append(str(key))
            self._values.append(text)

    def get(self, key: Any) -> str:
        """Return the stored text, or "" when the key or its value is absent."""
        index = self._index_of_key(key)
        if index >= 0:
            value = self._values[index]
            return value if value is not None else ""
        return ""

    def get_number(self, key: Any) -> Union[int, float]:
        """Return the leading integer of the value, or NaN."""
        return parse_int_prefix(self.get(key))

    def get_boolean(self, key: Any) -> bool:
        """True only when the stored text is exactly "true"."""
        return self.get(key) == TRUE_TEXT

    def contains_key(self, key: Any) -> bool:
        return self._index_of_key(key) >= 0

    def contains_value(self, value: Optional[str]) -> bool:
        return value in self._values

    def keys(self) -> list[str]:
        """Return a copy of the keys."""
        return list(self._keys)

    def values(self) -> list[Optional[str]]:
        """Return a copy of the raw values, absent slots included."""
        return list(self._values)

    def for_each(self, handler: Callable[[str, Optional[str]], Any]) -> None:
        """Call ``handler(key, raw_value)`` for each pair in insertion order."""
        for key, value in zip(self._keys, self._values):
            handler(key, value)

    def items(self) -> list[tuple[str, Optional[str]]]:
        """Return a copy of the (key, raw value) pairs."""
        return list(zip(self._keys, self._values))

    def update(
        self, other: Union[Mapping[str, Any], Iterable[tuple[str, Any]]]
    ) -> None:
        """Set every pair from a mapping or an iterable of pairs."""
        pairs = other.items() if isinstance(other, Mapping) else other
        for key, value in pairs:
            self.set(key, value)

    def to_dict(self) -> dict[str, str]:
        """Return an ordered dict copy, absent values rendered as ""."""
        return {key: self.get(key) for key in self._keys}

    @classmethod
    def from_pairs(
        cls, pairs: Union[Mapping[str, Any], Iterable[tuple[str, Any]]]
    ) -> "JsonObject":
        """Build a JsonObject from a mapping or an iterable of pairs."""
        obj = cls()
        obj.update(pairs)
        return obj

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._keys))

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self._keys == other._keys and self._values == other._values

    def __repr__(self) -> str:
        return f"JsonObject({self.items()!r})"

    def __str__(self) -> str:
        # Imported here to avoid a circular import
        from .emitter import to_string  # pylint: disable=import-outside-toplevel

        return to_string(self)
