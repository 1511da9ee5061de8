"""
Scanner for vjson - turns a flat JSON object string into a JsonObject.

The scanner walks the input with a single cursor. It never raises on
malformed input: when the structure stops making sense it keeps the pairs
collected so far and records a ScanIssue describing where it stopped.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .constants import (
    BARE_VALUE_TERMINATORS,
    BYTE_ORDER_MARK,
    COLON,
    OBJECT_END,
    OBJECT_START,
    QUOTE,
    SEPARATORS,
    WHITESPACE,
)
from .container import JsonObject
from .error_handling import IssueCollector, ScanIssue

_LEADING_SPACE = re.compile(rf"^[\s{BYTE_ORDER_MARK}]+")
_TRAILING_SPACE = re.compile(rf"[\s{BYTE_ORDER_MARK}]+\Z")


def trim(text: str) -> str:
    """Strip whitespace and byte order marks from both ends of ``text``."""
    return _TRAILING_SPACE.sub("", _LEADING_SPACE.sub("", text))


@dataclass
class ParseResult:
    """Outcome of a scan: the collected pairs and whether the input was clean."""

    container: JsonObject
    valid: bool
    issues: list[ScanIssue] = field(default_factory=list)


class Scanner:
    """Single-pass, single-cursor scanner for flat JSON objects."""

    def __init__(self, text: str, config: Optional[ParseConfig] = None) -> None:
        self.config = config or ParseConfig()
        self.logger = self.config.get_logger(__name__)
        self.validator = LimitValidator(self.config.limits)
        self.original_text = text
        self.collector = IssueCollector(text)

        self.text = trim(text)
        # Offset of the trimmed text inside the original, for issue positions
        leading = _LEADING_SPACE.match(text)
        self._offset = leading.end() if leading else 0
        self.end = len(self.text) - 1
        self.pos = 0

    def scan(self) -> ParseResult:
        """Scan the whole input and return the result."""
        obj = JsonObject()

        if not self.original_text:
            self._report("Empty input", 0)
            return self._result(obj)

        violation = self.validator.check_input_size(self.original_text)
        if violation:
            self._report_limit(violation, 0)
            return self._result(obj)

        if (
            len(self.text) < 2
            or self.text[0] != OBJECT_START
            or self.text[-1] != OBJECT_END
        ):
            self._report("Input is not a JSON object", 0)
            return self._result(obj)

        self.pos = 1
        while self.pos < self.end:
            self._skip(SEPARATORS)
            if self.pos >= self.end:
                break
            if not self._scan_pair(obj):
                break

        return self._result(obj)

    def _scan_pair(self, obj: JsonObject) -> bool:
        """Scan one key/value pair into ``obj``. Returns False to stop scanning."""
        if self.text[self.pos] != QUOTE:
            return self._abort("Expected '\"' to start key", self.pos)
        key_start = self.pos
        key = self._read_quoted()

        self._skip(WHITESPACE)
        if self.pos >= len(self.text) or self.text[self.pos] != COLON:
            return self._abort("Expected ':' after key", self.pos)
        self.pos += 1
        self._skip(WHITESPACE)

        if self.pos >= self.end:
            return self._abort("Expected value after ':'", self.pos)

        value_start = self.pos
        if self.text[self.pos] == QUOTE:
            value = self._read_quoted()
        else:
            value = self._read_bare()

        violation = self.validator.check_string_length(
            key, "Key"
        ) or self.validator.check_string_length(value, "Value")
        if violation:
            return self._stop_at_limit(violation, value_start)

        if not obj.contains_key(key):
            violation = self.validator.check_object_keys(len(obj))
            if violation:
                return self._stop_at_limit(violation, key_start)

        obj.set(key, value)
        return True

    def _skip(self, chars: frozenset[str]) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in chars:
            self.pos += 1

    def _read_quoted(self) -> str:
        """Read from an opening quote to the next quote. No escape handling."""
        opening = self.pos
        self.pos += 1
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] != QUOTE:
            self.pos += 1
        if self.pos >= len(self.text):
            self._report("Unterminated string", opening)
        string = self.text[start : self.pos]
        self.pos += 1
        return string

    def _read_bare(self) -> str:
        """Read a bare token up to the next ',' or '}'."""
        start = self.pos
        while (
            self.pos < len(self.text)
            and self.text[self.pos] not in BARE_VALUE_TERMINATORS
        ):
            self.pos += 1
        return trim(self.text[start : self.pos])

    def _report(self, message: str, position: int) -> None:
        self.collector.add(message, position + self._offset)

    def _abort(self, message: str, position: int) -> bool:
        self._report(message, position)
        self.logger.debug(
            "Stopped scanning at offset %d: %s", position + self._offset, message
        )
        return False

    def _report_limit(self, message: str, position: int) -> None:
        self._report(message, position)
        self.logger.warning("%s; scan stopped", message)

    def _stop_at_limit(self, message: str, position: int) -> bool:
        self._report_limit(message, position)
        return False

    def _result(self, obj: JsonObject) -> ParseResult:
        issues = list(self.collector.issues)
        return ParseResult(container=obj, valid=not issues, issues=issues)


def scan(text: str, config: Optional[ParseConfig] = None) -> ParseResult:
    """Scan ``text`` into a ParseResult."""
    return Scanner(text, config).scan()
