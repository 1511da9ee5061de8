"""
Issue recording for fail-soft scanning.

Malformed input never raises. Instead the scanner records what went wrong as
ScanIssue entries, with line/column and a short excerpt of the surrounding
text.
"""

from dataclasses import dataclass
from typing import Optional

EXCERPT_RADIUS = 20


@dataclass
class ScanIssue:
    """A problem found while scanning, reported instead of raised."""

    message: str
    position: int = 0
    line: int = 1
    column: int = 1
    context: str = ""

    def __str__(self) -> str:
        text = f"{self.message} at line {self.line}, column {self.column}"
        if self.context.strip():
            text += f": {self.context.strip()}"
        return text


class IssueCollector:
    """Collects scan issues for a single parse call."""

    def __init__(self, source: str = "", max_issues: int = 100):
        self.source = source
        self.max_issues = max_issues
        self.issues: list[ScanIssue] = []

    def locate(self, offset: int) -> ScanIssue:
        """
        Describe a character offset in the source as an unnamed issue.

        Offsets past the end (a string scan that ran off the input) are pinned
        to the end of the source. Lines and columns count from 1.
        """
        offset = min(max(offset, 0), len(self.source))
        preceding = self.source[:offset]
        line_start = preceding.rfind("\n") + 1
        excerpt = self.source[
            max(0, offset - EXCERPT_RADIUS) : offset + EXCERPT_RADIUS
        ]
        return ScanIssue(
            message="",
            position=offset,
            line=preceding.count("\n") + 1,
            column=offset - line_start + 1,
            context=excerpt,
        )

    def add(self, message: str, offset: int) -> Optional[ScanIssue]:
        """Record an issue at ``offset``. Returns None once the cap is reached."""
        if len(self.issues) >= self.max_issues:
            return None
        issue = self.locate(offset)
        issue.message = message
        self.issues.append(issue)
        return issue
