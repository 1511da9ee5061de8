"""
Size limits for vjson scanning.

Limit checks never raise: each returns a message describing the violation, or
None when the value is within bounds. The scanner turns a violation into a
stopped scan.
"""

from typing import Optional

from ..utils.config import ParseLimits


class LimitValidator:
    """Checks scanning limits to bound memory use on untrusted input."""

    def __init__(self, limits: ParseLimits):
        self.limits = limits

    def check_input_size(self, text: str) -> Optional[str]:
        """Check that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            return f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
        return None

    def check_string_length(self, string: str, what: str = "String") -> Optional[str]:
        """Check that a key or value length is within limits."""
        if len(string) > self.limits.max_string_length:
            return (
                f"{what} length {len(string)} exceeds limit "
                f"{self.limits.max_string_length}"
            )
        return None

    def check_object_keys(self, key_count: int) -> Optional[str]:
        """Check that the stored key count has not reached the limit."""
        if key_count >= self.limits.max_object_keys:
            return f"Object key count reached limit {self.limits.max_object_keys}"
        return None
