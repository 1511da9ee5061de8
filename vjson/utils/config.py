"""
Configuration and limits for vjson parsing.

This module defines size limits and configuration options for scanning
flat JSON objects.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_MAX_INPUT_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_OBJECT_KEYS = 10000
DEFAULT_MAX_STRING_LENGTH = 1024 * 1024


@dataclass
class ParseLimits:
    """Size limits applied while scanning. Hitting a limit stops the scan."""

    max_input_size: int = DEFAULT_MAX_INPUT_SIZE
    max_object_keys: int = DEFAULT_MAX_OBJECT_KEYS
    max_string_length: int = DEFAULT_MAX_STRING_LENGTH

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.max_object_keys <= 0:
            raise ValueError("max_object_keys must be positive")
        if self.max_string_length <= 0:
            raise ValueError("max_string_length must be positive")


@dataclass
class ParseConfig:
    """Configuration options for vjson parsing."""

    limits: Optional[ParseLimits] = None
    logger: Optional[logging.Logger] = None

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        logger: Optional[logging.Logger] = None,
        **limit_options: Any,
    ):
        if limits is not None:
            self.limits = limits
        else:
            self.limits = ParseLimits(
                max_input_size=limit_options.get(
                    "max_input_size", DEFAULT_MAX_INPUT_SIZE
                ),
                max_object_keys=limit_options.get(
                    "max_object_keys", DEFAULT_MAX_OBJECT_KEYS
                ),
                max_string_length=limit_options.get(
                    "max_string_length", DEFAULT_MAX_STRING_LENGTH
                ),
            )
        self.logger = logger

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.limits is not None
        return self.limits.max_input_size

    @property
    def max_object_keys(self) -> int:
        """Maximum number of distinct keys stored."""
        assert self.limits is not None
        return self.limits.max_object_keys

    @property
    def max_string_length(self) -> int:
        """Maximum length of a single key or value."""
        assert self.limits is not None
        return self.limits.max_string_length

    def get_logger(self, name: str) -> logging.Logger:
        """Return the configured logger, or the module logger for ``name``."""
        return self.logger or logging.getLogger(name)
