"""
vjson input limits.

This module provides size limits for scanning untrusted input.
"""

from .limits import LimitValidator

__all__ = ['LimitValidator']
