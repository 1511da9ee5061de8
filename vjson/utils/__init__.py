"""
vjson configuration helpers.
"""

from .config import ParseConfig, ParseLimits

__all__ = ['ParseConfig', 'ParseLimits']
