"""Utility helpers for icocheck."""

from .logger import get_logger, setup_logger
from .magic_patterns import MAGIC_PATTERNS, identify_header

__all__ = ["MAGIC_PATTERNS", "get_logger", "identify_header", "setup_logger"]
