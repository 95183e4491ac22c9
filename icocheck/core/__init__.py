#!/usr/bin/env python3
"""
icocheck Core Module

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .constants import (
    CUR_MAGIC,
    DEFAULT_ICON_PATH,
    EXIT_INVALID,
    EXIT_IO_FAILURE,
    EXIT_VALID,
    ICO_HEADER_SIZE_BYTES,
    ICO_MAGIC,
)
from .ico_validator import IcoValidator, is_valid_ico, validate

__all__ = [
    "CUR_MAGIC",
    "DEFAULT_ICON_PATH",
    "EXIT_INVALID",
    "EXIT_IO_FAILURE",
    "EXIT_VALID",
    "ICO_HEADER_SIZE_BYTES",
    "ICO_MAGIC",
    "IcoValidator",
    "is_valid_ico",
    "validate",
]
