#!/usr/bin/env python3
"""
icocheck - Windows ICO magic-byte validator for build pipelines

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "Windows ICO magic-byte validator for build pipelines"

from .core import ICO_MAGIC, IcoValidator, is_valid_ico, validate
from .domain.results import ValidationResult, ValidationStatus

__all__ = [
    "ICO_MAGIC",
    "IcoValidator",
    "ValidationResult",
    "ValidationStatus",
    "is_valid_ico",
    "validate",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
