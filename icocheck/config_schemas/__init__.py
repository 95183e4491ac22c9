#!/usr/bin/env python3
"""
icocheck Configuration Schemas

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .schemas import ExitCodeConfig, IcoCheckConfig, LoggingConfig, TargetConfig

__all__ = ["ExitCodeConfig", "IcoCheckConfig", "LoggingConfig", "TargetConfig"]
