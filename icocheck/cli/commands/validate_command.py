#!/usr/bin/env python3
"""
icocheck CLI Commands - Validate Command

Runs the ICO validator against one target and maps the verdict onto the
report line and the process exit code.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from typing import Any

from ...config import Config
from ...core.constants import EXIT_VALID
from ...core.ico_validator import IcoValidator
from ...domain.results import ValidationResult, ValidationStatus
from ..display import print_result
from .base import Command


class ValidateCommand(Command):
    """
    Command for validating a single icon file.

    Responsibilities:
    - Resolve the target path (explicit argument or configured default)
    - Run the magic byte check
    - Print exactly one report line
    - Return 0 for a valid icon and the configured failure code otherwise
    """

    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute icon validation.

        Args:
            args: Dictionary with optional 'path' and 'config' keys

        Returns:
            Exit code for the verdict
        """
        config = self._get_config(args.get("config"))
        target = args.get("path")
        if target is None:
            target = config.get_target_path()

        self.context.logger.debug(f"Validating icon: {target}")
        result = IcoValidator(target).validate()

        print_result(result, self.context.console, self.context.error_console)
        return self._exit_code(result, config)

    def _exit_code(self, result: ValidationResult, config: Config) -> int:
        exit_codes = config.typed().exit_codes
        if result.status is ValidationStatus.VALID:
            return EXIT_VALID
        if result.status is ValidationStatus.INVALID:
            return exit_codes.invalid
        return exit_codes.io_failure
