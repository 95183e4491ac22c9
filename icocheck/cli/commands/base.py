#!/usr/bin/env python3
"""
icocheck CLI Commands - Base Abstractions

Command Pattern implementation for icocheck CLI commands.

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

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from ...config import Config
from ...utils.logger import setup_logger
from ..display import console as default_console
from ..display import error_console as default_error_console


def configure_logging_levels(verbose: bool, quiet: bool, default_level: str = "WARNING") -> None:
    """Configure logging levels based on verbosity settings."""
    if quiet:
        logging.getLogger("icocheck").setLevel(logging.ERROR)
        return

    level = logging.INFO if verbose else logging.getLevelName(default_level.upper())
    logging.getLogger("icocheck").setLevel(level)


@dataclass
class CommandContext:
    """
    Shared context for all commands.

    Attributes:
        console: Rich console for the success line (stdout)
        error_console: Rich console for failure lines (stderr)
        logger: Logger instance for command execution logging
        config: Application configuration object
        verbose: Flag for verbose output mode
        quiet: Flag for suppressing non-critical output
    """

    console: Console
    error_console: Console
    logger: Any
    config: Config | None = None
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        verbose: bool = False,
        quiet: bool = False,
    ) -> "CommandContext":
        """
        Factory method to create a CommandContext with proper initialization.

        Args:
            config: Optional configuration object
            verbose: Enable verbose output
            quiet: Suppress non-critical output

        Returns:
            Configured CommandContext instance
        """
        config = config or Config()
        logging_config = config.typed().logging
        logger = setup_logger(log_file=logging_config.log_file)

        configure_logging_levels(verbose, quiet, logging_config.level)

        return cls(
            console=default_console,
            error_console=default_error_console,
            logger=logger,
            config=config,
            verbose=verbose,
            quiet=quiet,
        )


class Command(ABC):
    """
    Abstract base class for all CLI commands.

    Each command encapsulates one CLI operation and can be executed
    independently of click, which keeps it testable.
    """

    def __init__(self, context: CommandContext | None = None):
        """
        Initialize command with optional context.

        Args:
            context: Shared command context for dependencies and configuration
        """
        self._context = context

    @abstractmethod
    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute the command with provided arguments.

        Args:
            args: Dictionary of command arguments (from Click)

        Returns:
            Exit code (0 for success, non-zero for failure)
        """

    @property
    def context(self) -> CommandContext:
        """Get command context, creating a default if not set."""
        if self._context is None:
            self._context = CommandContext.create()
        return self._context

    @context.setter
    def context(self, value: CommandContext) -> None:
        self._context = value

    def _get_config(self, config_path: str | None = None) -> Config:
        """
        Load configuration from path or use context config.

        Args:
            config_path: Optional path to custom config file

        Returns:
            Config object instance
        """
        if config_path:
            return Config(config_path)
        if self.context.config is None:
            return Config()
        return self.context.config
