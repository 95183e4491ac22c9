#!/usr/bin/env python3
"""
icocheck Configuration Schemas - Typed Dataclasses
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

from dataclasses import asdict, dataclass, field
from typing import Any

from ..core.constants import DEFAULT_ICON_PATH, EXIT_INVALID, EXIT_IO_FAILURE

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TargetConfig:
    """Icon file checked when no path is given on the command line"""

    path: str = DEFAULT_ICON_PATH

    def __post_init__(self):
        """Validate configuration values"""
        if not isinstance(self.path, str) or not self.path.strip():
            raise ValueError("target path must be a non-empty string")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration"""

    level: str = "WARNING"
    log_file: str | None = None

    def __post_init__(self):
        """Validate configuration values"""
        if str(self.level).upper() not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")


@dataclass(frozen=True)
class ExitCodeConfig:
    """Process exit codes for the two failure verdicts"""

    invalid: int = EXIT_INVALID
    io_failure: int = EXIT_IO_FAILURE

    def __post_init__(self):
        """Validate configuration values"""
        for name in ("invalid", "io_failure"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not (1 <= value <= 255):
                raise ValueError(f"{name} exit code must be an integer between 1 and 255")


@dataclass(frozen=True)
class IcoCheckConfig:
    """Complete icocheck configuration"""

    target: TargetConfig = field(default_factory=TargetConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    exit_codes: ExitCodeConfig = field(default_factory=ExitCodeConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IcoCheckConfig":
        """Build typed configuration from a nested dictionary, ignoring unknown keys"""
        return cls(
            target=TargetConfig(**_known(TargetConfig, data.get("target", {}))),
            logging=LoggingConfig(**_known(LoggingConfig, data.get("logging", {}))),
            exit_codes=ExitCodeConfig(**_known(ExitCodeConfig, data.get("exit_codes", {}))),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _known(schema: type, values: Any) -> dict[str, Any]:
    if not isinstance(values, dict):
        raise ValueError(f"{schema.__name__} section must be an object")
    names = schema.__dataclass_fields__.keys()
    return {key: value for key, value in values.items() if key in names}
