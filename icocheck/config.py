#!/usr/bin/env python3
"""
icocheck Configuration Management
"""

import copy
import json
import os
from typing import Any

from .config_schemas import IcoCheckConfig
from .core.constants import DEFAULT_ICON_PATH, EXIT_INVALID, EXIT_IO_FAILURE


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded or is malformed"""


class Config:
    """Configuration manager for icocheck"""

    DEFAULT_CONFIG: dict[str, Any] = {
        "target": {"path": DEFAULT_ICON_PATH},
        "logging": {"level": "WARNING", "log_file": None},
        "exit_codes": {"invalid": EXIT_INVALID, "io_failure": EXIT_IO_FAILURE},
    }

    def __init__(self, config_path: str | None = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path

        # No implicit config file: a build preflight must not write
        if config_path is not None:
            self.load_config()

    def load_config(self) -> None:
        """Load configuration from file"""
        if not os.path.isfile(self.config_path):
            raise ConfigError(f"Config file not found: {self.config_path}")
        try:
            with open(self.config_path, encoding="utf-8") as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Could not load config from {self.config_path}: {e}") from e

        if not isinstance(user_config, dict):
            raise ConfigError(f"Config root must be a JSON object: {self.config_path}")
        self._merge_config(user_config)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def get(self, section: str, key: str | None = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value) -> None:
        """Set configuration value"""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def typed(self) -> IcoCheckConfig:
        """Return validated, typed configuration"""
        try:
            return IcoCheckConfig.from_dict(self.config)
        except (TypeError, ValueError) as e:
            source = self.config_path or "defaults"
            raise ConfigError(f"Invalid configuration in {source}: {e}") from e

    def get_target_path(self) -> str:
        return self.typed().target.path

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key):
        """Allow 'in' operator"""
        return key in self.config
