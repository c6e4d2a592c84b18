"""
Configuration Management Module

Handles loading and managing configuration settings from YAML files.
"""

import copy
import logging
from typing import Dict, Any, Optional
from pathlib import Path

import yaml

from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = "grater.yaml"

MIN_DELAY = 2
MAX_DELAY = 30

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULTS: Dict[str, Any] = {
    'delay': {
        'min_seconds': MIN_DELAY,
        'max_seconds': MAX_DELAY,
    },
    'window': {
        'title': 'grater',
    },
    'logging': {
        'level': 'INFO',
        'log_file': None,
        'max_log_size_mb': 50,
        'backup_count': 5,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """Manages application configuration settings."""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH, required: bool = False):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
            required: Fail if the file does not exist instead of using defaults
        """
        self.config_path = Path(config_path)
        self.required = required
        self.config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file, layered over the defaults."""
        try:
            if not self.config_path.exists():
                if self.required:
                    raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
                self.config = copy.deepcopy(DEFAULTS)
                return

            with open(self.config_path, 'r', encoding='utf-8') as file:
                loaded = yaml.safe_load(file) or {}

            if not isinstance(loaded, dict):
                raise ValueError(f"Configuration root must be a mapping: {self.config_path}")

            self.config = _merge(DEFAULTS, loaded)

        except Exception as e:
            logging.error(f"Failed to load configuration: {e}")
            raise

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'delay.min_seconds')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'window.title')
            value: Value to set
        """
        keys = key.split('.')
        config_ref = self.config

        for k in keys[:-1]:
            if not isinstance(config_ref.get(k), dict):
                config_ref[k] = {}
            config_ref = config_ref[k]

        config_ref[keys[-1]] = value

    def save_config(self) -> None:
        """Save current configuration to file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as file:
                yaml.dump(self.config, file, default_flow_style=False, indent=2)
        except Exception as e:
            logging.error(f"Failed to save configuration: {e}")
            raise

    def validate_delays(self) -> None:
        """
        Check the delay range.

        Raises:
            ConfigurationError: If the bounds are not integers with 0 <= min < max
        """
        min_delay = self.get('delay.min_seconds')
        max_delay = self.get('delay.max_seconds')

        for name, value in (('delay.min_seconds', min_delay), ('delay.max_seconds', max_delay)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")

        if min_delay < 0:
            raise ConfigurationError(f"delay.min_seconds must not be negative, got {min_delay}")

        if min_delay >= max_delay:
            raise ConfigurationError(
                f"delay.min_seconds ({min_delay}) must be less than delay.max_seconds ({max_delay})"
            )

    def validate_logging(self) -> None:
        """
        Check the logging settings.

        Raises:
            ConfigurationError: If the level is not a level name or a size/count is not an integer
        """
        level = self.get('logging.level')
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
            )

        for name in ('logging.max_log_size_mb', 'logging.backup_count'):
            value = self.get(name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(f"{name} must be a non-negative integer, got {value!r}")

    def get_delay_range(self) -> tuple:
        """Get the validated (min, max) delay range in seconds."""
        self.validate_delays()
        return self.get('delay.min_seconds'), self.get('delay.max_seconds')

    def get_window_title(self) -> str:
        """Get the window title."""
        return str(self.get('window.title', 'grater'))

    def get_log_file_path(self) -> Optional[Path]:
        """Get the full path to the log file, if file logging is configured."""
        log_file = self.get('logging.log_file')
        return Path(log_file) if log_file else None
