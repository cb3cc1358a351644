"""
Configuration management with YAML and environment variable support.

Environment variables take precedence over YAML configuration.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from lunarpick.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Closed interval covered by the calendar data
SUPPORTED_MIN_YEAR = 1900
SUPPORTED_MAX_YEAR = 2100

ENV_PREFIX = "LUNARPICK_"

# Default configuration paths
DEFAULT_CONFIG_PATHS = [
    Path("lunarpick.yaml"),
    Path("lunarpick.yml"),
    Path("config/lunarpick.yaml"),
    Path.home() / ".lunarpick" / "config.yaml",
]


class Config:
    """
    YAML + environment variable integrated configuration management.

    Environment variables take precedence over YAML values.
    Supports nested key access with dot notation (e.g., "calendar.min_year").

    Usage:
        config = Config()
        first, last = config.year_range
        show_ganzhi = config.get("display.ganzhi", default=True)
    """

    def __init__(self, config_path: Path | str | None = None, env_file: Path | str | None = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file. If None, searches default locations.
            env_file: Path to .env file. If None, searches current directory.
        """
        env_path = Path(env_file) if env_file else None
        load_dotenv(dotenv_path=env_path, override=False)

        self._config: dict[str, Any] = {}
        self._config_path: Path | None = None

        self._load_yaml(config_path)

        logger.debug("Configuration initialized from: %s", self._config_path or "defaults only")

    def _load_yaml(self, config_path: Path | str | None = None) -> None:
        """Load YAML configuration file."""
        if config_path:
            path = Path(config_path)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")
            self._config_path = path
        else:
            for default_path in DEFAULT_CONFIG_PATHS:
                if default_path.exists():
                    self._config_path = default_path
                    break

        if self._config_path:
            try:
                with self._config_path.open("r", encoding="utf-8") as f:
                    loaded = yaml.safe_load(f)
                    if loaded:
                        if not isinstance(loaded, dict):
                            raise ConfigurationError(
                                f"Top level of {self._config_path} must be a mapping"
                            )
                        self._config = loaded
                logger.info("Loaded configuration from: %s", self._config_path)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self._config_path}: {e}") from e
            except OSError as e:
                raise ConfigurationError(f"Failed to read {self._config_path}: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Environment variable mapping:
            "calendar.min_year" -> LUNARPICK_CALENDAR_MIN_YEAR

        Args:
            key: Configuration key (dot notation supported)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        env_key = f"{ENV_PREFIX}{key.upper().replace('.', '_')}"
        env_value = os.getenv(env_key)

        if env_value is not None:
            value = self._parse_env_value(env_value)
            logger.debug("Config %s from env: %s", key, value)
            return value

        value = self._get_nested(key)
        if value is not None:
            logger.debug("Config %s from yaml: %s", key, value)
            return value

        return default

    def _get_nested(self, key: str) -> Any:
        """Get nested value from config dict using dot notation."""
        parts = key.split(".")
        value = self._config

        for part in parts:
            if isinstance(value, dict):
                value = value.get(part)
            else:
                return None
            if value is None:
                return None

        return value

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """Parse environment variable string to appropriate type."""
        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        return value

    def _get_int(self, key: str, default: int) -> int:
        value = self.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{key} must be an integer, got {value!r}")
        return value

    @property
    def year_range(self) -> tuple[int, int]:
        """
        Supported lunar year interval (inclusive).

        May narrow the calendar's own range but never widen it.
        """
        first = self._get_int("calendar.min_year", SUPPORTED_MIN_YEAR)
        last = self._get_int("calendar.max_year", SUPPORTED_MAX_YEAR)

        if first > last:
            raise ConfigurationError(
                "calendar.min_year must not exceed calendar.max_year",
                details={"min_year": first, "max_year": last},
            )
        if first < SUPPORTED_MIN_YEAR or last > SUPPORTED_MAX_YEAR:
            raise ConfigurationError(
                f"Year range must stay within {SUPPORTED_MIN_YEAR}..{SUPPORTED_MAX_YEAR}",
                details={"min_year": first, "max_year": last},
            )
        return first, last

    @property
    def show_ganzhi(self) -> bool:
        """Whether year labels carry the sexagenary name."""
        return bool(self.get("display.ganzhi", True))

    @property
    def log_level(self) -> str:
        """Root log level name for entry points."""
        return str(self.get("logging.level", "WARNING")).upper()

    def __repr__(self) -> str:
        return f"Config(path={self._config_path})"
