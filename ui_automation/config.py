"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - YAML configuration file (config/config.yaml)
    - Environment variable override (BASE_URL overrides base_url,
      API_KEY overrides api.key)
    - Dot notation path access with default values
    - Fail-fast accessors for required secrets

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .exceptions import ConfigurationError, MissingConfigurationError


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "config.yaml"

DEFAULT_BASE_URL = "https://the-internet.herokuapp.com"
DEFAULT_TIMEOUT_MS = 10000


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.
    
    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (BASE_URL)
        2. YAML configuration file
        3. Default values
    
    Usage:
        >>> config = ConfigLoader()
        >>> config.get("base_url", "https://the-internet.herokuapp.com")
        'https://the-internet.herokuapp.com'
        
        >>> config.get("default_timeout", 10000)
        10000
    
    Environment Variable Mapping:
        - base_url -> BASE_URL
        - test.username -> TEST_USERNAME
        - api.key -> API_KEY
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton pattern - configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.
        
        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return
        
        self._config_path = Path(config_path or DEFAULT_CONFIG_PATH)
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.
        
        First checks environment variables, then YAML config, then default.
        
        Args:
            key: Dot-notation path (e.g., "api.base_url")
            default: Default value if key not found
        
        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None
            
            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section, or an empty dict."""
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.
        
        Used for environment variables which are always strings.
        """
        if reference is None:
            return value
        
        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value
        
        return value

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance (used by tests)."""
        cls._instance = None
        cls._config = {}


class EnvConfig:
    """
    Named accessors over ConfigLoader with fallback values.

    Secrets (credentials, API key/token) are never read from YAML defaults;
    they fail fast with MissingConfigurationError at the point of use.
    """

    @staticmethod
    def _required(key: str) -> str:
        value = ConfigLoader().get(key)
        if value is None or str(value).strip() == "":
            raise MissingConfigurationError(key.upper().replace(".", "_"))
        return str(value)

    @staticmethod
    def get_base_url() -> str:
        return str(ConfigLoader().get("base_url") or DEFAULT_BASE_URL).rstrip("/")

    @staticmethod
    def get_username() -> str:
        return EnvConfig._required("test.username")

    @staticmethod
    def get_password() -> str:
        return EnvConfig._required("test.password")

    @staticmethod
    def get_browser() -> str:
        return str(ConfigLoader().get("browser") or "chrome").lower()

    @staticmethod
    def is_headless() -> bool:
        return bool(ConfigLoader().get("headless", False))

    @staticmethod
    def get_environment() -> str:
        return str(ConfigLoader().get("environment") or "staging")

    @staticmethod
    def get_default_timeout() -> int:
        """Default driver timeout in milliseconds; unparsable values fall back."""
        value = ConfigLoader().get("default_timeout", DEFAULT_TIMEOUT_MS)
        try:
            return int(value) or DEFAULT_TIMEOUT_MS
        except (TypeError, ValueError):
            return DEFAULT_TIMEOUT_MS

    @staticmethod
    def get_api_base_url() -> str:
        return str(ConfigLoader().get("api.base_url") or "https://api.example.com")

    @staticmethod
    def get_api_key() -> str:
        return EnvConfig._required("api.key")

    @staticmethod
    def get_api_token() -> str:
        return EnvConfig._required("api.token")

    @staticmethod
    def should_save_screenshots() -> bool:
        return bool(ConfigLoader().get("save_screenshots", False))

    @staticmethod
    def get_report_path() -> Path:
        return Path(ConfigLoader().get("report_path") or "./reports")

    @staticmethod
    def should_run_e2e() -> bool:
        return bool(ConfigLoader().get("run_e2e", False))


__all__ = [
    "ConfigLoader",
    "EnvConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG_PATH",
]
