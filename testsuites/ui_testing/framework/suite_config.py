"""
================================================================================
Suite Configuration
================================================================================

YAML-based configuration for the Swag Labs UI suite with environment variable
override support.

Features:
    - Single immutable SuiteConfig value loaded once per process
    - Environment variable override (SWAGLABS_BASE_URL_QA overrides base.url.qa)
    - Dot notation path access
    - Non-fatal loading: a missing or broken file falls back to defaults
    - Explicit > configured > default resolution for each browser session

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger


PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Default configuration file path
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "config.yaml"

# Environment variable selecting another configuration file
CONFIG_FILE_ENV = "SUITE_CONFIG_FILE"

# Prefix of the environment variables overriding configuration keys
ENV_PREFIX = "SWAGLABS_"

DEFAULT_BROWSER = "chromium"
DEFAULT_HEADLESS = True
DEFAULT_ENVIRONMENT = "dev"
DEFAULT_BASE_URL = "https://www.saucedemo.com/"
DEFAULT_SCREENSHOT_DIR = PROJECT_ROOT / "reports" / "screenshots"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class SessionSettings:
    """Effective settings for one browser session."""
    browser_kind: str
    headless: bool
    environment: str
    base_url: str


@dataclass(frozen=True)
class SuiteConfig:
    """
    Read-only suite configuration.

    Attributes:
        browser: Configured browser kind (may be unsupported, resolved later)
        headless: Launch browsers without a window
        environment: Target environment name (dev, qa, prod, ...)
        base_urls: Base URL per environment
        username: Standard user name for the happy-path tests
        password: Standard user password
        screenshot_dir: Directory receiving screenshot PNG files
        log_level: Loguru level for the console sink
        log_file: Optional log file path
    """
    browser: str = DEFAULT_BROWSER
    headless: bool = DEFAULT_HEADLESS
    environment: str = DEFAULT_ENVIRONMENT
    base_urls: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    username: Optional[str] = None
    password: Optional[str] = None
    screenshot_dir: Path = DEFAULT_SCREENSHOT_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    def base_url(self, environment: Optional[str] = None) -> str:
        """Return the base URL for an environment (defaults to the configured one)."""
        return self.base_urls.get((environment or self.environment).lower(), DEFAULT_BASE_URL)

    def resolve(
        self,
        browser_kind: Optional[str] = None,
        environment: Optional[str] = None,
    ) -> SessionSettings:
        """
        Resolve session settings.

        Explicit arguments win over configured values, which already carry the
        hard-coded defaults for keys that were not configured.

        Args:
            browser_kind: Explicit browser kind (e.g. from --browser-kind)
            environment: Explicit environment (e.g. from --environment)

        Returns:
            SessionSettings for a new browser session
        """
        kind = browser_kind or self.browser
        env = environment or self.environment
        return SessionSettings(
            browser_kind=kind,
            headless=self.headless,
            environment=env,
            base_url=self.base_url(env),
        )


class _ConfigSource:
    """Dot-notation lookup over a YAML mapping with env var overrides."""

    def __init__(self, data: Dict[str, Any]):
        self._data = data

    def get(self, key: str, default: Any = None) -> Any:
        # Check environment variable first
        env_key = ENV_PREFIX + key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return _convert_type(env_value, default)

        value: Any = self._data
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def base_urls(self) -> Dict[str, str]:
        """Base URL per environment, keyed by lower-cased environment name."""
        urls = self.get("base.url", {})
        result = {
            str(env).lower(): str(url)
            for env, url in (urls.items() if isinstance(urls, dict) else ())
            if url
        }
        prefix = ENV_PREFIX + "BASE_URL_"
        result.update(
            (key[len(prefix):].lower(), value)
            for key, value in os.environ.items()
            if key.startswith(prefix) and value
        )
        return result


def _convert_type(value: str, reference: Any) -> Any:
    """
    Convert string value to match reference type.

    Used for environment variables which are always strings.
    """
    if isinstance(reference, bool):
        return _as_bool(value)
    return value


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def _as_path(value: Any) -> Path:
    """Relative paths are taken from the project root."""
    path = Path(value)
    return path if path.is_absolute() else PROJECT_ROOT / path


def _optional_path(value: Any) -> Optional[str]:
    return str(_as_path(value)) if value else None


def _read_yaml(path: Path) -> Dict[str, Any]:
    """Read a YAML mapping; failures are logged and yield an empty mapping."""
    if not path.exists():
        logger.error(
            f"Configuration file not found: {path}. "
            f"Using defaults and environment variables only."
        )
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load configuration from {path}. Using defaults. Error: {e}")
        return {}

    if not isinstance(data, dict):
        logger.error(f"Configuration file {path} is not a mapping. Using defaults.")
        return {}

    logger.info(f"Configuration loaded from: {path}")
    return data


def load_suite_config(config_path: Optional[Path] = None) -> SuiteConfig:
    """
    Load the suite configuration.

    Lookup order for every key (highest to lowest priority):
        1. Environment variable (SWAGLABS_ + dot path upper-cased, dots -> underscores)
        2. YAML configuration file
        3. Hard-coded default

    Args:
        config_path: YAML file to read. Falls back to $SUITE_CONFIG_FILE,
                     then DEFAULT_CONFIG_PATH.

    Returns:
        Immutable SuiteConfig
    """
    if config_path is None:
        config_path = Path(os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_PATH))

    source = _ConfigSource(_read_yaml(Path(config_path)))

    return SuiteConfig(
        browser=str(source.get("browser", DEFAULT_BROWSER)),
        headless=_as_bool(source.get("headless", DEFAULT_HEADLESS)),
        environment=str(source.get("environment", DEFAULT_ENVIRONMENT)),
        base_urls=MappingProxyType(source.base_urls()),
        username=source.get("standard.username"),
        password=source.get("standard.password"),
        screenshot_dir=_as_path(source.get("screenshots.dir", str(DEFAULT_SCREENSHOT_DIR))),
        log_level=str(source.get("logging.level", DEFAULT_LOG_LEVEL)),
        log_file=_optional_path(source.get("logging.file")),
    )


__all__ = [
    "SuiteConfig",
    "SessionSettings",
    "load_suite_config",
    "DEFAULT_BROWSER",
    "DEFAULT_BASE_URL",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_HEADLESS",
]
