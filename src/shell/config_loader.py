"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in src/core/config.py.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from src.core.config import Config, ensure_valid_config, validate_config
from src.core.query import USGS_API_BASE


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


def _parse_timeout(value: Any) -> float | None:
    """Parse a timeout value; empty or None means no timeout."""
    if value is None or value == "":
        return None
    return float(value)


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    return Config(
        api_base_url=str(data.get("api_base_url", USGS_API_BASE)),
        request_timeout_seconds=_parse_timeout(data.get("request_timeout_seconds")),
        log_level=str(data.get("log_level", "INFO")).upper(),
    )


def apply_env_overrides(config: Config) -> Config:
    """Override config values from environment variables.

    Environment variables:
        USGS_API_BASE: Event query endpoint
        REQUEST_TIMEOUT: HTTP timeout in seconds
        LOG_LEVEL: Logging level name

    Returns:
        New Config with overrides applied
    """
    api_base_url = os.environ.get("USGS_API_BASE", config.api_base_url)

    timeout = config.request_timeout_seconds
    if "REQUEST_TIMEOUT" in os.environ:
        timeout = _parse_timeout(os.environ["REQUEST_TIMEOUT"])

    log_level = os.environ.get("LOG_LEVEL", config.log_level).upper()

    return Config(
        api_base_url=api_base_url,
        request_timeout_seconds=timeout,
        log_level=log_level,
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file plus environment overrides.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
        ValueError: If a numeric setting cannot be parsed, or the
            config has critical validation errors
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    data = None
    if path.exists():
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        if data is None:
            logger.warning("Config file is empty, using defaults")
    else:
        logger.warning("Config file not found: %s, using defaults", path)

    config = load_config_from_dict(data) if data else Config()
    config = apply_env_overrides(config)

    result = validate_config(config)
    for error in result.errors:
        log = logger.error if error.severity == "error" else logger.warning
        log("Config %s: %s", error.field, error.message)

    ensure_valid_config(config)

    logger.info(
        "Loaded config: api=%s timeout=%s",
        config.api_base_url,
        config.request_timeout_seconds,
    )

    return config
