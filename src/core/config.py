"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

import logging
from dataclasses import dataclass, field

from src.core.query import USGS_API_BASE


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        api_base_url: USGS event query endpoint
        request_timeout_seconds: HTTP timeout, None to wait indefinitely
        log_level: Logging level name
    """
    api_base_url: str = USGS_API_BASE
    request_timeout_seconds: float | None = None
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, INFO if the name is unknown."""
        return getattr(logging, self.log_level.upper(), logging.INFO)


@dataclass
class ConfigIssue:
    """A configuration problem found by validate_config.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ConfigIssue] = field(default_factory=list)

    @property
    def warnings(self) -> list[ConfigIssue]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ConfigIssue]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ConfigIssue] = []

    if not config.api_base_url.startswith(("http://", "https://")):
        errors.append(ConfigIssue(
            field="api_base_url",
            message=f"Expected an http(s) URL, got {config.api_base_url!r}",
        ))
    elif config.api_base_url.startswith("http://"):
        errors.append(ConfigIssue(
            field="api_base_url",
            message="API base URL is not using HTTPS",
            severity="warning",
        ))

    timeout = config.request_timeout_seconds
    if timeout is not None and timeout <= 0:
        errors.append(ConfigIssue(
            field="request_timeout_seconds",
            message=f"Timeout must be positive, got {timeout}",
        ))

    if config.log_level.upper() not in LOG_LEVELS:
        errors.append(ConfigIssue(
            field="log_level",
            message=f"Unknown log level {config.log_level!r}, using INFO",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )


def ensure_valid_config(config: Config) -> ValidationResult:
    """Validate configuration and reject it if it has critical errors.

    Pure function.

    Returns:
        ValidationResult (only warnings remain)

    Raises:
        ValueError: If any critical error was found
    """
    result = validate_config(config)

    if not result.valid:
        details = "; ".join(
            f"{e.field}: {e.message}" for e in result.critical_errors
        )
        raise ValueError(f"Invalid configuration: {details}")

    return result
