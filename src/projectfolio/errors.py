# src/projectfolio/errors.py
from __future__ import annotations


class ProjectfolioError(Exception):
    """Base exception for all projectfolio errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigError(ProjectfolioError):
    """Raised when config is missing or invalid."""


class MissingSettingError(ConfigError):
    """Raised when a required configuration value is absent."""

    def __init__(self, setting_name: str, message: str | None = None) -> None:
        detail = message or f"Missing required setting: {setting_name}"
        super().__init__(detail, hint=f"Set `{setting_name}` in the config file.")
        self.setting_name = setting_name


class ProjectRepositoryError(ProjectfolioError):
    """Raised when a project document cannot be read."""


class MalformedStructuredValueError(ProjectfolioError, ValueError):
    """Raised when a ``{...}`` front-matter value is not valid JSON."""

    def __init__(self, key: str, raw_value: str, reason: str) -> None:
        super().__init__(
            f"Malformed structured value for '{key}': {reason}",
            hint="Structured values must be JSON objects, e.g. {\"github\": \"https://...\"}.",
        )
        self.key = key
        self.raw_value = raw_value
