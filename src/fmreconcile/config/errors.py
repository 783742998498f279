"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration value is present but not recognised."""

    def __init__(self, *, name: str, value: str, allowed: tuple[str, ...]) -> None:
        self.name = name
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid value for {name}: {value!r} (expected one of: {', '.join(allowed)})"
        )
