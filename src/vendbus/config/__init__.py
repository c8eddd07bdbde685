"""Configuration module for vendbus."""

from typing import Any

from pydantic import ValidationError

from vendbus.config.logging import configure_logging
from vendbus.config.settings import Settings, get_settings
from vendbus.core.exceptions import ConfigurationError


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment plus explicit *overrides*.

    ``None`` overrides are ignored.  Invalid values raise
    ``ConfigurationError``.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration",
            {"errors": [err["msg"] for err in e.errors()]},
        ) from e


__all__ = [
    "Settings",
    "configure_logging",
    "get_settings",
    "load_settings",
]
