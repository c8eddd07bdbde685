"""Core errors shared across vendbus."""

from vendbus.core.exceptions import (
    ConfigurationError,
    EventParseError,
    VendBusError,
)

__all__ = [
    "VendBusError",
    "ConfigurationError",
    "EventParseError",
]
