"""Custom exceptions for vendbus.

The bus, queue, registry and machines never raise on documented inputs.
These errors belong to the edges: configuration and parsing of events
supplied from the command line.
"""


class VendBusError(Exception):
    """Base exception for all vendbus errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(VendBusError):
    """Raised when there's a configuration problem."""

    pass


class EventParseError(VendBusError):
    """Raised when an event description cannot be parsed."""

    pass
