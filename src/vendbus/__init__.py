"""In-process publish/subscribe bus for vending machine stock events."""

__version__ = "1.0.0"
