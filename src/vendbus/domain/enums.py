"""Domain enumerations for the vending event bus."""

from __future__ import annotations

from enum import Enum


class EventType(str, Enum):
    """The closed set of event types carried by the bus.

    ``SALE`` and ``REFILL`` come from outside producers.  The two stock
    level events are derived: machines emit them when an adjustment
    crosses the low-stock threshold.
    """

    SALE = "SALE"
    REFILL = "REFILL"
    LOW_STOCK_WARNING = "LOW_STOCK_WARNING"
    STOCK_LEVEL_OK = "STOCK_LEVEL_OK"

    @property
    def is_derived(self) -> bool:
        """Return True for threshold-crossing events emitted by machines."""
        return self in (EventType.LOW_STOCK_WARNING, EventType.STOCK_LEVEL_OK)
