"""Domain entities for the vending event bus."""

from __future__ import annotations

import structlog
from pydantic import BaseModel

from vendbus.domain.enums import EventType
from vendbus.domain.events import MachineEvent
from vendbus.domain.ports import PublishSubscribeService
from vendbus.domain.rules import detect_crossing, is_low_stock

logger = structlog.get_logger(__name__)

DEFAULT_STOCK_LEVEL = 5
DEFAULT_LOW_STOCK_THRESHOLD = 2  # inclusive: low stock is [.., 2]


# ---------------------------------------------------------------------------
# Read models
# ---------------------------------------------------------------------------


class MachineSnapshot(BaseModel):
    """Point-in-time view of a machine's stock."""

    id: str
    stock_level: int
    low_stock: bool


# ---------------------------------------------------------------------------
# Core entities
# ---------------------------------------------------------------------------


class Machine:
    """A vending machine holding a single stock counter.

    Stock changes go through :meth:`_adjust`, which publishes a derived
    event on the shared bus whenever the level crosses the low-stock
    threshold.  The bus and the threshold are fixed at construction.
    Stock is allowed to go negative.
    """

    def __init__(
        self,
        id: str,
        bus: PublishSubscribeService,
        *,
        stock_level: int = DEFAULT_STOCK_LEVEL,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self.id = id
        self.stock_level = stock_level
        self._bus = bus
        self._low_stock_threshold = low_stock_threshold

    @property
    def bus(self) -> PublishSubscribeService:
        return self._bus

    @property
    def low_stock_threshold(self) -> int:
        return self._low_stock_threshold

    @property
    def low_stock(self) -> bool:
        return is_low_stock(self.stock_level, self._low_stock_threshold)

    def consume_stock(self, amount: int) -> None:
        """Remove *amount* units of stock."""
        self._adjust(-amount)

    def refill_stock(self, amount: int) -> None:
        """Add *amount* units of stock."""
        self._adjust(amount)

    def snapshot(self) -> MachineSnapshot:
        return MachineSnapshot(
            id=self.id,
            stock_level=self.stock_level,
            low_stock=self.low_stock,
        )

    def _adjust(self, delta: int) -> None:
        if delta == 0:
            return

        old_level = self.stock_level
        new_level = old_level + delta
        self.stock_level = new_level
        logger.debug(
            "machine.adjusted",
            machine_id=self.id,
            old_level=old_level,
            new_level=new_level,
        )

        crossing = detect_crossing(old_level, new_level, self._low_stock_threshold)
        if crossing is EventType.LOW_STOCK_WARNING:
            self._bus.publish(MachineEvent.low_stock_warning(self.id))
        elif crossing is EventType.STOCK_LEVEL_OK:
            self._bus.publish(MachineEvent.stock_level_ok(self.id))

    def __repr__(self) -> str:
        return f"Machine(id={self.id!r}, stock_level={self.stock_level})"
