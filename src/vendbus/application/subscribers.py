"""Machine subscribers.

Each subscriber matches on ``event.type`` and ignores everything it is
not built for, including events naming a machine it cannot find.  All
subscribers share the same machine collection; they never own it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

import structlog

from vendbus.domain.entities import Machine
from vendbus.domain.enums import EventType
from vendbus.domain.events import MachineEvent

logger = structlog.get_logger(__name__)


class MachineSubscriber(ABC):
    """Base class for subscribers acting on a shared machine collection."""

    def __init__(self, machines: Sequence[Machine]) -> None:
        self.machines = machines

    @abstractmethod
    def handle(self, event: MachineEvent) -> None:
        """React to *event*; a no-op for anything this subscriber ignores."""
        ...

    def get_event_machine(self, event: MachineEvent) -> Machine | None:
        """Return the machine named by *event*, or None if there is none."""
        for machine in self.machines:
            if machine.id == event.machine_id:
                return machine
        return None

    def __str__(self) -> str:
        return type(self).__name__


class MachineSaleSubscriber(MachineSubscriber):
    """Consumes stock on the machine a sale happened on."""

    def handle(self, event: MachineEvent) -> None:
        if event.type is not EventType.SALE:
            return
        machine = self.get_event_machine(event)
        if machine is None:
            return
        logger.info("subscriber.sale", machine_id=machine.id, quantity=event.quantity)
        machine.consume_stock(event.quantity or 0)


class MachineRefillSubscriber(MachineSubscriber):
    """Adds stock to the refilled machine."""

    def handle(self, event: MachineEvent) -> None:
        if event.type is not EventType.REFILL:
            return
        machine = self.get_event_machine(event)
        if machine is None:
            return
        logger.info("subscriber.refill", machine_id=machine.id, quantity=event.quantity)
        machine.refill_stock(event.quantity or 0)


class AlertSubscriber(MachineSubscriber):
    """Records derived stock level events of one type.

    Pass the same *alerts* list to several alert subscribers to keep a
    single log in arrival order.
    """

    event_type: EventType

    def __init__(
        self,
        machines: Sequence[Machine],
        alerts: list[MachineEvent] | None = None,
    ) -> None:
        super().__init__(machines)
        self.alerts = alerts if alerts is not None else []

    def handle(self, event: MachineEvent) -> None:
        if event.type is not self.event_type:
            return
        self.alerts.append(event)
        self._log(event)

    @abstractmethod
    def _log(self, event: MachineEvent) -> None: ...


class MachineLowStockWarningSubscriber(AlertSubscriber):
    """Records and logs machines entering the low-stock band."""

    event_type = EventType.LOW_STOCK_WARNING

    def _log(self, event: MachineEvent) -> None:
        logger.warning("subscriber.low_stock_warning", machine_id=event.machine_id)


class MachineStockLevelOkSubscriber(AlertSubscriber):
    """Records and logs machines leaving the low-stock band."""

    event_type = EventType.STOCK_LEVEL_OK

    def _log(self, event: MachineEvent) -> None:
        logger.info("subscriber.stock_level_ok", machine_id=event.machine_id)


# Canonical subscriber for each event type
SUBSCRIBER_TYPES: dict[EventType, type[MachineSubscriber]] = {
    EventType.SALE: MachineSaleSubscriber,
    EventType.REFILL: MachineRefillSubscriber,
    EventType.LOW_STOCK_WARNING: MachineLowStockWarningSubscriber,
    EventType.STOCK_LEVEL_OK: MachineStockLevelOkSubscriber,
}
