"""Domain events for the vending event bus.

Every event is a frozen dataclass, so two events carrying the same
payload compare equal and nothing can mutate one after it was published.
A single ``MachineEvent`` type tagged with an ``EventType`` covers all
four kinds; subscribers match on ``event.type``.
"""

from __future__ import annotations

from dataclasses import dataclass

from vendbus.domain.enums import EventType


@dataclass(frozen=True)
class MachineEvent:
    """Something that happened to one machine.

    ``quantity`` is the sold or refilled amount and is ``None`` for the
    derived stock level events.
    """

    type: EventType
    machine_id: str
    quantity: int | None = None

    @classmethod
    def sale(cls, machine_id: str, quantity: int) -> MachineEvent:
        return cls(EventType.SALE, machine_id, quantity)

    @classmethod
    def refill(cls, machine_id: str, quantity: int) -> MachineEvent:
        return cls(EventType.REFILL, machine_id, quantity)

    @classmethod
    def low_stock_warning(cls, machine_id: str) -> MachineEvent:
        return cls(EventType.LOW_STOCK_WARNING, machine_id)

    @classmethod
    def stock_level_ok(cls, machine_id: str) -> MachineEvent:
        return cls(EventType.STOCK_LEVEL_OK, machine_id)

    def __str__(self) -> str:
        if self.quantity is None:
            return f"{self.type.value}({self.machine_id})"
        return f"{self.type.value}({self.machine_id}, qty={self.quantity})"
