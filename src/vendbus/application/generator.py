"""Random sale/refill event source for simulations."""

from __future__ import annotations

import random
from collections.abc import Sequence

import structlog

from vendbus.domain.events import MachineEvent

logger = structlog.get_logger(__name__)

SALE_QUANTITY = (1, 2)
REFILL_QUANTITY = (3, 5)


class EventGenerator:
    """Produces random events against a fixed set of machine ids.

    Sales are far more frequent than refills by default so that runs
    regularly push machines across the low-stock threshold.  Pass
    *seed* for a reproducible sequence.
    """

    def __init__(
        self,
        machine_ids: Sequence[str],
        *,
        seed: int | None = None,
        sale_ratio: float = 0.9,
    ) -> None:
        if not machine_ids:
            raise ValueError("machine_ids must not be empty")
        if not 0.0 <= sale_ratio <= 1.0:
            raise ValueError("sale_ratio must be between 0 and 1")
        self.machine_ids = list(machine_ids)
        self.sale_ratio = sale_ratio
        self._random = random.Random(seed)

    def next(self) -> MachineEvent:
        machine_id = self._random.choice(self.machine_ids)
        if self._random.random() < self.sale_ratio:
            event = MachineEvent.sale(machine_id, self._random.randint(*SALE_QUANTITY))
        else:
            event = MachineEvent.refill(machine_id, self._random.randint(*REFILL_QUANTITY))
        logger.debug("generator.created", machine_event=str(event))
        return event

    def generate(self, count: int) -> list[MachineEvent]:
        """Return *count* freshly generated events."""
        return [self.next() for _ in range(count)]
