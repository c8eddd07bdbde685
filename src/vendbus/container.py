"""Wiring: builds the bus, machines and subscribers from settings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from vendbus.application.subscribers import (
    SUBSCRIBER_TYPES,
    AlertSubscriber,
    MachineSubscriber,
)
from vendbus.config.settings import Settings, get_settings
from vendbus.domain.entities import Machine, MachineSnapshot
from vendbus.domain.enums import EventType
from vendbus.domain.events import MachineEvent
from vendbus.infrastructure.events.bus import InMemoryPublishSubscribeService

logger = structlog.get_logger(__name__)


@dataclass
class Container:
    """Everything a run needs, already subscribed and ready to publish."""

    settings: Settings
    bus: InMemoryPublishSubscribeService
    machines: list[Machine]
    subscribers: dict[EventType, MachineSubscriber] = field(default_factory=dict)
    alert_log: list[MachineEvent] = field(default_factory=list)

    def get_machine(self, machine_id: str) -> Machine | None:
        for machine in self.machines:
            if machine.id == machine_id:
                return machine
        return None

    def publish_all(self, events: Iterable[MachineEvent]) -> int:
        """Publish *events* in order and return how many were published."""
        count = 0
        for event in events:
            self.bus.publish(event)
            count += 1
        logger.info("container.published", count=count, delivered=self.bus.delivered)
        return count

    def snapshots(self) -> list[MachineSnapshot]:
        return [machine.snapshot() for machine in self.machines]

    def alerts(self) -> list[MachineEvent]:
        """Threshold events seen by the alert subscribers, in arrival order."""
        return list(self.alert_log)


def create_container(settings: Settings | None = None) -> Container:
    """Create a container with one machine per configured id.

    Every machine starts at ``settings.default_stock_level`` and shares
    the bus and ``settings.low_stock_threshold``.  The canonical
    subscriber for each event type is created and subscribed.
    """
    settings = settings or get_settings()
    bus = InMemoryPublishSubscribeService()
    machines = [
        Machine(
            machine_id,
            bus,
            stock_level=settings.default_stock_level,
            low_stock_threshold=settings.low_stock_threshold,
        )
        for machine_id in settings.machine_ids
    ]

    subscribers: dict[EventType, MachineSubscriber] = {}
    alert_log: list[MachineEvent] = []
    for event_type, subscriber_cls in SUBSCRIBER_TYPES.items():
        if issubclass(subscriber_cls, AlertSubscriber):
            subscriber = subscriber_cls(machines, alert_log)
        else:
            subscriber = subscriber_cls(machines)
        bus.subscribe(event_type, subscriber)
        subscribers[event_type] = subscriber

    logger.info(
        "container.created",
        machines=len(machines),
        threshold=settings.low_stock_threshold,
        stock_level=settings.default_stock_level,
    )
    return Container(
        settings=settings,
        bus=bus,
        machines=machines,
        subscribers=subscribers,
        alert_log=alert_log,
    )
