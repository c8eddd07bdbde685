"""Port definitions (hexagonal architecture).

Each Protocol defines a boundary that infrastructure adapters must satisfy.
Machines and subscribers depend only on these Protocols, never on the
concrete bus.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from vendbus.domain.enums import EventType
from vendbus.domain.events import MachineEvent


# ---------------------------------------------------------------------------
# Delivery ports
# ---------------------------------------------------------------------------


@runtime_checkable
class Subscriber(Protocol):
    """Receives events from the publish/subscribe service.

    ``handle`` must be a no-op for event types or machines the subscriber
    does not care about.
    """

    def handle(self, event: MachineEvent) -> None: ...


@runtime_checkable
class PublishSubscribeService(Protocol):
    """Publish/subscribe in-memory event bus."""

    def publish(self, event: MachineEvent) -> None: ...
    def subscribe(self, event_type: EventType, subscriber: Subscriber) -> None: ...
    def unsubscribe(self, event_type: EventType, subscriber: Subscriber) -> None: ...
