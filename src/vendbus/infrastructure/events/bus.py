"""In-memory event bus.

Simple publish/subscribe for machine events.  Handlers are called
synchronously in subscription order.  Implements the
``PublishSubscribeService`` port.

Publishing from inside a handler only enqueues: the outermost
``publish`` call keeps draining the shared queue until it is empty, so
events are delivered in the global order they were published and every
consequence of an event settles before that call returns.
"""

from __future__ import annotations

import structlog

from vendbus.domain.enums import EventType
from vendbus.domain.events import MachineEvent
from vendbus.domain.ports import Subscriber
from vendbus.infrastructure.events.queue import EventQueue
from vendbus.infrastructure.events.registry import SubscriptionRegistry

logger = structlog.get_logger(__name__)


class InMemoryPublishSubscribeService:
    """Synchronous in-memory event bus."""

    def __init__(self) -> None:
        self._queue: EventQueue[MachineEvent] = EventQueue()
        self._registry = SubscriptionRegistry()
        self._draining = False
        self._delivered = 0

    @property
    def pending(self) -> int:
        """Number of events queued but not yet delivered."""
        return len(self._queue)

    @property
    def delivered(self) -> int:
        """Total number of ``handle`` calls made so far."""
        return self._delivered

    def subscribers(self, event_type: EventType) -> list[Subscriber]:
        return self._registry.subscribers(event_type)

    def subscribe(self, event_type: EventType, subscriber: Subscriber) -> None:
        """Register *subscriber* to be called when *event_type* is published.

        Has no effect if it is already registered to that type.
        """
        if self._registry.subscribe(event_type, subscriber):
            logger.debug(
                "bus.subscribed",
                event_type=event_type.value,
                subscriber=str(subscriber),
                enrolled_at=self._registry.enrolled_at(event_type, subscriber),
            )

    def unsubscribe(self, event_type: EventType, subscriber: Subscriber) -> None:
        """Stop calling *subscriber* for *event_type*.

        Has no effect if it was not registered in the first place.
        """
        if self._registry.unsubscribe(event_type, subscriber):
            logger.debug("bus.unsubscribed", event_type=event_type.value, subscriber=str(subscriber))

    def publish(self, event: MachineEvent) -> None:
        """Queue *event* and deliver everything pending.

        Errors raised by a handler propagate to the outermost caller.
        Events still queued at that point stay pending and go out with
        the next ``publish``.
        """
        self._queue.enqueue(event)
        if self._draining:
            return

        self._draining = True
        try:
            self._drain()
        finally:
            self._draining = False

    def _drain(self) -> None:
        while (event := self._queue.dequeue()) is not None:
            as_of = self._registry.tick()
            for subscriber in self._registry.eligible(event.type, as_of):
                # an earlier handler for this event may have unsubscribed it
                if not self._registry.is_subscribed(event.type, subscriber):
                    continue
                logger.debug("bus.delivering", machine_event=str(event), subscriber=str(subscriber))
                self._delivered += 1
                subscriber.handle(event)
