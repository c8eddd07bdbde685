"""In-memory event delivery: queue, subscription registry and bus."""

from vendbus.infrastructure.events.bus import InMemoryPublishSubscribeService
from vendbus.infrastructure.events.queue import EventQueue
from vendbus.infrastructure.events.registry import SubscriptionRegistry

__all__ = [
    "EventQueue",
    "InMemoryPublishSubscribeService",
    "SubscriptionRegistry",
]
