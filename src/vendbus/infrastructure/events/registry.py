"""Subscription bookkeeping for the in-memory bus.

Tracks which subscribers are enrolled for each event type and when they
enrolled.  Enrollment times come from a logical clock that the bus also
reads when an event starts delivery, so a subscriber only sees events
whose delivery began after it subscribed.

Subscribers are tracked by identity: two distinct objects that compare
equal are two subscriptions, and subscribers need not be hashable.
"""

from __future__ import annotations

import itertools
from collections import defaultdict

from vendbus.domain.enums import EventType
from vendbus.domain.ports import Subscriber


class SubscriptionRegistry:
    """Per-type ordered subscriber sets with enrollment timestamps."""

    def __init__(self) -> None:
        # id(subscriber) -> (subscriber, enrollment tick), in enrollment order
        self._subscriptions: dict[EventType, dict[int, tuple[Subscriber, int]]] = defaultdict(dict)
        self._clock = itertools.count(1)

    def tick(self) -> int:
        """Advance the logical clock and return the new timestamp."""
        return next(self._clock)

    def subscribe(self, event_type: EventType, subscriber: Subscriber) -> bool:
        """Enroll *subscriber* for *event_type*.

        Returns False, leaving the original enrollment time untouched,
        when the subscriber is already enrolled.
        """
        enrolled = self._subscriptions[event_type]
        if id(subscriber) in enrolled:
            return False
        enrolled[id(subscriber)] = (subscriber, self.tick())
        return True

    def unsubscribe(self, event_type: EventType, subscriber: Subscriber) -> bool:
        """Remove *subscriber* from *event_type*; False if it was not enrolled."""
        enrolled = self._subscriptions.get(event_type)
        if not enrolled or id(subscriber) not in enrolled:
            return False
        del enrolled[id(subscriber)]
        return True

    def is_subscribed(self, event_type: EventType, subscriber: Subscriber) -> bool:
        return id(subscriber) in self._subscriptions.get(event_type, {})

    def enrolled_at(self, event_type: EventType, subscriber: Subscriber) -> int | None:
        """Return the enrollment timestamp, or None if not enrolled."""
        entry = self._subscriptions.get(event_type, {}).get(id(subscriber))
        return entry[1] if entry else None

    def subscribers(self, event_type: EventType) -> list[Subscriber]:
        """Return every subscriber of *event_type* in enrollment order."""
        return [subscriber for subscriber, _ in self._subscriptions.get(event_type, {}).values()]

    def eligible(self, event_type: EventType, as_of: int) -> list[Subscriber]:
        """Return subscribers of *event_type* enrolled at or before *as_of*."""
        return [
            subscriber
            for subscriber, enrolled_at in self._subscriptions.get(event_type, {}).values()
            if enrolled_at <= as_of
        ]
