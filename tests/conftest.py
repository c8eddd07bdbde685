"""Shared fixtures for vendbus tests."""

import pytest
import structlog

from vendbus.domain.events import MachineEvent
from vendbus.infrastructure.events.bus import InMemoryPublishSubscribeService


class RecordingSubscriber:
    """Subscriber that remembers every event it was handed."""

    def __init__(self, name: str = "recorder", log: list | None = None) -> None:
        self.name = name
        self.received: list[MachineEvent] = []
        self._log = log

    def handle(self, event: MachineEvent) -> None:
        self.received.append(event)
        if self._log is not None:
            self._log.append((self.name, event))

    def __str__(self) -> str:
        return self.name


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI tests reconfigure structlog globally; undo that after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def bus():
    return InMemoryPublishSubscribeService()


@pytest.fixture
def make_subscriber():
    """Factory for recording subscribers; pass a shared *log* to see interleaving."""
    return RecordingSubscriber
