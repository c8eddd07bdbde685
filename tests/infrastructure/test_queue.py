"""Tests for vendbus.infrastructure.events.queue."""

from vendbus.infrastructure.events.queue import EventQueue


class TestEventQueue:
    def test_fifo(self):
        queue = EventQueue()
        for item in ("a", "b", "c"):
            queue.enqueue(item)

        assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == ["a", "b", "c"]

    def test_empty_dequeue_returns_none(self):
        assert EventQueue().dequeue() is None

    def test_reusable_after_draining(self):
        queue = EventQueue()
        queue.enqueue(1)
        assert queue.dequeue() == 1
        assert queue.dequeue() is None

        queue.enqueue(2)
        queue.enqueue(3)
        assert queue.dequeue() == 2
        queue.enqueue(4)
        assert queue.dequeue() == 3
        assert queue.dequeue() == 4
        assert queue.dequeue() is None

    def test_len_and_bool(self):
        queue = EventQueue()
        assert len(queue) == 0
        assert not queue

        queue.enqueue("x")
        assert len(queue) == 1
        assert queue
