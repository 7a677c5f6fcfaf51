"""
Unit tests for CommandQueue.
"""

from src.nick.models import ChangeNick, ConnectionId, Disconnect
from src.nick.sink import CommandQueue


class TestCommandQueue:
    """Test CommandQueue functionality."""

    def setup_method(self):
        """Setup method called before each test."""
        self.queue = CommandQueue()
        self.a = ConnectionId("a")
        self.b = ConnectionId("b")

    def test_commands_queued_in_order_per_connection(self):
        """Test commands keep arrival order within one connection."""
        self.queue.change_nick(self.a, "Foo")
        self.queue.change_nick(self.b, "Bar")
        self.queue.disconnect(self.a, "bye")

        assert self.queue.drain(self.a) == [
            ChangeNick(self.a, "Foo"),
            Disconnect(self.a, "bye"),
        ]
        assert self.queue.drain(self.b) == [ChangeNick(self.b, "Bar")]

    def test_drain_clears(self):
        """Test drain empties the connection's queue."""
        self.queue.change_nick(self.a, "Foo")
        self.queue.drain(self.a)
        assert self.queue.drain(self.a) == []
        assert self.queue.pending() == {}

    def test_pending_is_a_copy(self):
        """Test pending does not consume or expose internal queues."""
        self.queue.change_nick(self.a, "Foo")
        snapshot = self.queue.pending()
        snapshot[self.a].clear()
        assert self.queue.pending() == {self.a: [ChangeNick(self.a, "Foo")]}
