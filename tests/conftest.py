import pytest

from src.nick import CommandQueue, ConnectionId, NegotiationTracker, NickPool


@pytest.fixture
def queue() -> CommandQueue:
    return CommandQueue()


@pytest.fixture
def pool() -> NickPool:
    return NickPool(["Foo", "Foo_", "FooBar"])


@pytest.fixture
def make_tracker(queue):
    """Build a tracker writing into the shared ``queue`` fixture."""

    def _make(nicks=None, **kwargs) -> NegotiationTracker:
        return NegotiationTracker(NickPool(nicks or ["Foo", "Foo_", "FooBar"]), queue, **kwargs)

    return _make


@pytest.fixture
def conn_a() -> ConnectionId:
    return ConnectionId("libera-1")


@pytest.fixture
def conn_b() -> ConnectionId:
    return ConnectionId("oftc-1")
