"""Outbound command sink used by the negotiation tracker."""

from __future__ import annotations

import threading
from collections import defaultdict, deque
from typing import Protocol

from .models import ChangeNick, ConnectionId, Disconnect, OutboundCommand


class CommandSink(Protocol):
    """Anything able to queue nick changes and disconnects for a connection."""

    def change_nick(self, connection_id: ConnectionId, nick: str) -> None: ...

    def disconnect(self, connection_id: ConnectionId, reason: str) -> None: ...


class CommandQueue:
    """In-memory per-connection FIFO of outbound commands.

    The transport layer drains a connection's queue and writes the commands
    to the wire; nothing here touches a socket.
    """

    def __init__(self) -> None:
        self._queues: defaultdict[ConnectionId, deque[OutboundCommand]] = (
            defaultdict(deque)
        )
        self._lock = threading.Lock()

    def change_nick(self, connection_id: ConnectionId, nick: str) -> None:
        self._push(ChangeNick(connection_id, nick))

    def disconnect(self, connection_id: ConnectionId, reason: str) -> None:
        self._push(Disconnect(connection_id, reason))

    def _push(self, command: OutboundCommand) -> None:
        with self._lock:
            self._queues[command.connection_id].append(command)

    def drain(self, connection_id: ConnectionId) -> list[OutboundCommand]:
        """Return and clear the queued commands of one connection."""
        with self._lock:
            queue = self._queues.pop(connection_id, None)
        return list(queue) if queue else []

    def pending(self) -> dict[ConnectionId, list[OutboundCommand]]:
        with self._lock:
            return {cid: list(q) for cid, q in self._queues.items() if q}
