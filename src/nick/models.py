"""Shared data models for alternate-nick negotiation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import NewType

# Opaque handle assigned by the connection manager; only ever used as a key.
ConnectionId = NewType("ConnectionId", str)

EXHAUSTED_REASON = "All specified alternate nicks are in use"


class NegotiationPhase(Enum):
    IDLE = auto()
    NEGOTIATING = auto()
    EXHAUSTED = auto()


@dataclass(slots=True)
class ConnectionState:
    """Negotiation progress of a single connection.

    ``cursor`` only moves forward within an episode. ``primary_nick`` is the
    nickname rejected by the first conflict, kept while recovery is enabled
    and cleared once it has been reclaimed. ``exhausted`` is set when a
    conflict arrives after the last fallback was handed out.
    """

    cursor: int = 0
    primary_nick: str | None = None
    exhausted: bool = False

    @property
    def phase(self) -> NegotiationPhase:
        if self.exhausted:
            return NegotiationPhase.EXHAUSTED
        if self.cursor == 0:
            return NegotiationPhase.IDLE
        return NegotiationPhase.NEGOTIATING


@dataclass(frozen=True, slots=True)
class ChangeNick:
    connection_id: ConnectionId
    nick: str


@dataclass(frozen=True, slots=True)
class Disconnect:
    connection_id: ConnectionId
    reason: str


OutboundCommand = ChangeNick | Disconnect
