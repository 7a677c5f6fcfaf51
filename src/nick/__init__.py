"""Alternate-nick negotiation.

Picks the next configured fallback nick whenever a server answers
ERR_NICKNAMEINUSE, tracked separately for every connection, and optionally
reclaims the original nick once its holder quits.
"""

from .handler import AltNickHandler  # noqa: F401
from .models import (  # noqa: F401
    EXHAUSTED_REASON,
    ChangeNick,
    ConnectionId,
    ConnectionState,
    Disconnect,
    NegotiationPhase,
)
from .pool import NickPool, filter_nicks, is_valid_nick  # noqa: F401
from .sink import CommandQueue, CommandSink  # noqa: F401
from .tracker import NegotiationTracker  # noqa: F401

__all__ = [
    "AltNickHandler",
    "ChangeNick",
    "CommandQueue",
    "CommandSink",
    "ConnectionId",
    "ConnectionState",
    "Disconnect",
    "EXHAUSTED_REASON",
    "NegotiationPhase",
    "NegotiationTracker",
    "NickPool",
    "filter_nicks",
    "is_valid_nick",
]
