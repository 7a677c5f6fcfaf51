"""Per-connection alternate-nick negotiation and primary-nick recovery."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import replace

from ..logs.logger import logger
from .models import EXHAUSTED_REASON, ConnectionId, ConnectionState
from .pool import NickPool
from .sink import CommandSink

NickCacheCallback = Callable[[ConnectionId, str], None]


# rfc1459 case mapping: []\~ are the upper case forms of {}|^.
_RFC1459_UPPER_TO_LOWER = str.maketrans("[]\\~", "{}|^")


def irc_casefold(nick: str) -> str:
    """Fold a nickname for comparison using the rfc1459 case mapping."""
    return nick.lower().translate(_RFC1459_UPPER_TO_LOWER)


class NegotiationTracker:
    """Walks the nick pool for each connection that hits a nickname conflict.

    State is created lazily on the first conflict of a connection and lives
    until the connection manager calls :meth:`discard`. All reads and updates
    of a connection's state happen under one lock together with the command
    emission they trigger, so events delivered from several threads never
    hand out the same fallback twice.

    Args:
        pool: Validated fallback nicknames.
        sink: Receives ``change_nick`` and ``disconnect`` commands.
        recovery: Record the first rejected nick and reclaim it when its
            holder quits.
        nick_cache: Optional callback told about every nick requested, for
            hosts that keep a cached "current nick" on the connection.
    """

    def __init__(
        self,
        pool: NickPool,
        sink: CommandSink,
        *,
        recovery: bool = False,
        nick_cache: NickCacheCallback | None = None,
    ) -> None:
        self.pool = pool
        self.sink = sink
        self.recovery = recovery
        self.nick_cache = nick_cache
        self._states: dict[ConnectionId, ConnectionState] = {}
        self._lock = threading.RLock()

    def _state(self, connection_id: ConnectionId) -> ConnectionState:
        state = self._states.get(connection_id)
        if state is None:
            state = self._states[connection_id] = ConnectionState()
        return state

    def on_nickname_in_use(
        self, connection_id: ConnectionId, rejected_nick: str
    ) -> None:
        with self._lock:
            state = self._state(connection_id)
            if state.cursor >= len(self.pool):
                state.exhausted = True
                logger.log_event(
                    "nick",
                    "exhausted",
                    connection=connection_id,
                    rejected=rejected_nick,
                    tried=len(self.pool),
                )
                self.sink.disconnect(connection_id, EXHAUSTED_REASON)
                return

            if self.recovery and state.primary_nick is None:
                state.primary_nick = rejected_nick
                logger.log_event(
                    "nick",
                    "saving_primary",
                    level=logging.DEBUG,
                    connection=connection_id,
                    nick=rejected_nick,
                )

            nick = self.pool.get(state.cursor)
            state.cursor += 1
            logger.log_event(
                "nick",
                "switching_nick",
                level=logging.DEBUG,
                connection=connection_id,
                nick=nick,
                rejected=rejected_nick,
                cursor=state.cursor,
            )
            self._request_nick(connection_id, nick)

    def on_user_quit(self, connection_id: ConnectionId, departed_nick: str) -> None:
        """Reclaim this connection's primary nick once its holder has quit.

        Only quits seen on the same connection count; a user leaving one
        network says nothing about a nick on another.
        """
        if not self.recovery:
            return
        with self._lock:
            state = self._states.get(connection_id)
            if state is None or state.primary_nick is None:
                return
            if irc_casefold(state.primary_nick) != irc_casefold(departed_nick):
                return
            primary, state.primary_nick = state.primary_nick, None
            logger.log_event(
                "nick",
                "reclaiming_primary",
                level=logging.DEBUG,
                connection=connection_id,
                nick=primary,
            )
            self._request_nick(connection_id, primary)

    def _request_nick(self, connection_id: ConnectionId, nick: str) -> None:
        self.sink.change_nick(connection_id, nick)
        if self.nick_cache is not None:
            self.nick_cache(connection_id, nick)

    def discard(self, connection_id: ConnectionId) -> None:
        """Forget a connection; its next conflict starts a new episode."""
        with self._lock:
            if self._states.pop(connection_id, None) is not None:
                logger.log_event(
                    "nick",
                    "state_discarded",
                    level=logging.DEBUG,
                    connection=connection_id,
                )

    def state_for(self, connection_id: ConnectionId) -> ConnectionState | None:
        """Return a copy of the connection's state, or None if untracked."""
        with self._lock:
            state = self._states.get(connection_id)
            return replace(state) if state is not None else None

    def connections(self) -> tuple[ConnectionId, ...]:
        with self._lock:
            return tuple(self._states)
