"""IRC event adapter feeding the negotiation tracker."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..logs.logger import logger
from .models import ConnectionId
from .pool import NickPool
from .sink import CommandSink
from .tracker import NegotiationTracker, NickCacheCallback

if TYPE_CHECKING:  # pragma: no cover
    from ..config.model import AltNickConfig
    from ..irc.parser import IRCMessage

ERR_NICKNAMEINUSE = "433"
QUIT = "QUIT"


class AltNickHandler:
    """Switches to alternate nicks when the wanted one is taken.

    Subscribes to ``433`` (ERR_NICKNAMEINUSE) and, with recovery enabled, to
    ``QUIT`` so the original nick can be taken back when it frees up.
    """

    def __init__(self, tracker: NegotiationTracker) -> None:
        self.tracker = tracker

    @classmethod
    def from_config(
        cls,
        config: AltNickConfig,
        sink: CommandSink,
        nick_cache: NickCacheCallback | None = None,
    ) -> AltNickHandler:
        pool = NickPool.from_config(config)
        tracker = NegotiationTracker(
            pool, sink, recovery=config.recovery, nick_cache=nick_cache
        )
        return cls(tracker)

    def get_subscribed_events(
        self,
    ) -> dict[str, Callable[[ConnectionId, IRCMessage], None]]:
        events = {ERR_NICKNAMEINUSE: self.handle_nickname_in_use}
        if self.tracker.recovery:
            events[QUIT] = self.handle_user_quit
        return events

    def handle_nickname_in_use(
        self, connection_id: ConnectionId, message: IRCMessage
    ) -> None:
        # 433 <client> <nick> :Nickname is already in use
        if len(message.params) < 2:
            logger.log_event(
                "nick",
                "malformed_conflict",
                level=logging.WARNING,
                connection=connection_id,
                raw=message.raw,
            )
            return
        self.tracker.on_nickname_in_use(connection_id, message.params[1])

    def handle_user_quit(self, connection_id: ConnectionId, message: IRCMessage) -> None:
        departed = message.source_nick
        if departed:
            self.tracker.on_user_quit(connection_id, departed)
