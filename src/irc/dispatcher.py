"""Routes inbound IRC lines to subscribed handlers, per connection."""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable, Mapping
from typing import Protocol

from ..logs.logger import logger
from ..nick.models import ConnectionId
from .parser import IRCMessage, parse_irc_message

IRCCallback = Callable[[ConnectionId, IRCMessage], Awaitable[None] | None]


class SubscribingHandler(Protocol):
    def get_subscribed_events(self) -> Mapping[str, IRCCallback]: ...


class IRCDispatcher:
    def __init__(self) -> None:
        self._subscribers: defaultdict[str, list[IRCCallback]] = defaultdict(list)

    def subscribe(self, command: str, callback: IRCCallback) -> None:
        self._subscribers[command.upper()].append(callback)
        logger.log_event(
            "irc", "subscribed", level=logging.DEBUG, command=command.upper()
        )

    def register(self, handler: SubscribingHandler) -> None:
        for command, callback in handler.get_subscribed_events().items():
            self.subscribe(command, callback)

    async def process_incoming_data(
        self, connection_id: ConnectionId, buffer: str, new_data: str
    ) -> str:
        """Dispatch every complete line and return the unterminated remainder."""
        buffer += new_data
        while "\r\n" in buffer:
            line, buffer = buffer.split("\r\n", 1)
            if line.strip():
                await self.dispatch_line(connection_id, line.strip())
        return buffer

    async def dispatch_line(self, connection_id: ConnectionId, raw_message: str) -> None:
        logger.log_event(
            "irc", "raw", level=logging.DEBUG, connection=connection_id, raw=raw_message
        )
        parsed = parse_irc_message(raw_message)
        if not parsed.command:
            return
        for callback in list(self._subscribers.get(parsed.command, ())):
            await self._invoke(callback, connection_id, parsed)

    async def _invoke(
        self, callback: IRCCallback, connection_id: ConnectionId, parsed: IRCMessage
    ) -> None:
        try:
            result = callback(connection_id, parsed)
            if inspect.isawaitable(result):
                await result
        except Exception as e:  # noqa: BLE001
            logger.log_event(
                "irc",
                "handler_error",
                level=logging.ERROR,
                connection=connection_id,
                command=parsed.command,
                error=str(e),
                error_type=type(e).__name__,
            )
