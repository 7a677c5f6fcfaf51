from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from src.irc.dispatcher import IRCDispatcher
from src.logs.logger import logger
from src.nick.models import ConnectionId

CONN = ConnectionId("libera-1")


@pytest.mark.asyncio
async def test_partial_lines_are_buffered():
    disp = IRCDispatcher()
    seen: list[list[str]] = []
    disp.subscribe("433", lambda cid, msg: seen.append(msg.params))

    buf = await disp.process_incoming_data(CONN, "", ":srv 433 * Wan")
    assert buf == ":srv 433 * Wan"
    assert seen == []

    buf = await disp.process_incoming_data(CONN, buf, "ted :in use\r\n:srv 433")
    assert buf == ":srv 433"
    assert seen == [["*", "Wanted", "in use"]]


@pytest.mark.asyncio
async def test_async_and_sync_callbacks_receive_connection():
    disp = IRCDispatcher()
    calls: list[tuple[str, str]] = []

    async def async_cb(cid, msg):
        calls.append(("async", cid))

    disp.subscribe("quit", async_cb)
    disp.subscribe("QUIT", lambda cid, msg: calls.append(("sync", cid)))

    await disp.process_incoming_data(CONN, "", ":a!b@c QUIT :bye\r\n")
    assert calls == [("async", CONN), ("sync", CONN)]


@pytest.mark.asyncio
async def test_unsubscribed_and_blank_lines_ignored():
    disp = IRCDispatcher()
    seen: list[str] = []
    disp.subscribe("433", lambda cid, msg: seen.append(msg.command))
    buf = await disp.process_incoming_data(
        CONN, "", "\r\n   \r\n:srv 001 me :Welcome\r\nPING :x\r\n"
    )
    assert buf == ""
    assert seen == []


@pytest.mark.asyncio
async def test_handler_exception_logged_not_propagated():
    disp = IRCDispatcher()
    after: list[str] = []

    def bad(cid, msg):
        raise RuntimeError("boom")

    disp.subscribe("433", bad)
    disp.subscribe("433", lambda cid, msg: after.append(msg.params[1]))

    with patch.object(logger.logger, "log") as mock_log:
        await disp.process_incoming_data(CONN, "", ":srv 433 * Wanted :in use\r\n")

    assert after == ["Wanted"]
    errors = [c.args[1] for c in mock_log.call_args_list if c.args[0] == logging.ERROR]
    assert any("boom" in msg for msg in errors)


@pytest.mark.asyncio
async def test_register_uses_subscription_map():
    class Handler:
        def __init__(self):
            self.seen = []

        def get_subscribed_events(self):
            return {"433": lambda cid, msg: self.seen.append(cid)}

    handler = Handler()
    disp = IRCDispatcher()
    disp.register(handler)
    await disp.dispatch_line(CONN, ":srv 433 * Wanted :in use")
    assert handler.seen == [CONN]
