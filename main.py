#!/usr/bin/env python3
"""
Entry point for the alternate-nick negotiation tooling.

Replays raw IRC lines (one per line on stdin) through the dispatcher for a
single connection and prints the commands the negotiation queued in reply.
"""

import argparse
import asyncio
import sys

from src.config import ConfigLoader
from src.errors.internal import ConfigError
from src.irc import IRCDispatcher
from src.logging_config import LoggerConfigurator, log_structured_error
from src.logs.logger import logger
from src.nick import AltNickHandler, ChangeNick, CommandQueue, ConnectionId


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        help="Path to the JSON configuration (defaults to $ALTNICK_CONF_FILE)",
    )
    parser.add_argument(
        "--connection", default="replay", help="Connection id used for the replay"
    )
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Only validate the configuration",
    )
    return parser


def load_config(path):
    loader = ConfigLoader()
    return loader.load(path) if path else loader.get_configuration()


def format_command(command) -> str:
    if isinstance(command, ChangeNick):
        return f"NICK {command.nick}"
    return f"QUIT :{command.reason}"


async def replay(config, connection_id: ConnectionId, lines) -> CommandQueue:
    queue = CommandQueue()
    dispatcher = IRCDispatcher()
    dispatcher.register(AltNickHandler.from_config(config, queue))
    logger.log_event("app", "start", connection=connection_id)
    buffer = ""
    for line in lines:
        buffer = await dispatcher.process_incoming_data(
            connection_id, buffer, line.rstrip("\r\n") + "\r\n"
        )
    return queue


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    LoggerConfigurator().configure()
    try:
        config = load_config(args.config)
    except ConfigError as e:
        if args.health_check:
            logger.log_event("app", "health_failed", error=str(e))
        log_structured_error("config", "Invalid configuration", e, e.data)
        return 1

    if args.health_check:
        logger.log_event("app", "health_ok", count=len(config.nicks))
        return 0

    connection_id = ConnectionId(args.connection)
    queue = asyncio.run(replay(config, connection_id, sys.stdin))
    for command in queue.drain(connection_id):
        print(format_command(command))
    logger.log_event("app", "shutdown")
    return 0


if __name__ == "__main__":
    sys.exit(main())
