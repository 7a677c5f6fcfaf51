"""IRC subsystem package.

Line parsing and per-connection dispatch of inbound IRC messages to the
handlers that subscribe to them.
"""

from .dispatcher import IRCDispatcher  # noqa: F401
from .parser import IRCMessage, nick_from_prefix, parse_irc_message  # noqa: F401

__all__ = [
    "IRCDispatcher",
    "IRCMessage",
    "nick_from_prefix",
    "parse_irc_message",
]
