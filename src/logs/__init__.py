"""Project logging package.

Event catalog plus BotLogger, the structured ``log_event`` front end used by
the negotiation core and the IRC dispatcher. Not to be confused with the
stdlib ``logging`` module.
"""

from .event_catalog import EVENT_TEMPLATES, reload_event_templates  # noqa: F401
from .logger import BotLogger, logger  # noqa: F401

__all__ = ["BotLogger", "logger", "EVENT_TEMPLATES", "reload_event_templates"]
