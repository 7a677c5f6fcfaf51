"""Event logger for the alternate-nick negotiation core."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO


def _supports_color(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except Exception:  # pragma: no cover
        return False


class SimpleFormatter(logging.Formatter):
    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[36m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }
    RESET = "\x1b[0m"

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self.enable_color = _supports_color(stream or sys.stderr)

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 (simple override)
        msg = record.getMessage()
        # Longest built-in level name: 'CRITICAL' (8 chars).
        raw_level = record.levelname.ljust(8)
        if self.enable_color:
            color = self.LEVEL_COLORS.get(record.levelno, "")
            return f"{color}{raw_level}{self.RESET} {msg}"
        return f"{raw_level} {msg}"


class BotLogger:
    """Structured event logger.

    Events are named ``<domain>_<action>``; the human readable text comes from
    the JSON template catalog unless ``human`` is passed explicitly. The
    reserved ``connection`` keyword forms the bracketed prefix, everything
    else is appended as ``key=value`` context when DEBUG is on.
    """

    EVENT_NAME_WIDTH = 32
    PREFIX_WIDTH = 24

    def __init__(self, name: str = "altnick", stream: TextIO | None = None) -> None:
        self.logger = logging.getLogger(name)
        self.logger.handlers.clear()
        # Keeps events off the root handler and out of stdout, which main.py
        # reserves for replayed commands.
        self.logger.propagate = False
        self.logger.setLevel(
            logging.DEBUG if self._is_debug_enabled() else logging.INFO
        )

        stream = stream or sys.stderr
        console_handler = logging.StreamHandler(stream)
        console_handler.setFormatter(SimpleFormatter(stream))
        self.logger.addHandler(console_handler)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        event_name = f"{domain}_{action}".lower()
        if human is None:
            human = self._render_template(domain, action, kwargs)
        kwargs["_human_text"] = human
        self._log(level, event_name, exc_info=exc_info, **kwargs)

    @staticmethod
    def _render_template(domain: str, action: str, kwargs: dict[str, object]) -> str:
        # Local import to avoid cyclic import issues during module init.
        from .event_catalog import EVENT_TEMPLATES

        template = EVENT_TEMPLATES.get((domain, action))
        if not template:
            kwargs.setdefault("derived", True)
            return f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            return template

    def _log(
        self, level: int, event_name: str, exc_info: bool = False, **kwargs: object
    ) -> None:
        kw: dict[str, object] = dict(kwargs)
        connection, human_text = self._extract_reserved(kw)
        prefix = self._build_prefix(connection)
        if self._is_debug_enabled():
            msg = self._build_debug_message(event_name, prefix, human_text, kw)
        else:
            msg = f"{prefix} {human_text or event_name}"
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _is_debug_enabled() -> bool:
        return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")

    @staticmethod
    def _extract_reserved(
        kwargs: dict[str, object],
    ) -> tuple[str | None, str | None]:
        connection_o = kwargs.pop("connection", None)
        human_text_o = kwargs.pop("_human_text", None)
        connection = str(connection_o) if connection_o is not None else None
        human_text = human_text_o if isinstance(human_text_o, str) else None
        return connection, human_text

    @classmethod
    def _build_prefix(cls, connection: str | None) -> str:
        core = connection or "system"
        return f"[{core.ljust(cls.PREFIX_WIDTH)[: cls.PREFIX_WIDTH]}]"

    @classmethod
    def _build_debug_message(
        cls,
        event_name: str,
        prefix: str,
        human_text: str | None,
        kwargs: dict[str, object],
    ) -> str:
        width = cls.EVENT_NAME_WIDTH
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {prefix}"
        if human_text:
            base = f"{base} {human_text}"
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        if context:
            base = f"{base} ({context})"
        return base


logger = BotLogger()
