"""Centralized internal error hierarchy.

Classes:
  InternalError        – Base for all internal errors.
  ConfigError          – Invalid or missing alternate-nick configuration.

Running out of alternate nicks is not an error; it is reported through the
outbound command sink as a disconnect.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ConfigError(InternalError):
    """Exception raised for unusable alternate-nick configuration.

    Raised synchronously while building the nick pool or loading the
    configuration: a missing ``nicks`` key, a ``nicks`` value that is not a
    list, or a list in which no entry is a valid nickname. The caller has to
    fix the configuration and construct again; nothing retries internally.
    """


__all__ = [
    "InternalError",
    "ConfigError",
]
