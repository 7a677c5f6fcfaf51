"""Validated, ordered pool of alternate nicknames."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import Any

from ..errors.internal import ConfigError

_SPECIALS = r"\[\]\\`_\^\{\|\}"
NICK_PATTERN = re.compile(
    rf"[a-z{_SPECIALS}][a-z0-9{_SPECIALS}-]*", re.IGNORECASE | re.ASCII
)


def is_valid_nick(value: Any) -> bool:
    """Return True if ``value`` is a string matching the nickname grammar.

    Surrounding whitespace is ignored. The first character must be an ASCII
    letter or one of ``[]\\`_^{|}``; the rest may also contain digits and ``-``.
    """
    if not isinstance(value, str):
        return False
    return NICK_PATTERN.fullmatch(value.strip()) is not None


def filter_nicks(raw: Iterable[Any]) -> list[str]:
    """Drop entries failing the grammar, keeping order and duplicates."""
    return [item.strip() for item in raw if is_valid_nick(item)]


class NickPool:
    """Immutable ordered sequence of fallback nicknames.

    Construction filters the raw list through :func:`is_valid_nick` and raises
    :class:`ConfigError` when the input is not a list or nothing survives.
    Entries are addressed by a 0-based cursor; ``get`` returns ``None`` once
    the cursor runs past the end, there is no wraparound.
    """

    __slots__ = ("_nicks",)

    def __init__(self, raw: Any) -> None:
        if not isinstance(raw, list | tuple):
            raise ConfigError(
                "nicks must be a list of nicknames",
                data={"type": type(raw).__name__},
            )
        nicks = filter_nicks(raw)
        if not nicks:
            raise ConfigError(
                "nicks did not contain any valid nickname",
                data={"received": len(raw)},
            )
        self._nicks: tuple[str, ...] = tuple(nicks)

    @classmethod
    def from_config(cls, config: Any) -> NickPool:
        """Build a pool from an ``AltNickConfig`` or a raw mapping.

        Raw mappings are validated by ``AltNickConfig.from_dict`` first.
        """
        # Local import: the config model itself filters through this module.
        from ..config.model import AltNickConfig

        if not isinstance(config, AltNickConfig):
            config = AltNickConfig.from_dict(config)
        return cls(config.nicks)

    @property
    def nicks(self) -> tuple[str, ...]:
        return self._nicks

    def get(self, index: int) -> str | None:
        """Return the nickname at ``index`` or ``None`` when exhausted."""
        if index < 0:
            raise IndexError(f"nick pool index must be >= 0, got {index}")
        if index >= len(self._nicks):
            return None
        return self._nicks[index]

    def __len__(self) -> int:
        return len(self._nicks)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nicks)

    def __repr__(self) -> str:
        return f"NickPool({list(self._nicks)!r})"
