"""IRC message parsing utilities (packaged)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class IRCMessage:
    raw: str
    prefix: str | None
    command: str | None
    params: list[str] = field(default_factory=list)
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def source_nick(self) -> str | None:
        return nick_from_prefix(self.prefix)


def parse_irc_message(raw_line: str) -> IRCMessage:
    """Split one IRC line into tags, prefix, command and parameters.

    The trailing parameter (introduced by `` :``) is kept whole as the last
    element of ``params``.
    """
    tags: dict[str, str] = {}
    prefix: str | None = None
    line = raw_line.rstrip("\r\n")

    if line.startswith("@"):
        tags_part, _, line = line.partition(" ")
        tags = _parse_tags(tags_part[1:])
        line = line.lstrip(" ")

    if line.startswith(":"):
        # Malformed lines may carry nothing but a prefix.
        prefix, _, line = line[1:].partition(" ")
        line = line.lstrip(" ")

    trailing: str | None = None
    if line.startswith(":"):
        line, trailing = "", line[1:]
    elif " :" in line:
        line, trailing = line.split(" :", 1)

    parts = line.split()
    command = parts[0].upper() if parts else None
    params = parts[1:]
    if trailing is not None:
        params.append(trailing)

    return IRCMessage(
        raw=raw_line, prefix=prefix or None, command=command, params=params, tags=tags
    )


def _parse_tags(raw_tags: str) -> dict[str, str]:
    tags: dict[str, str] = {}
    for tag in raw_tags.split(";"):
        if not tag:
            continue
        k, _, v = tag.partition("=")
        tags[k] = v
    return tags


def nick_from_prefix(prefix: str | None) -> str | None:
    """Return the nick part of a ``nick!user@host`` prefix."""
    if not prefix:
        return None
    nick = prefix.split("!", 1)[0].split("@", 1)[0]
    return nick or None
