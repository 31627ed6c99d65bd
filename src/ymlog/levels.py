# topmark:header:start
#
#   project      : YmLog
#   file         : levels.py
#   file_relpath : src/ymlog/levels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity levels of log entries.

Levels are ordered (``TRACE < DEBUG < INFO < WARN < ERROR``) so filtering is a
single comparison against the logger threshold. Each level has a one-letter
op-code used in action strings.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from ymlog.core.enum_mixins import enum_from_name


class Level(IntEnum):
    """Ordered severity of a log entry."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    @property
    def letter(self) -> str:
        """The action-string op-code selecting this level."""
        return self.name[0]

    @property
    def label(self) -> str:
        """Display name used in rendered metadata records (e.g. ``Info``)."""
        return self.name.capitalize()

    @classmethod
    def from_letter(cls, char: str) -> Level | None:
        """Return the level selected by an action op-code, or None."""
        return _BY_LETTER.get(char)

    @classmethod
    def parse(cls, raw: str | int | None) -> Level | None:
        """Parse a level from a name (``"info"``, ``"WARNING"``), a letter or an ordinal.

        Returns:
            Level | None: The level, or ``None`` when ``raw`` is unset or unknown.
        """
        if raw is None:
            return None
        if isinstance(raw, int):
            try:
                return cls(raw)
            except ValueError:
                return None
        token: str = raw.strip()
        if token in _BY_LETTER:
            return _BY_LETTER[token]
        return enum_from_name(cls, _ALIASES.get(token.upper(), token), case_insensitive=True)


_BY_LETTER: Final[dict[str, Level]] = {level.letter: level for level in Level}

_ALIASES: Final[dict[str, str]] = {
    "WARNING": "WARN",
    "ERR": "ERROR",
    "CRITICAL": "ERROR",
}
