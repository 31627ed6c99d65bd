# topmark:header:start
#
#   project      : YmLog
#   file         : actions.py
#   file_relpath : src/ymlog/actions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Action strings: one-character op-codes applied around a log call.

| char | effect                                         |
|------|------------------------------------------------|
| ``+``  | indent below the last written entry          |
| ``-``  | dedent one level                             |
| ``r``  | reset to the root; the next write opens a new document |
| ``_``  | write the entry now (may repeat)             |
| ``k``  | split the message at its first ``:``         |
| ``b``  | render the message as a literal block        |
| ``T D I W E`` | set the level (last one wins)         |

Actions are applied strictly left to right. When no ``_`` appears, the entry is
written once after all actions. An unknown character raises
`UnknownActionError` when it is reached; the actions before it keep their effect.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ymlog.config.logging import get_logger
from ymlog.errors import UnknownActionError
from ymlog.levels import Level
from ymlog.rendering.styles import Chomp, Style

if TYPE_CHECKING:
    from collections.abc import Callable

    from ymlog.config.logging import YmlogLogger
    from ymlog.entry import Entry
    from ymlog.tracker import DepthTracker

logger: YmlogLogger = get_logger(__name__)


class Action(Enum):
    """A single action op-code."""

    INDENT = "+"
    DEDENT = "-"
    RESET = "r"
    WRITE = "_"
    SPLIT_KEY = "k"
    BLOCK = "b"
    TRACE = "T"
    DEBUG = "D"
    INFO = "I"
    WARN = "W"
    ERROR = "E"

    @property
    def level(self) -> Level | None:
        """The level selected by this action, if it is a level op-code."""
        return Level.from_letter(self.value)

    @classmethod
    def from_char(cls, char: str, position: int = 0) -> Action:
        """Return the action for ``char``.

        Raises:
            UnknownActionError: If ``char`` is not an op-code.
        """
        try:
            return cls(char)
        except ValueError:
            raise UnknownActionError(char, position) from None


def parse_actions(text: str) -> list[Action]:
    """Validate an action string without applying it.

    Raises:
        UnknownActionError: On the first character that is not an op-code.
    """
    return [Action.from_char(char, position) for position, char in enumerate(text)]


def run_actions(
    actions: str,
    entry: Entry,
    tracker: DepthTracker,
    *,
    write: Callable[[Entry], None],
) -> int:
    """Apply ``actions`` to ``entry`` and ``tracker``, calling ``write`` for each write.

    Args:
        actions (str): The action string.
        entry (Entry): The entry being logged; mutated in place.
        tracker (DepthTracker): The logger's depth tracker.
        write (Callable[[Entry], None]): Filters and writes the entry.

    Returns:
        int: How many times ``write`` was called.

    Raises:
        UnknownActionError: When an unknown character is reached.
    """
    writes: int = 0
    for position, char in enumerate(actions):
        action: Action = Action.from_char(char, position)
        logger.trace("Applying action %s at position %d", action.name, position)
        if action is Action.INDENT:
            tracker.indent()
        elif action is Action.DEDENT:
            tracker.dedent()
        elif action is Action.RESET:
            tracker.reset()
        elif action is Action.WRITE:
            write(entry)
            writes += 1
        elif action is Action.SPLIT_KEY:
            entry.split_key_value()
        elif action is Action.BLOCK:
            entry.set_style(Style.literal(Chomp.CLIP))
        else:
            level: Level | None = action.level
            if level is not None:
                entry.set_level(level)

    if writes == 0:
        write(entry)
        writes = 1
    return writes
