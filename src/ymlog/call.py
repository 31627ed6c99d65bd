# topmark:header:start
#
#   project      : YmLog
#   file         : call.py
#   file_relpath : src/ymlog/call.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Call-site helpers: log a message in one call, optionally with actions.

`emit` builds an `Entry`, formats the message with ``%``-style arguments and
logs it:

    ```python
    emit(log, "loaded %d files", 12, actions="+")
    ```

`split_call` parses the textual form ``ACTIONS => message`` used by
``ymlog render`` scripts. ACTIONS is the token (no spaces) before ``=>``; a
line without ``=>`` is a bare message. The two-character escape ``\n`` in a
message becomes a line break.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from ymlog.entry import Entry

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ymlog.levels import Level
    from ymlog.logger import YmLog
    from ymlog.rendering.styles import Style

_CALL_RE: Final[re.Pattern[str]] = re.compile(r"^(?P<actions>\S*?)\s*=>\s?(?P<message>.*)$")


def unescape_message(text: str) -> str:
    r"""Turn ``\n`` escapes into line breaks (``\\n`` stays a literal ``\n``)."""
    return re.sub(r"\\(\\|n)", lambda m: "\n" if m.group(1) == "n" else "\\", text)


def split_call(line: str) -> tuple[str, str]:
    """Split a script line into its action string and message.

    Args:
        line (str): One line of a render script, without its line break.

    Returns:
        tuple[str, str]: ``(actions, message)``; actions is empty for bare messages.
    """
    match: re.Match[str] | None = _CALL_RE.match(line)
    if match is None:
        return "", unescape_message(line)
    return match.group("actions"), unescape_message(match.group("message"))


def emit(
    log: YmLog,
    message: object,
    *args: object,
    actions: str = "",
    level: Level | None = None,
    tags: Iterable[object] | None = None,
    children: Sequence[Entry] | None = None,
    stamp: bool = False,
    style: Style | None = None,
) -> Entry:
    """Build an entry for ``message`` and log it.

    Args:
        log (YmLog): Target logger.
        message (object): The message; a string is ``%``-formatted with ``args``.
        *args (object): Format arguments.
        actions (str): Action string applied around the write.
        level (Level | None): Entry level (action letters still override it).
        tags (Iterable[object] | None): Tags for the entry.
        children (Sequence[Entry] | None): Child entries.
        stamp (bool): Set the timestamp to the current UTC time.
        style (Style | None): Rendering override.

    Returns:
        Entry: The logged entry, after the actions were applied.
    """
    entry = Entry()
    if args:
        if not isinstance(message, str):
            raise TypeError("Format arguments require a string message")
        message = message % args
    entry.set_message(message)
    if level is not None:
        entry.set_level(level)
    if tags is not None:
        entry.set_tags(tags)
    if children is not None:
        entry.set_children(children)
    if stamp:
        entry.stamp()
    entry.set_style(style)
    log.log(entry, actions)
    return entry
