# topmark:header:start
#
#   project      : YmLog
#   file         : folder.py
#   file_relpath : src/ymlog/rendering/folder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Block scalar bodies for multi-line messages.

The generic YAML dumper cannot be told to emit a block scalar at a given
indentation, so block bodies are produced here as text:

- `literal_string` keeps every line break verbatim under a ``|`` header;
- `fold_string` wraps long lines at word boundaries under a ``>`` header.

Both return the header (``|-``, ``>+``, ...) followed by the body lines, each
prefixed with ``indent``. Empty lines carry no indentation. Nothing is written
before the header, so callers decide what precedes it (``- ``, ``--- ``).

Example:
    ```python
    literal_string("a\nb", indent="    ", chomp=Chomp.STRIP)
    # '|-\n    a\n    b'
    ```
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from ymlog.constants import DEFAULT_WRAP_AT
from ymlog.rendering.styles import Chomp, ScalarKind

if TYPE_CHECKING:
    from ymlog.rendering.styles import Style

# Runs of spaces, or runs of anything else. Line breaks never reach the tokenizer.
_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r" +|[^ ]+")


def _indent_lines(lines: list[str], indent: str) -> list[str]:
    return [f"{indent}{line}" if line else "" for line in lines]


def wrap_line(line: str, *, indent_len: int, wrap_at: int) -> list[str]:
    """Split one source line into rows that fit within ``wrap_at`` columns.

    Words are never split. A word that would make the row reach ``wrap_at``
    (counting ``indent_len``) starts a new row; the first space of the gap in
    front of it is consumed by the fold and any remaining spaces move to the
    start of the new row. A single word longer than the width gets a row of
    its own.

    Args:
        line (str): A source line without line breaks.
        indent_len (int): Width of the indentation each row is written with.
        wrap_at (int): Target column width.

    Returns:
        list[str]: The rows, without indentation. Always at least one row.
    """
    rows: list[str] = []
    row: str = ""
    gap: str = ""
    for token in _TOKEN_RE.findall(line):
        if token.startswith(" "):
            gap = token
            continue
        if row and indent_len + len(row) + len(gap) + len(token) >= wrap_at:
            rows.append(row)
            row = gap[1:] + token
        else:
            row += gap + token
        gap = ""
    rows.append(row + gap)
    return rows


def fold_string(
    value: str,
    *,
    indent: str,
    chomp: Chomp = Chomp.CLIP,
    wrap_at: int = DEFAULT_WRAP_AT,
) -> str:
    """Render ``value`` as a folded block scalar (``>`` header).

    Explicit newlines in ``value`` always force a hard line break and
    re-indentation, independent of the wrap column.

    Args:
        value (str): The text to fold.
        indent (str): Indentation written in front of every body line.
        chomp (Chomp): Chomping indicator for the header.
        wrap_at (int): Target column width (default 120).

    Returns:
        str: The header followed by the indented body lines.
    """
    rows: list[str] = []
    for line in value.split("\n"):
        rows.extend(wrap_line(line, indent_len=len(indent), wrap_at=wrap_at))
    return "\n".join([f">{chomp.indicator}", *_indent_lines(rows, indent)])


def literal_string(value: str, *, indent: str, chomp: Chomp = Chomp.CLIP) -> str:
    """Render ``value`` as a literal block scalar (``|`` header); no wrapping is applied."""
    return "\n".join([f"|{chomp.indicator}", *_indent_lines(value.split("\n"), indent)])


def render_block(
    value: str,
    style: Style,
    *,
    indent: str,
    wrap_at: int = DEFAULT_WRAP_AT,
) -> str:
    """Render ``value`` with a block ``style`` (literal or folded)."""
    if style.kind is ScalarKind.FOLDED:
        return fold_string(value, indent=indent, chomp=style.chomp, wrap_at=wrap_at)
    return literal_string(value, indent=indent, chomp=style.chomp)
