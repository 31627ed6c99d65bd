# topmark:header:start
#
#   project      : YmLog
#   file         : test_folder.py
#   file_relpath : tests/test_folder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the scalar folder (`ymlog.rendering.folder`)."""

from __future__ import annotations

from ymlog.rendering.folder import fold_string, literal_string, render_block, wrap_line
from ymlog.rendering.styles import Chomp, Style

from tests.conftest import parametrize


@parametrize(
    ("line", "indent_len", "wrap_at", "expected"),
    [
        ("hello world", 0, 120, ["hello world"]),
        ("aaaa bbbb cccc", 0, 10, ["aaaa bbbb", "cccc"]),
        # reaching the width exactly folds
        ("aaaa bbbb", 0, 9, ["aaaa", "bbbb"]),
        ("aaaa bbbb", 0, 10, ["aaaa bbbb"]),
        # the indentation counts towards the width
        ("aaaa bbbb", 2, 11, ["aaaa", "bbbb"]),
        # one space is consumed by the fold, the rest starts the next row
        ("aaaa   bbbb", 0, 8, ["aaaa", "  bbbb"]),
        # words are never split
        ("x" * 20, 0, 10, ["x" * 20]),
        ("ab " + "x" * 20, 0, 10, ["ab", "x" * 20]),
        ("  lead", 0, 120, ["  lead"]),
        ("trail  ", 0, 120, ["trail  "]),
        ("", 0, 120, [""]),
    ],
)
def test_wrap_line(line: str, indent_len: int, wrap_at: int, expected: list[str]) -> None:
    """Rows are split greedily at word boundaries."""
    assert wrap_line(line, indent_len=indent_len, wrap_at=wrap_at) == expected


def test_fold_string_keeps_explicit_newlines() -> None:
    """Explicit newlines force a hard break; empty lines carry no indentation."""
    assert fold_string("a\n\nb", indent="  ") == ">\n  a\n\n  b"


def test_fold_string_wraps_each_line() -> None:
    """Every source line is wrapped on its own and re-indented."""
    text: str = fold_string("one two three\nfour", indent="    ", chomp=Chomp.STRIP, wrap_at=12)
    assert text == ">-\n    one two\n    three\n    four"


def test_literal_string_is_verbatim() -> None:
    """Literal blocks are never wrapped."""
    long_line: str = " ".join(["word"] * 40)
    assert literal_string(f"{long_line}\nb", indent="  ") == f"|\n  {long_line}\n  b"


@parametrize(
    ("chomp", "header"),
    [(Chomp.CLIP, "|"), (Chomp.STRIP, "|-"), (Chomp.KEEP, "|+")],
)
def test_literal_string_header(chomp: Chomp, header: str) -> None:
    """The chomping indicator follows the block indicator."""
    assert literal_string("a\nb", indent="    ", chomp=chomp) == f"{header}\n    a\n    b"


def test_literal_string_trailing_newline_keeps_empty_line() -> None:
    """A trailing newline becomes an unindented empty last line."""
    assert literal_string("a\n", indent="  ", chomp=Chomp.KEEP) == "|+\n  a\n"


def test_render_block_dispatches_on_kind() -> None:
    """Folded styles fold, literal styles do not."""
    text = "aaaa bbbb"
    assert render_block(text, Style.folded(), indent="", wrap_at=5) == ">\naaaa\nbbbb"
    assert render_block(text, Style.literal(), indent="", wrap_at=5) == "|\naaaa bbbb"
