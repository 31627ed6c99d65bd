# topmark:header:start
#
#   project      : YmLog
#   file         : test_actions.py
#   file_relpath : tests/test_actions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the action interpreter (`ymlog.actions`)."""

from __future__ import annotations

import pytest

from ymlog.actions import Action, parse_actions, run_actions
from ymlog.entry import Entry, KeyValue
from ymlog.errors import UnknownActionError
from ymlog.levels import Level
from ymlog.rendering.styles import Style
from ymlog.tracker import DepthTracker, Frame

from tests.conftest import parametrize


class _Recorder:
    def __init__(self, tracker: DepthTracker) -> None:
        self.tracker = tracker
        self.chunks: list[str] = []

    def __call__(self, entry: Entry) -> None:
        self.chunks.append(self.tracker.serialize(entry))


def _run(actions: str, entry: Entry, tracker: DepthTracker | None = None) -> _Recorder:
    recorder = _Recorder(tracker if tracker is not None else DepthTracker())
    run_actions(actions, entry, recorder.tracker, write=recorder)
    return recorder


def test_parse_actions() -> None:
    """Every op-code maps to one action."""
    assert parse_actions("+-r_kbTDIWE") == list(Action)
    assert parse_actions("") == []


def test_parse_actions_reports_position() -> None:
    """Unknown characters are reported with their position."""
    with pytest.raises(UnknownActionError) as excinfo:
        parse_actions("+_x")
    assert excinfo.value.char == "x"
    assert excinfo.value.position == 2


def test_level_actions() -> None:
    """Level op-codes map to levels; the last one wins."""
    assert Action.WARN.level is Level.WARN
    assert Action.INDENT.level is None
    entry = Entry("m")
    _run("DWE", entry)
    assert entry.level is Level.ERROR


def test_implicit_write() -> None:
    """Without '_' the entry is written once after all actions."""
    recorder = _run("", Entry("hello"))
    assert recorder.chunks == ["hello"]


def test_explicit_writes() -> None:
    """Each '_' writes the entry in the state reached so far."""
    recorder = _run("_+_", Entry("hello"))
    assert recorder.chunks == ["hello", ":\n  - hello"]


def test_split_key_action() -> None:
    """'k' splits the message before the write."""
    entry = Entry("user: alice")
    recorder = _run("k", entry)
    assert entry.message == KeyValue("user", "alice")
    assert recorder.chunks == ["user: alice"]


def test_block_action() -> None:
    """'b' selects a literal block with clip chomping."""
    entry = Entry("one line")
    recorder = _run("b", entry)
    assert entry.style == Style.literal()
    assert recorder.chunks == ["|\n  one line"]


@parametrize("actions", ["z", "+z", "_?"])
def test_unknown_action_keeps_earlier_effects(actions: str) -> None:
    """Actions before the unknown character stay applied; no implicit write happens."""
    tracker = DepthTracker()
    tracker.serialize(Entry("hello"))
    recorder = _Recorder(tracker)
    with pytest.raises(UnknownActionError):
        run_actions(actions, Entry("x"), tracker, write=recorder)
    if actions.startswith("+"):
        assert tracker.frames == (Frame.PLAIN_ITEM, Frame.INDENT_PENDING)
    assert recorder.chunks == (["\n--- x"] if actions.startswith("_") else [])


def test_returns_write_count() -> None:
    """The number of writes is reported back."""
    tracker = DepthTracker()
    assert run_actions("__", Entry("a"), tracker, write=lambda entry: None) == 2
    assert run_actions("+", Entry("a"), tracker, write=lambda entry: None) == 1
