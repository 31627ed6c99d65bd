# topmark:header:start
#
#   project      : YmLog
#   file         : test_logger.py
#   file_relpath : tests/test_logger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stream-level tests for `ymlog.logger.YmLog`.

Each test drives a logger over an in-memory sink and checks the exact bytes
appended by every call.
"""

from __future__ import annotations

import io
import threading
from typing import TYPE_CHECKING

import pytest

from ymlog.call import emit
from ymlog.config.model import LoggerConfig
from ymlog.entry import Entry
from ymlog.errors import (
    MissingMessageError,
    SinkNotConfiguredError,
    SinkWriteError,
    UnknownActionError,
)
from ymlog.levels import Level
from ymlog.logger import YmLog
from ymlog.tracker import Frame

from tests.conftest import StreamCapture

if TYPE_CHECKING:
    from pathlib import Path


class _BrokenSink:
    def write(self, data: bytes) -> int:
        raise OSError("disk full")


# ----------------------------- stream properties ------------------------------


def test_nothing_logged(stream: StreamCapture) -> None:
    assert stream.text == ""


def test_first_and_second_root_messages(stream: StreamCapture) -> None:
    assert stream.emit("hello") == "hello"
    assert stream.emit("world") == "\n--- world"


def test_indent_and_continue(stream: StreamCapture) -> None:
    stream.emit("hello")
    assert stream.emit("world", "+") == ":\n  - world"
    assert stream.emit("again") == "\n  - again"
    assert stream.text == "hello:\n  - world\n  - again"


def test_block_and_block_indent(stream: StreamCapture) -> None:
    stream.emit("hello")
    assert stream.emit("a\nb", "+") == ":\n  - |-\n    a\n    b"
    assert stream.emit("c", "+") == '\n  - "" :\n    - c'


def test_extra_dedents_floor_at_root(stream: StreamCapture) -> None:
    stream.emit("hello")
    stream.emit("world", "+")
    assert stream.emit("again", "-----") == "\n--- again"


def test_reset_starts_new_document(stream: StreamCapture) -> None:
    stream.emit("hello")
    stream.emit("world", "+")
    assert stream.emit("again", "r") == "\n--- again"


def test_reset_on_fresh_logger(stream: StreamCapture) -> None:
    assert stream.emit("x", "r") == "x"


def test_indent_then_dedent_is_neutral(stream: StreamCapture) -> None:
    stream.emit("hello")
    assert stream.emit("world", "+-") == "\n--- world"


def test_double_indent_is_single(stream: StreamCapture) -> None:
    stream.emit("hello")
    assert stream.emit("world", "++") == ":\n  - world"


def test_three_levels(stream: StreamCapture) -> None:
    stream.emit("a")
    stream.emit("b", "+")
    stream.emit("c", "+")
    assert stream.text == "a:\n  - b:\n    - c"


def test_write_twice(stream: StreamCapture) -> None:
    assert stream.emit("hello", "_+_") == "hello:\n  - hello"


# -------------------------------- key / value ---------------------------------


def test_split_key_at_root(stream: StreamCapture) -> None:
    assert stream.emit("user: alice", "k") == "user: alice"


def test_split_key_nested_then_indent(stream: StreamCapture) -> None:
    stream.emit("login")
    assert stream.emit("user: alice", "+k") == ":\n  - user: alice"
    assert stream.emit("x", "+") == '\n  - "" :\n    - x'


def test_block_action_at_root(stream: StreamCapture) -> None:
    assert stream.emit("one line", "b") == "|\n  one line"


def test_structured_message(stream: StreamCapture) -> None:
    stream.emit("config")
    assert stream.emit({"port": 8080, "hosts": ["a", "b"]}, "+") == (
        ":\n  - port: 8080\n    hosts:\n      - a\n      - b"
    )


def test_children(stream: StreamCapture) -> None:
    entry = Entry("parent", children=[Entry("a"), Entry("b")])
    stream.log.log(entry)
    assert stream.text == "parent:\n  - a\n  - b"


# ---------------------------------- levels ------------------------------------


def test_level_filter_still_applies_actions() -> None:
    capture = StreamCapture(level=Level.INFO)
    capture.emit("hello")
    assert capture.emit("hidden", "+D") == ""
    assert capture.log.tracker.frames == (Frame.PLAIN_ITEM, Frame.INDENT_PENDING)
    assert capture.emit("shown") == ":\n  - shown"


def test_unset_level_counts_as_info() -> None:
    capture = StreamCapture(level=Level.WARN)
    assert capture.emit("info by default") == ""
    assert capture.emit("warning", "W") == "warning"


def test_set_level() -> None:
    capture = StreamCapture(level=Level.ERROR)
    assert capture.emit("x", "W") == ""
    capture.log.set_level(Level.TRACE)
    assert capture.log.level is Level.TRACE
    assert capture.emit("x", "W") == "x"


# ---------------------------------- errors ------------------------------------


def test_unknown_action_keeps_earlier_effects(stream: StreamCapture) -> None:
    stream.emit("hello")
    with pytest.raises(UnknownActionError):
        stream.emit("x", "+q")
    assert stream.log.tracker.top is Frame.INDENT_PENDING
    assert stream.emit("world") == ":\n  - world"


def test_missing_sink() -> None:
    log = YmLog()
    with pytest.raises(SinkNotConfiguredError):
        log.log(Entry("x"), "+")


def test_missing_message(stream: StreamCapture) -> None:
    with pytest.raises(MissingMessageError):
        stream.log.log(Entry())
    assert stream.text == ""


def test_broken_sink_advances_tracker() -> None:
    log = YmLog(_BrokenSink())
    with pytest.raises(SinkWriteError) as excinfo:
        log.log(Entry("hello"))
    assert isinstance(excinfo.value.__cause__, OSError)
    assert log.tracker.frames == (Frame.PLAIN_ITEM,)
    assert log.bytes_written == 0


def test_closed_sink() -> None:
    sink = io.BytesIO()
    log = YmLog(sink)
    sink.close()
    with pytest.raises(SinkWriteError):
        log.log(Entry("hello"))


# ------------------------------ sinks and files -------------------------------


def test_set_output(stream: StreamCapture) -> None:
    stream.emit("hello")
    other = io.BytesIO()
    stream.log.set_output(other)
    stream.log.log(Entry("world"))
    assert other.getvalue() == b"\n--- world"


def test_open_and_close(tmp_path: Path) -> None:
    path: Path = tmp_path / "run.yaml"
    with YmLog.open(path) as log:
        log.log(Entry("starting"))
        log.log(Entry("step"), "+")
    assert path.read_text(encoding="utf-8") == "starting:\n  - step"
    with pytest.raises(SinkNotConfiguredError):
        log.log(Entry("late"))


def test_open_append(tmp_path: Path) -> None:
    path: Path = tmp_path / "run.yaml"
    path.write_text("existing\n", encoding="utf-8")
    with YmLog.open(path, append=True) as log:
        log.log(Entry("hello"))
    assert path.read_text(encoding="utf-8") == "existing\nhello"


def test_close_leaves_foreign_sink_open() -> None:
    sink = io.BytesIO()
    with YmLog(sink) as log:
        log.log(Entry("hello"))
    assert not sink.closed


def test_bytes_written_counts_utf8(stream: StreamCapture) -> None:
    stream.emit("héllo")
    assert stream.log.bytes_written == len("héllo".encode())


def test_indent_width_setting() -> None:
    capture = StreamCapture(config=LoggerConfig(indent_width=4))
    capture.emit("hello")
    assert capture.emit("world", "+") == ":\n    - world"


# -------------------------------- concurrency ---------------------------------


def test_concurrent_writers_never_interleave(stream: StreamCapture) -> None:
    def worker(index: int) -> None:
        for count in range(50):
            stream.log.log(Entry(f"worker {index} entry {count}"))

    threads: list[threading.Thread] = [
        threading.Thread(target=worker, args=(index,)) for index in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines: list[str] = stream.text.split("\n")
    assert len(lines) == 400
    assert not lines[0].startswith("---")
    assert all(line.startswith("--- worker ") for line in lines[1:])


# --------------------------------- recursion ----------------------------------


def test_recursive_call_pattern(stream: StreamCapture) -> None:
    """Nested helpers mixing writes, indents and dedents produce a consistent stream."""

    def recurse(remains: list[int]) -> None:
        if not remains:
            return
        value: int = remains.pop()
        case: int = value % 5
        if case == 0:
            emit(stream.log, "R0, value is %d", value)
        elif case == 1:
            emit(stream.log, "R1, value is %d", value, actions="_+")
        elif case == 2:
            emit(stream.log, "R2, indented after value is %d", value, actions="_")
        elif case == 3:
            emit(stream.log, "R3, indented after value is %d", value, actions="+++_")
        else:
            emit(stream.log, "Back to the root level, value is %d", value, actions="--_")
        recurse(remains)

    recurse(list(range(1, 11)))
    assert stream.text == (
        "R0, value is 10\n"
        "--- Back to the root level, value is 9:\n"
        "  - R3, indented after value is 8\n"
        "  - R2, indented after value is 7\n"
        "  - R1, value is 6:\n"
        "    - R0, value is 5\n"
        "--- Back to the root level, value is 4:\n"
        "  - R3, indented after value is 3\n"
        "  - R2, indented after value is 2\n"
        "  - R1, value is 1"
    )
    assert stream.log.tracker.top is Frame.INDENT_PENDING
