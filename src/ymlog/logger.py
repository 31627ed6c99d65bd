# topmark:header:start
#
#   project      : YmLog
#   file         : logger.py
#   file_relpath : src/ymlog/logger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `YmLog` logger: one YAML stream, one depth tracker, one lock.

A logger is constructed explicitly and owns everything a stream needs:

- a `DepthTracker` (and its `SpliceRenderer`) configured from a `LoggerConfig`;
- a byte sink, any object with ``write(bytes)``;
- a minimum `Level`;
- a `threading.Lock` held for the whole of every `YmLog.log` call, so
  concurrent callers never interleave actions or partial writes.

Example:
    ```python
    with YmLog.open("run.yaml") as log:
        log.log(Entry("starting"))
        log.log(Entry("loading config"), "+")
        log.log(Entry("done"), "r")
    ```
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import IO, TYPE_CHECKING, Protocol

from ymlog.actions import run_actions
from ymlog.config.logging import get_logger
from ymlog.config.model import LoggerConfig
from ymlog.errors import SinkNotConfiguredError, SinkWriteError
from ymlog.levels import Level
from ymlog.rendering.splice import SpliceRenderer
from ymlog.tracker import DepthTracker

if TYPE_CHECKING:
    from types import TracebackType

    from ymlog.config.logging import YmlogLogger
    from ymlog.entry import Entry

logger: YmlogLogger = get_logger(__name__)


class ByteSink(Protocol):
    """Anything the rendered stream can be written to."""

    def write(self, data: bytes, /) -> object: ...


class YmLog:
    """A streaming YAML logger.

    Attributes:
        config (LoggerConfig): The settings the logger was built with.
        tracker (DepthTracker): Nesting state of the stream.
        bytes_written (int): Total bytes handed to the sink so far.
    """

    config: LoggerConfig
    tracker: DepthTracker
    bytes_written: int

    def __init__(
        self,
        sink: ByteSink | None = None,
        *,
        level: Level | None = None,
        config: LoggerConfig | None = None,
    ) -> None:
        """Create a logger.

        Args:
            sink (ByteSink | None): Output sink; may be set later with `set_output`.
            level (Level | None): Minimum level; overrides ``config.level``.
            config (LoggerConfig | None): Settings (default: `LoggerConfig()`).
        """
        self.config = config if config is not None else LoggerConfig()
        self._level: Level = level if level is not None else self.config.level
        self._sink: ByteSink | None = sink
        self._owned: IO[bytes] | None = None
        self._lock = threading.Lock()
        self.tracker = DepthTracker(
            SpliceRenderer(indent_width=self.config.indent_width, wrap_at=self.config.wrap_at),
            show_metadata=self.config.show_metadata,
        )
        self.bytes_written = 0

    @classmethod
    def open(
        cls,
        path: str | Path,
        *,
        append: bool = False,
        level: Level | None = None,
        config: LoggerConfig | None = None,
    ) -> YmLog:
        """Create a logger writing to the file at ``path``.

        The file is truncated unless ``append`` is true and is closed by `close`
        (or when leaving a ``with`` block).
        """
        handle: IO[bytes] = Path(path).open("ab" if append else "wb")
        log: YmLog = cls(handle, level=level, config=config)
        log._owned = handle
        return log

    def __repr__(self) -> str:
        return f"YmLog(level={self._level.name}, tracker={self.tracker!r})"

    def __enter__(self) -> YmLog:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # -------------------------------- settings ----------------------------------

    @property
    def level(self) -> Level:
        """Minimum level of entries written to the stream."""
        return self._level

    def set_level(self, level: Level) -> None:
        """Change the minimum level."""
        with self._lock:
            self._level = level

    def set_output(self, sink: ByteSink) -> None:
        """Replace the sink; a file opened by `open` is closed first."""
        with self._lock:
            self._close_owned()
            self._sink = sink

    def close(self) -> None:
        """Close the sink if this logger opened it; other sinks are left alone."""
        with self._lock:
            if self._owned is not None:
                self._close_owned()
                self._sink = None

    def _close_owned(self) -> None:
        if self._owned is not None:
            self._owned.close()
            self._owned = None

    # -------------------------------- logging -----------------------------------

    def log(self, entry: Entry, actions: str = "") -> None:
        """Apply ``actions`` to ``entry`` and write it to the stream.

        Args:
            entry (Entry): The entry to log; mutated by the actions.
            actions (str): Action string, e.g. ``"+"``, ``"r_"``, ``"Wk"``.

        Raises:
            SinkNotConfiguredError: If no sink was set.
            UnknownActionError: On an unknown action character.
            MissingMessageError: If a written entry has no message.
            InvalidShapeError: If a written entry combines a structured message with children.
            UnsplittableMessageError: If ``k`` is applied to a message without ``:``.
            SinkWriteError: If the sink fails; the tracker has already advanced.
        """
        with self._lock:
            if self._sink is None:
                raise SinkNotConfiguredError()
            run_actions(actions, entry, self.tracker, write=self._write)

    def _write(self, entry: Entry) -> None:
        level: Level = entry.level if entry.level is not None else Level.INFO
        if level < self._level:
            logger.debug("Skipping %s entry below threshold %s", level.name, self._level.name)
            return

        sink: ByteSink | None = self._sink
        if sink is None:
            raise SinkNotConfiguredError()
        data: bytes = self.tracker.serialize(entry).encode("utf-8")
        try:
            sink.write(data)
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"Failed to write {len(data)} bytes to the sink: {exc}") from exc
        self.bytes_written += len(data)
