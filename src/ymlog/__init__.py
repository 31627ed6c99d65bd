# topmark:header:start
#
#   project      : YmLog
#   file         : __init__.py
#   file_relpath : src/ymlog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YmLog package.

YmLog is a streaming YAML logger. Each log call appends one entry to a single
growing, indentation-consistent YAML-flavored text stream; callers control
nesting with symbolic indent/dedent/reset actions instead of raw whitespace.

Typical use:
    ```python
    import io

    from ymlog import Entry, YmLog

    sink = io.BytesIO()
    log = YmLog(sink)
    log.log(Entry("starting"))
    log.log(Entry("step one"), "+")
    ```
"""

from __future__ import annotations

from ymlog.entry import Entry, KeyValue
from ymlog.errors import (
    ConfigError,
    InvalidShapeError,
    MissingMessageError,
    RenderInvariantError,
    SinkNotConfiguredError,
    SinkWriteError,
    UnknownActionError,
    UnsplittableMessageError,
    YmlogError,
)
from ymlog.levels import Level
from ymlog.logger import YmLog
from ymlog.rendering.styles import Chomp, ScalarKind, Style

__all__ = [
    "Chomp",
    "ConfigError",
    "Entry",
    "InvalidShapeError",
    "KeyValue",
    "Level",
    "MissingMessageError",
    "RenderInvariantError",
    "ScalarKind",
    "SinkNotConfiguredError",
    "SinkWriteError",
    "Style",
    "UnknownActionError",
    "UnsplittableMessageError",
    "YmLog",
    "YmlogError",
]
