# topmark:header:start
#
#   project      : YmLog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the YmLog test suite.

Sets up TRACE-level diagnostics logging for test runs and provides typed mark
helpers and small factories shared by the test modules.

Notes:
    Build logger settings with `ymlog.config.model.MutableLoggerConfig`, then
    `freeze()` them into a `LoggerConfig`. Do not mutate a frozen config; call
    `LoggerConfig.thaw()` and freeze again.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from ymlog.config import logging
from ymlog.constants import ENV_LEVEL, ENV_LOG_LEVEL
from ymlog.entry import Entry
from ymlog.levels import Level
from ymlog.logger import YmLog

if TYPE_CHECKING:
    from pathlib import Path

    from ymlog.config.model import LoggerConfig

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_ymlog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell settings (YMLOG_LEVEL, YMLOG_LOG_LEVEL) out of the tests."""
    monkeypatch.delenv(ENV_LEVEL, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE diagnostics for all tests so internal decisions show up in failures."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty project directory so no config files are discovered.

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class StreamCapture:
    """A logger over an in-memory sink, with the lowest threshold by default."""

    def __init__(self, *, level: Level = Level.TRACE, config: LoggerConfig | None = None) -> None:
        self.sink = io.BytesIO()
        self.log = YmLog(self.sink, level=level, config=config)

    @property
    def text(self) -> str:
        """Everything written so far, decoded."""
        return self.sink.getvalue().decode("utf-8")

    def emit(self, message: object, actions: str = "") -> str:
        """Log ``message`` with ``actions`` and return only the newly written text."""
        before: int = len(self.sink.getvalue())
        self.log.log(Entry(message), actions)
        return self.sink.getvalue()[before:].decode("utf-8")


@pytest.fixture
def stream() -> StreamCapture:
    """A fresh logger over an in-memory sink at TRACE threshold."""
    return StreamCapture()
