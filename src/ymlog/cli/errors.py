# topmark:header:start
#
#   project      : YmLog
#   file         : errors.py
#   file_relpath : src/ymlog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the YmLog CLI.

Usage:
    Commands raise these (or convert library errors with `from_library_error`)
    to signal failures with standardized messages and exit codes.
"""

from __future__ import annotations

from typing import IO, Any

import click

from ymlog.cli.console import ClickConsole
from ymlog.cli.exit_codes import ExitCode
from ymlog.errors import (
    ConfigError,
    RenderInvariantError,
    SinkNotConfiguredError,
    SinkWriteError,
    YmlogError,
)


class YmlogCliError(click.ClickException):
    """Base class for all YmLog CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colors are applied by `show`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the project console when one is available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: object = ctx.obj if ctx is not None else None
        console: object = obj.get("console") if isinstance(obj, dict) else None
        if isinstance(console, ClickConsole):
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class YmlogUsageError(YmlogCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class YmlogDataError(YmlogCliError):
    """A script line could not be logged."""

    exit_code = ExitCode.DATA_ERROR


class YmlogConfigError(YmlogCliError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class YmlogFileNotFoundError(YmlogCliError):
    """The script file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class YmlogIOError(YmlogCliError):
    """Reading the script or writing the stream failed."""

    exit_code = ExitCode.IO_ERROR


class YmlogInternalError(YmlogCliError):
    """The renderer violated one of its own invariants."""

    exit_code = ExitCode.INTERNAL_ERROR


def from_library_error(exc: YmlogError, *, where: str | None = None) -> YmlogCliError:
    """Map a library error to the CLI error carrying the matching exit code.

    Args:
        exc (YmlogError): The error raised by the library.
        where (str | None): Optional location prefix such as ``"line 3"``.

    Returns:
        YmlogCliError: The error to raise from the command.
    """
    message: str = f"{where}: {exc}" if where else str(exc)
    if isinstance(exc, ConfigError):
        return YmlogConfigError(message)
    if isinstance(exc, (SinkWriteError, SinkNotConfiguredError)):
        return YmlogIOError(message)
    if isinstance(exc, RenderInvariantError):
        return YmlogInternalError(message)
    return YmlogDataError(message)
