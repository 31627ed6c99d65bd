# topmark:header:start
#
#   project      : YmLog
#   file         : errors.py
#   file_relpath : src/ymlog/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the YmLog library.

Usage:
    Every failure of a `log()` call surfaces as a subclass of `YmlogError`.
    Caller errors (bad entries, bad action strings) are raised before any text
    is produced for the failing write; sink failures are raised after the
    tracker has already advanced.
"""

from __future__ import annotations


class YmlogError(Exception):
    """Base class for all YmLog errors."""


class MissingMessageError(YmlogError):
    """An entry reached the renderer without a message."""

    def __init__(
        self,
        message: str = "Tried to serialize a ymlog entry without setting a message",
    ) -> None:
        super().__init__(message)


class InvalidShapeError(YmlogError):
    """An entry has both a structured message (mapping or key/value) and children."""


class UnsplittableMessageError(YmlogError):
    """The `k` action was applied to a message that cannot be split into key and value."""


class UnknownActionError(YmlogError):
    """An action string contains a character that is not a known op-code.

    Attributes:
        char (str): The offending character.
        position (int): Zero-based index of the character in the action string.
    """

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position} in action string")


class RenderInvariantError(YmlogError, AssertionError):
    """The splice renderer could not locate its own sentinel in the rendered wrapper.

    This is an internal bug, never a caller error.
    """


class SinkWriteError(YmlogError):
    """Writing rendered bytes to the sink failed."""


class SinkNotConfiguredError(YmlogError):
    """`log()` was called on a logger that has no output sink."""

    def __init__(
        self,
        message: str = "The logger has no output sink; call set_output() first",
    ) -> None:
        super().__init__(message)


class ConfigError(YmlogError):
    """Configuration could not be read or contains invalid values."""
