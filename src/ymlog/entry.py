# topmark:header:start
#
#   project      : YmLog
#   file         : entry.py
#   file_relpath : src/ymlog/entry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Log entries: the value model for one log call.

An `Entry` is built fresh for every log call, mutated by the action
interpreter, rendered once and discarded. Setters never validate; shape
invariants are checked when the entry is turned into a value:

- an entry without a message cannot be rendered;
- a structured message (mapping, sequence or `KeyValue`) cannot have children.

The computed value of an entry is its message (a `KeyValue` becomes a one-pair
mapping), or ``{message: [child values...]}`` when children are present.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from ymlog.errors import InvalidShapeError, MissingMessageError, UnsplittableMessageError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ymlog.levels import Level
    from ymlog.rendering.styles import Style


@dataclass(frozen=True)
class KeyValue:
    """A message made of a single key and its value."""

    key: str
    value: object

    def to_mapping(self) -> dict[str, object]:
        """Return the message as a one-pair mapping."""
        return {self.key: self.value}


@dataclass
class Entry:
    """One loggable unit: a message plus optional children and metadata.

    Attributes:
        message (object | None): The content; ``None`` means no message was set.
        children (list[Entry] | None): Entries nested under the message.
        level (Level | None): Severity; unset entries are treated as ``Level.INFO``.
        tags (list[str] | None): Searchable strings.
        timestamp (datetime | None): When the entry was stamped (UTC).
        style (Style | None): Rendering override for string messages.
    """

    message: object | None = None
    children: list[Entry] | None = None
    level: Level | None = None
    tags: list[str] | None = None
    timestamp: datetime | None = None
    style: Style | None = None

    # --------------------------------- builders ---------------------------------

    def set_message(self, value: object) -> None:
        """Replace the message with ``value``."""
        self.message = value

    def set_key_value(self, key: str, value: object) -> None:
        """Replace the message with a key/value pair."""
        self.message = KeyValue(key, value)

    def set_children(self, children: Iterable[Entry]) -> None:
        """Attach child entries that have been aggregated in code."""
        self.children = list(children)

    def set_level(self, level: Level) -> None:
        """Set the severity of the entry."""
        self.level = level

    def set_tags(self, tags: Iterable[object]) -> None:
        """Set the tags of the entry; each tag is stringified."""
        self.tags = [str(tag) for tag in tags]

    def set_style(self, style: Style | None) -> None:
        """Set (or clear) the rendering override."""
        self.style = style

    def stamp(self, now: datetime | None = None) -> None:
        """Set the timestamp to ``now`` (default: the current UTC time)."""
        self.timestamp = now if now is not None else datetime.now(timezone.utc)

    def split_key_value(self) -> None:
        """Split a plain string message at its first ``:`` into a `KeyValue`.

        Raises:
            UnsplittableMessageError: If the message is already split, is not a
                string, or contains no ``:``.
        """
        message: object | None = self.message
        if isinstance(message, KeyValue):
            raise UnsplittableMessageError("The message was already split into a key and a value")
        if not isinstance(message, str):
            raise UnsplittableMessageError(
                f"Only plain string messages can be split, got {type(message).__name__}"
            )
        key, sep, value = message.partition(":")
        if not sep:
            raise UnsplittableMessageError(f"No ':' found in message {message!r}")
        self.message = KeyValue(key.strip(), value.strip())

    # -------------------------------- rendering ---------------------------------

    @property
    def has_metadata(self) -> bool:
        """Whether any of timestamp, level, tags or children is set."""
        return any(
            item is not None for item in (self.timestamp, self.level, self.tags, self.children)
        )

    def check_shape(self) -> None:
        """Validate the entry invariants, recursively.

        Raises:
            MissingMessageError: If the message was never set.
            InvalidShapeError: If a structured message is combined with children.
        """
        message: object | None = self.message
        if message is None:
            raise MissingMessageError()
        if self.children is None:
            return
        if isinstance(message, KeyValue):
            raise InvalidShapeError("Key/value messages cannot have children")
        if isinstance(message, (Mapping, list, tuple, set, frozenset)):
            raise InvalidShapeError(
                "Log entries either have children or a structured message, not both"
            )
        for child in self.children:
            child.check_shape()

    def to_value(self) -> object:
        """Return the computed value of the entry (message, or message keyed to child values)."""
        self.check_shape()
        message: object = self.message
        if self.children is None:
            return message.to_mapping() if isinstance(message, KeyValue) else message
        key: object = message if isinstance(message, Hashable) else str(message)
        return {key: [child.to_value() for child in self.children]}

    def to_record(self) -> object:
        """Return the entry with its metadata as a mapping.

        Keys appear in the order timestamp, level, tags, message, children and
        only when set. Entries without metadata render as their plain value.
        """
        self.check_shape()
        if not self.has_metadata:
            return self.to_value()
        message: object = self.message
        record: dict[str, object] = {}
        if self.timestamp is not None:
            record["timestamp"] = self.timestamp.isoformat()
        if self.level is not None:
            record["level"] = self.level.label
        if self.tags is not None:
            record["tags"] = list(self.tags)
        record["message"] = message.to_mapping() if isinstance(message, KeyValue) else message
        if self.children is not None:
            record["children"] = [child.to_record() for child in self.children]
        return record
