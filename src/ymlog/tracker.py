# topmark:header:start
#
#   project      : YmLog
#   file         : tracker.py
#   file_relpath : src/ymlog/tracker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Depth Tracker: the stateful core of the YAML stream.

The tracker keeps a stack of `Frame` values, one per open nesting level, and
decides for every entry which punctuation and indentation must be spliced in
front of its rendered fragment so that the stream stays indentation-consistent:

| top frame              | serialize() prefix                              |
|------------------------|-------------------------------------------------|
| (empty)                | nothing, root fragment                          |
| FRESH                  | ``\n`` + root fragment opened with ``---``      |
| PLAIN / BLOCK / KV     | ``\n`` + fragment at the current depth          |
| INDENT_PENDING         | ``:\n`` + fragment (the parent becomes a key)   |
| BLOCK_INDENT_PENDING   | ``\n`` + ``- "" :`` + fragment                  |

A block scalar cannot become a mapping key, so indenting below one opens a
phony empty-key mapping item instead. Indentation is honored once per parent:
repeated indents without a write in between are ignored.

The bottom frame is never popped by `DepthTracker.dedent`, so extra dedents
floor at the root.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING

from ymlog.config.logging import get_logger
from ymlog.constants import BLOCK_INDENT_KEY
from ymlog.entry import KeyValue
from ymlog.rendering.splice import SpliceRenderer, normalize_value

if TYPE_CHECKING:
    from ymlog.config.logging import YmlogLogger
    from ymlog.entry import Entry

logger: YmlogLogger = get_logger(__name__)


class Frame(Enum):
    """What was last written (or is pending) at one nesting level."""

    FRESH = "fresh"
    PLAIN_ITEM = "plain"
    BLOCK_ITEM = "block"
    INDENT_PENDING = "indent"
    BLOCK_INDENT_PENDING = "block-indent"
    KEY_VALUE_ITEM = "key-value"


_ITEM_FRAMES: tuple[Frame, ...] = (Frame.PLAIN_ITEM, Frame.BLOCK_ITEM, Frame.KEY_VALUE_ITEM)


class DepthTracker:
    """Stack machine that turns entries into correctly prefixed stream fragments.

    Attributes:
        renderer (SpliceRenderer): Produces the fragment for a value at a depth.
        show_metadata (bool): Render entries with metadata as full records.
    """

    renderer: SpliceRenderer
    show_metadata: bool

    def __init__(
        self,
        renderer: SpliceRenderer | None = None,
        *,
        show_metadata: bool = False,
    ) -> None:
        self.renderer = renderer if renderer is not None else SpliceRenderer()
        self.show_metadata = show_metadata
        self._stack: list[Frame] = []

    def __repr__(self) -> str:
        return f"DepthTracker(frames={[frame.value for frame in self._stack]!r})"

    @property
    def frames(self) -> tuple[Frame, ...]:
        """Snapshot of the stack, bottom first."""
        return tuple(self._stack)

    @property
    def depth(self) -> int:
        """Nesting depth of the next write; 0 is the document root."""
        return max(len(self._stack) - 1, 0)

    @property
    def top(self) -> Frame | None:
        """The innermost frame, or None when nothing was written yet."""
        return self._stack[-1] if self._stack else None

    # -------------------------------- structure ---------------------------------

    def indent(self) -> None:
        """Open a nesting level below the last written entry."""
        top: Frame | None = self.top
        if top is Frame.PLAIN_ITEM:
            self._stack.append(Frame.INDENT_PENDING)
        elif top in (Frame.BLOCK_ITEM, Frame.KEY_VALUE_ITEM):
            self._stack.append(Frame.BLOCK_INDENT_PENDING)
        else:
            logger.trace("Ignoring indent on top frame %s", top)

    def dedent(self) -> None:
        """Close the innermost nesting level; a no-op at the root."""
        if len(self._stack) > 1:
            self._stack.pop()

    def reset(self) -> None:
        """Return to the root; the next entry starts a new document."""
        # No FRESH marker before the first write: an empty stack already starts a document.
        if self._stack:
            self._stack = [Frame.FRESH]

    # -------------------------------- rendering ---------------------------------

    def value_of(self, entry: Entry) -> object:
        """Return the value rendered for ``entry``."""
        return entry.to_record() if self.show_metadata else entry.to_value()

    def serialize(self, entry: Entry) -> str:
        """Render ``entry`` with the prefix required by the current state and advance the stack.

        Args:
            entry (Entry): The entry to render.

        Returns:
            str: The text to append to the stream, without trailing whitespace.

        Raises:
            MissingMessageError: If the entry has no message.
            InvalidShapeError: If the entry combines a structured message with children.
            RenderInvariantError: If the renderer output cannot be spliced.
        """
        value: object = self.value_of(entry)
        top: Frame | None = self.top
        size: int = len(self._stack)
        render = self.renderer.render

        if top is None:
            text: str = render(value, 1, style=entry.style)
        elif top is Frame.FRESH:
            text = "\n" + render(value, 1, style=entry.style, explicit_start=True)
        elif top in _ITEM_FRAMES:
            text = "\n" + render(value, size, style=entry.style, explicit_start=size <= 1)
        elif top is Frame.INDENT_PENDING:
            text = ":\n" + render(value, size, style=entry.style)
        else:
            text = (
                f"\n{self.renderer.unit * (size - 2)}{BLOCK_INDENT_KEY}\n"
                + render(value, size, style=entry.style)
            )

        frame: Frame = self._frame_for(entry, value, top)
        if top is None:
            self._stack.append(frame)
        else:
            self._stack[-1] = frame
        logger.trace("Wrote %s after %s, stack is now %r", frame, top, self)
        return text.rstrip()

    def _frame_for(self, entry: Entry, value: object, top: Frame | None) -> Frame:
        if top is Frame.BLOCK_INDENT_PENDING or self.renderer.is_block(value, entry.style):
            return Frame.BLOCK_ITEM
        # Quoted or plain scalars spanning lines cannot become keys either
        normalized: object = normalize_value(value)
        if isinstance(normalized, str) and "\n" in normalized:
            return Frame.BLOCK_ITEM
        if isinstance(entry.message, KeyValue) or isinstance(value, (Mapping, list, tuple)):
            return Frame.KEY_VALUE_ITEM
        return Frame.PLAIN_ITEM
