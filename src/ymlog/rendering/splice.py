# topmark:header:start
#
#   project      : YmLog
#   file         : splice.py
#   file_relpath : src/ymlog/rendering/splice.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Render entry values as indented YAML fragments through PyYAML.

PyYAML only serializes complete, static trees; it has no notion of continuing
previous output or of rendering at a given indentation. Nested placement is
therefore simulated: the value is wrapped in ``depth - 2`` single-key mappings
with an empty key, the innermost one keyed by a sentinel and holding a
one-element sequence with the value. The wrapper is dumped, the text is cut at
the sentinel and the correctly indented remainder is kept.

Depth 1 (and 0) renders the value as a whole document.

Multi-line strings are written as block scalars by `ymlog.rendering.folder`:
``|+`` at the root, ``|-`` when nested (unless the entry overrides the style).

Example:
    ```python
    renderer = SpliceRenderer()
    renderer.render("hello", depth=3)
    # '    - hello\n'
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, cast

import yaml

from ymlog.config.logging import get_logger
from ymlog.constants import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_WRAP_AT,
    DOCUMENT_END,
    DOCUMENT_START,
    SPLICE_SENTINEL,
)
from ymlog.errors import RenderInvariantError
from ymlog.rendering.folder import render_block
from ymlog.rendering.styles import Chomp, block_style_for

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ymlog.config.logging import YmlogLogger
    from ymlog.rendering.styles import Style

logger: YmlogLogger = get_logger(__name__)


class FlowString(str):
    """A string that must be written with a given flow quoting style.

    Attributes:
        style (str | None): PyYAML scalar style (``'"'``, ``"'"``) or ``None``
            to let the dumper choose.
    """

    style: str | None

    def __new__(cls, value: str, style: str | None) -> FlowString:
        """Create a styled string."""
        obj: FlowString = super().__new__(cls, value)
        obj.style = style
        return obj


class _SpliceDumper(yaml.SafeDumper):
    """Safe dumper that indents sequences nested in mappings and never emits aliases."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        super().increase_indent(flow, False)

    def ignore_aliases(self, data: Any) -> bool:
        return True


def _represent_flow_string(dumper: yaml.SafeDumper, data: FlowString) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data), style=data.style)


_SpliceDumper.add_representer(FlowString, _represent_flow_string)


def _normalize_key(key: object) -> object:
    normalized: object = normalize_value(key)
    if normalized is None or isinstance(normalized, (str, bool, int, float)):
        return normalized
    return str(normalized)


def normalize_value(obj: object) -> object:
    """Normalize an arbitrary message into structures the safe dumper can represent.

    Conversions:
      - str/int/float subclasses -> the builtin type (`FlowString` is kept)
      - Enum -> Enum.name
      - PurePath -> str
      - object with callable .to_dict() -> normalize(.to_dict())
      - Mapping -> dict with normalized keys and values
      - list/tuple/set/frozenset -> list[normalized item]
      - date/datetime and None -> unchanged
      - anything else -> str(obj)

    Args:
        obj (object): The value to normalize.

    Returns:
        object: A value made of builtin scalars, dicts and lists.
    """
    if obj is None or isinstance(obj, (FlowString, bool, date)):
        return obj

    if isinstance(obj, Enum):
        return obj.name

    if isinstance(obj, str):
        return str(obj)

    if isinstance(obj, int):
        return int(obj)

    if isinstance(obj, float):
        return float(obj)

    if isinstance(obj, PurePath):
        return str(obj)

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_value(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {_normalize_key(k): normalize_value(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterable[object] = cast("Iterable[object]", obj)
        return [normalize_value(v) for v in seq]

    return str(obj)


def _strip_document_end(text: str) -> str:
    """Remove the ``...`` marker PyYAML appends after open-ended root scalars."""
    suffix: str = f"\n{DOCUMENT_END}\n"
    if text.endswith(suffix):
        return text[: -len(suffix) + 1]
    return text


class SpliceRenderer:
    """Render values as YAML fragments at a given nesting depth.

    Attributes:
        indent_width (int): Spaces per nesting level (2..9, a PyYAML constraint).
        unit (str): One level of indentation.
        wrap_at (int): Column width for folded blocks; flow scalars are never wrapped.
        sentinel (str): Key of the innermost wrapper mapping.
    """

    indent_width: int
    unit: str
    wrap_at: int
    sentinel: str

    def __init__(
        self,
        *,
        indent_width: int = DEFAULT_INDENT_WIDTH,
        wrap_at: int = DEFAULT_WRAP_AT,
        sentinel: str = SPLICE_SENTINEL,
    ) -> None:
        if not 2 <= indent_width <= 9:
            raise ValueError(f"indent_width must be between 2 and 9, got {indent_width}")
        if wrap_at < 1:
            raise ValueError(f"wrap_at must be positive, got {wrap_at}")
        self.indent_width = indent_width
        self.unit = " " * indent_width
        self.wrap_at = wrap_at
        self.sentinel = sentinel

    def dump(self, data: object, *, explicit_start: bool = False) -> str:
        """Serialize a complete value tree with the splice dumper."""
        return yaml.dump(
            data,
            Dumper=_SpliceDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=self.indent_width,
            width=float("inf"),
            explicit_start=explicit_start,
        )

    def block_style(self, value: object, style: Style | None, depth: int) -> Style | None:
        """Return the block style ``value`` renders with at ``depth``, or None."""
        default_chomp: Chomp = Chomp.KEEP if depth <= 1 else Chomp.STRIP
        return block_style_for(normalize_value(value), style, default_chomp=default_chomp)

    def is_block(self, value: object, style: Style | None = None) -> bool:
        """Whether ``value`` renders as a multi-line block scalar."""
        return self.block_style(value, style, depth=2) is not None

    def render(
        self,
        value: object,
        depth: int,
        *,
        style: Style | None = None,
        explicit_start: bool = False,
    ) -> str:
        """Render ``value`` as the fragment for nesting ``depth``.

        Args:
            value (object): The computed entry value.
            depth (int): Depth tracker stack length; 0 and 1 render a whole document.
            style (Style | None): Entry style override.
            explicit_start (bool): At the root, open the document with ``---``.

        Returns:
            str: The fragment, possibly with trailing whitespace.

        Raises:
            RenderInvariantError: If the sentinel cannot be found in the dumped wrapper.
        """
        normalized: object = normalize_value(value)
        block: Style | None = self.block_style(normalized, style, depth)
        if depth <= 1:
            fragment: str = self._render_root(normalized, block, style, explicit_start)
        else:
            fragment = self._render_nested(normalized, depth, block, style)
        logger.trace("Rendered fragment at depth %d: %r", depth, fragment)
        return fragment

    def _prepare(self, value: object, style: Style | None) -> object:
        """Apply an explicit flow quoting style to a string value."""
        if style is None or not isinstance(value, str):
            return value
        quote: str | None = style.resolve(value).kind.quote
        return FlowString(value, quote) if quote else value

    def _render_root(
        self,
        value: object,
        block: Style | None,
        style: Style | None,
        explicit_start: bool,
    ) -> str:
        if block is not None:
            body: str = render_block(
                cast("str", value), block, indent=self.unit, wrap_at=self.wrap_at
            )
            return f"{DOCUMENT_START} {body}" if explicit_start else body
        text: str = self.dump(self._prepare(value, style), explicit_start=explicit_start)
        return _strip_document_end(text)

    def _render_nested(
        self,
        value: object,
        depth: int,
        block: Style | None,
        style: Style | None,
    ) -> str:
        wrapper: dict[str, object] = {self.sentinel: [self._prepare(value, style)]}
        for _ in range(depth - 2):
            wrapper = {"": wrapper}

        text: str = self.dump(wrapper)
        _, marker, fragment = text.partition(f"{self.sentinel}:\n")
        if not marker:
            raise RenderInvariantError(
                f"Could not find '{self.sentinel}:' in the serialized wrapper:\n{text}"
            )
        if block is None:
            return fragment

        # Keep the sequence item indicator, replace the dumper's scalar with a block body
        head: str = f"{self.unit * (depth - 1)}- "
        if not fragment.startswith(head):
            raise RenderInvariantError(
                f"Expected the fragment to start with {head!r}, got:\n{fragment}"
            )
        body: str = render_block(
            cast("str", value), block, indent=self.unit * depth, wrap_at=self.wrap_at
        )
        return f"{head}{body}"
