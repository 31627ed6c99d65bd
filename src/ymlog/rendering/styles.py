# topmark:header:start
#
#   project      : YmLog
#   file         : styles.py
#   file_relpath : src/ymlog/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar styles and chomping indicators for rendered messages.

A `Style` pairs a `ScalarKind` (how the scalar is written) with a `Chomp`
(how trailing line breaks of a block scalar are treated). Entries may carry a
style override; without one the renderer picks plain YAML for single-line
values and a literal block for multi-line strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from ymlog.core.enum_mixins import KeyedStrEnum


class ScalarKind(KeyedStrEnum):
    """How a string scalar is written."""

    GUESS = ("guess", "Pick literal for multi-line text, double-quoted otherwise")
    FOLDED = ("folded", "Block: folded '>'", (">",))
    LITERAL = ("literal", "Block: literal '|'", ("|", "block"))
    PLAIN = ("plain", "Flow: plain")
    SINGLE = ("single", "Flow: single-quoted", ("'",))
    DOUBLE = ("double", "Flow: double-quoted", ('"',))

    @property
    def is_block(self) -> bool:
        """Whether this kind produces a block scalar."""
        return self in (ScalarKind.FOLDED, ScalarKind.LITERAL)

    @property
    def quote(self) -> str | None:
        """PyYAML scalar style character for flow kinds (``None`` lets the dumper choose)."""
        return {ScalarKind.SINGLE: "'", ScalarKind.DOUBLE: '"'}.get(self)


class Chomp(KeyedStrEnum):
    """Whether trailing newlines of a block scalar are clipped, stripped or kept."""

    CLIP = ("clip", "Keep a single final line break")
    STRIP = ("strip", "Remove all final line breaks", ("-",))
    KEEP = ("keep", "Keep all final line breaks", ("+",))

    @property
    def indicator(self) -> str:
        """The chomping indicator written after the block header."""
        return {Chomp.CLIP: "", Chomp.STRIP: "-", Chomp.KEEP: "+"}[self]


@dataclass(frozen=True)
class Style:
    """Rendering override for a string message.

    Attributes:
        kind (ScalarKind): Scalar kind.
        chomp (Chomp): Chomping mode; only meaningful for block kinds.
    """

    kind: ScalarKind = ScalarKind.GUESS
    chomp: Chomp = Chomp.CLIP

    @classmethod
    def literal(cls, chomp: Chomp = Chomp.CLIP) -> Style:
        """Literal block style (``|``)."""
        return cls(ScalarKind.LITERAL, chomp)

    @classmethod
    def folded(cls, chomp: Chomp = Chomp.CLIP) -> Style:
        """Folded block style (``>``)."""
        return cls(ScalarKind.FOLDED, chomp)

    @property
    def is_block(self) -> bool:
        """Whether this style renders a block scalar."""
        return self.kind.is_block

    @property
    def header(self) -> str:
        """Block scalar header, e.g. ``|-`` or ``>+``.

        Raises:
            ValueError: If the style is not a block style.
        """
        if self.kind is ScalarKind.LITERAL:
            return f"|{self.chomp.indicator}"
        if self.kind is ScalarKind.FOLDED:
            return f">{self.chomp.indicator}"
        raise ValueError(f"Style {self.kind.key!r} has no block header")

    def resolve(self, value: str) -> Style:
        """Replace `GUESS` with the guessed style for ``value``."""
        if self.kind is ScalarKind.GUESS:
            return guess_style(value)
        return self


def guess_style(value: str) -> Style:
    """Guess the best style from the contents of a string.

    Any embedded newline selects a literal block (clip chomping); everything
    else is written as a double-quoted flow scalar.
    """
    if "\n" in value:
        return Style.literal()
    return Style(ScalarKind.DOUBLE)


def block_style_for(value: object, style: Style | None, *, default_chomp: Chomp) -> Style | None:
    """Return the block style ``value`` must be rendered with, or None for flow rendering.

    Args:
        value (object): The computed entry value.
        style (Style | None): Explicit entry style, if any.
        default_chomp (Chomp): Chomping used for multi-line strings without an explicit style.

    Returns:
        Style | None: A block style, or ``None`` when the value renders as a flow node.
    """
    if not isinstance(value, str):
        return None
    if style is None:
        return Style.literal(default_chomp) if "\n" in value else None
    resolved: Style = style.resolve(value)
    return resolved if resolved.is_block else None
