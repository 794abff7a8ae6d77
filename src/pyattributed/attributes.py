"""Attribute values.

Each attribute is a small immutable value describing one styling intent.
:meth:`Attribute.to_mapping` turns it into an attribute mapping with a single
entry, ready to be folded by :func:`pyattributed.builder.compose`.

Paragraph-level attributes all emit a :class:`ParagraphStyle` under
``paragraphStyle`` with only their own properties set; composition merges
them property by property.

Any object with a ``to_mapping()`` method (see :class:`SupportsAttributes`)
can take part in a composition; subclassing :class:`Attribute` is optional.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from pyattributed.keys import Attributes, StyleKey
from pyattributed.models.color import Color, Font
from pyattributed.models.decoration import UnderlineStyle
from pyattributed.models.paragraph import LineBreak, ParagraphStyle, TabStop, TextAlignment, WritingDirection

__all__ = [
    "Alignment",
    "Attribute",
    "Background",
    "BaseWritingDirection",
    "BaselineOffset",
    "Foreground",
    "Hyphenation",
    "Indent",
    "Kern",
    "LineBreakMode",
    "LineHeight",
    "LineHeightMultiple",
    "LineSpacing",
    "Link",
    "Paragraph",
    "ParagraphSpacing",
    "Strikethrough",
    "StrikethroughColor",
    "SupportsAttributes",
    "TabStops",
    "TighteningForTruncation",
    "Typeface",
    "Underline",
    "UnderlineColor",
]


@runtime_checkable
class SupportsAttributes(Protocol):
    def to_mapping(self) -> Attributes: ...


class Attribute(BaseModel):
    """Base class for built-in attribute values."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @abstractmethod
    def to_mapping(self) -> Attributes:
        """Return the attribute mapping this value contributes."""


def _paragraph(**properties: Any) -> Attributes:
    return {StyleKey.PARAGRAPH_STYLE: ParagraphStyle(**properties)}


# ------------------------------------------------------------------
# Character attributes
# ------------------------------------------------------------------


class Foreground(Attribute):
    """Text color."""

    color: Color

    def __init__(self, color: Color, **data: Any) -> None:
        super().__init__(color=color, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.FOREGROUND_COLOR: self.color}


class Background(Attribute):
    """Background color behind the glyphs."""

    color: Color

    def __init__(self, color: Color, **data: Any) -> None:
        super().__init__(color=color, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.BACKGROUND_COLOR: self.color}


class Typeface(Attribute):
    """Font used to draw the text."""

    font: Font

    def __init__(self, font: Font, **data: Any) -> None:
        super().__init__(font=font, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.FONT: self.font}


class Kern(Attribute):
    """Extra spacing between characters, in points."""

    points: float

    def __init__(self, points: float, **data: Any) -> None:
        super().__init__(points=points, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.KERN: self.points}


class BaselineOffset(Attribute):
    """Vertical offset from the baseline, in points; positive is up."""

    points: float

    def __init__(self, points: float, **data: Any) -> None:
        super().__init__(points=points, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.BASELINE_OFFSET: self.points}


class Underline(Attribute):
    """Underline pattern; a single line unless given."""

    style: UnderlineStyle = UnderlineStyle.SINGLE

    def __init__(self, style: UnderlineStyle = UnderlineStyle.SINGLE, **data: Any) -> None:
        super().__init__(style=style, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.UNDERLINE_STYLE: self.style}


class UnderlineColor(Attribute):
    """Underline color; the foreground color is used when absent."""

    color: Color

    def __init__(self, color: Color, **data: Any) -> None:
        super().__init__(color=color, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.UNDERLINE_COLOR: self.color}


class Strikethrough(Attribute):
    """Strikethrough pattern; a single line unless given."""

    style: UnderlineStyle = UnderlineStyle.SINGLE

    def __init__(self, style: UnderlineStyle = UnderlineStyle.SINGLE, **data: Any) -> None:
        super().__init__(style=style, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.STRIKETHROUGH_STYLE: self.style}


class StrikethroughColor(Attribute):
    """Strikethrough color; the foreground color is used when absent."""

    color: Color

    def __init__(self, color: Color, **data: Any) -> None:
        super().__init__(color=color, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.STRIKETHROUGH_COLOR: self.color}


class Link(Attribute):
    """Hyperlink target; the URL is passed through as given."""

    url: str

    def __init__(self, url: str, **data: Any) -> None:
        super().__init__(url=url, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.LINK: self.url}


# ------------------------------------------------------------------
# Paragraph attributes
# ------------------------------------------------------------------


class LineHeight(Attribute):
    """Fixed line height range.

    ``LineHeight(20)`` pins both bounds to 20 points;
    ``LineHeight(10, 30)`` sets them independently.
    """

    minimum_line_height: float
    maximum_line_height: float

    def __init__(self, minimum: float, maximum: float | None = None) -> None:
        super().__init__(
            minimum_line_height=minimum,
            maximum_line_height=minimum if maximum is None else maximum,
        )

    def to_mapping(self) -> Attributes:
        return _paragraph(
            minimum_line_height=self.minimum_line_height,
            maximum_line_height=self.maximum_line_height,
        )


class LineBreakMode(Attribute):
    """How lines that do not fit are wrapped or truncated."""

    mode: LineBreak

    def __init__(self, mode: LineBreak, **data: Any) -> None:
        super().__init__(mode=mode, **data)

    def to_mapping(self) -> Attributes:
        return _paragraph(line_break_mode=self.mode)


class Alignment(Attribute):
    """Horizontal text alignment of the paragraph."""

    alignment: TextAlignment

    def __init__(self, alignment: TextAlignment, **data: Any) -> None:
        super().__init__(alignment=alignment, **data)

    def to_mapping(self) -> Attributes:
        return _paragraph(alignment=self.alignment)


class LineSpacing(Attribute):
    """Extra space between lines of the same paragraph, in points."""

    spacing: float

    def __init__(self, spacing: float, **data: Any) -> None:
        super().__init__(spacing=spacing, **data)

    def to_mapping(self) -> Attributes:
        return _paragraph(line_spacing=self.spacing)


class LineHeightMultiple(Attribute):
    """Factor applied to the natural line height."""

    multiple: float

    def __init__(self, multiple: float, **data: Any) -> None:
        super().__init__(multiple=multiple, **data)

    def to_mapping(self) -> Attributes:
        return _paragraph(line_height_multiple=self.multiple)


class ParagraphSpacing(Attribute):
    """Space after the paragraph and, optionally, before it."""

    after: float
    before: float | None = None

    def __init__(self, after: float, before: float | None = None) -> None:
        super().__init__(after=after, before=before)

    def to_mapping(self) -> Attributes:
        return _paragraph(paragraph_spacing=self.after, paragraph_spacing_before=self.before)


class Indent(Attribute):
    """Paragraph indents, in points.

    ``tail`` follows the platform convention: positive values are measured
    from the leading margin, zero or negative values from the trailing one.
    """

    first_line: float | None = None
    head: float | None = None
    tail: float | None = None

    def __init__(self, first_line: float | None = None, head: float | None = None, tail: float | None = None) -> None:
        super().__init__(first_line=first_line, head=head, tail=tail)

    def to_mapping(self) -> Attributes:
        return _paragraph(
            first_line_head_indent=self.first_line,
            head_indent=self.head,
            tail_indent=self.tail,
        )


class BaseWritingDirection(Attribute):
    """Writing direction the paragraph is laid out in."""

    direction: WritingDirection

    def __init__(self, direction: WritingDirection, **data: Any) -> None:
        super().__init__(direction=direction, **data)

    def to_mapping(self) -> Attributes:
        return _paragraph(base_writing_direction=self.direction)


class Hyphenation(Attribute):
    """Hyphenation threshold between 0.0 (off) and 1.0."""

    factor: float

    def __init__(self, factor: float, **data: Any) -> None:
        super().__init__(factor=factor, **data)

    def to_mapping(self) -> Attributes:
        return _paragraph(hyphenation_factor=self.factor)


class TabStops(Attribute):
    """Explicit tab stops and the interval used past the last one."""

    stops: tuple[TabStop, ...]
    default_interval: float | None = None

    def __init__(self, stops: Iterable[TabStop], default_interval: float | None = None) -> None:
        super().__init__(stops=tuple(stops), default_interval=default_interval)

    def to_mapping(self) -> Attributes:
        return _paragraph(tab_stops=self.stops, default_tab_interval=self.default_interval)


class TighteningForTruncation(Attribute):
    """Allow tightening inter-character spacing before truncating."""

    enabled: bool = True

    def __init__(self, enabled: bool = True, **data: Any) -> None:
        super().__init__(enabled=enabled, **data)

    def to_mapping(self) -> Attributes:
        return _paragraph(allows_default_tightening_for_truncation=self.enabled)


class Paragraph(Attribute):
    """Contribute a whole paragraph style descriptor as-is."""

    style: ParagraphStyle

    def __init__(self, style: ParagraphStyle, **data: Any) -> None:
        super().__init__(style=style, **data)

    def to_mapping(self) -> Attributes:
        return {StyleKey.PARAGRAPH_STYLE: self.style}
