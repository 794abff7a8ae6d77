"""Paragraph style descriptor.

A :class:`ParagraphStyle` bundles the paragraph-level formatting properties
that travel together under the ``paragraphStyle`` key. Every property is
optional: ``None`` means "not set by this contribution", and the platform
default in :data:`PARAGRAPH_DEFAULTS` applies when nothing sets it.

Enum values follow the platform's raw values so descriptors can be handed to
a native text system unchanged.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from pyattributed._constants import default_tab_locations
from pyattributed.models._base import StyleBaseModel, StyleEnum

__all__ = [
    "LineBreak",
    "PARAGRAPH_DEFAULTS",
    "PARAGRAPH_PROPERTIES",
    "ParagraphStyle",
    "TabStop",
    "TextAlignment",
    "WritingDirection",
]

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class TextAlignment(StyleEnum):
    """Horizontal text alignment."""

    NATURAL = 4
    LEFT = 0
    CENTER = 1
    RIGHT = 2
    JUSTIFIED = 3


class LineBreak(StyleEnum):
    """How lines that do not fit are wrapped or truncated."""

    WORD_WRAPPING = 0
    CHAR_WRAPPING = 1
    CLIPPING = 2
    TRUNCATING_HEAD = 3
    TRUNCATING_TAIL = 4
    TRUNCATING_MIDDLE = 5


class WritingDirection(StyleEnum):
    """Base writing direction of a paragraph."""

    NATURAL = -1
    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1


# ------------------------------------------------------------------
# Tab stops
# ------------------------------------------------------------------


class TabStop(StyleBaseModel):
    """A tab stop at ``location`` points from the leading margin."""

    location: float
    alignment: TextAlignment = TextAlignment.LEFT


def default_tab_stops() -> tuple[TabStop, ...]:
    """Return the platform's default tab stops."""
    return tuple(TabStop(location=location) for location in default_tab_locations())


# ------------------------------------------------------------------
# Defaults
# ------------------------------------------------------------------

PARAGRAPH_DEFAULTS: MappingProxyType[str, Any] = MappingProxyType(
    {
        "line_spacing": 0.0,
        "paragraph_spacing": 0.0,
        "alignment": TextAlignment.NATURAL,
        "first_line_head_indent": 0.0,
        "head_indent": 0.0,
        "tail_indent": 0.0,
        "line_break_mode": LineBreak.WORD_WRAPPING,
        "minimum_line_height": 0.0,
        "maximum_line_height": 0.0,
        "base_writing_direction": WritingDirection.NATURAL,
        "line_height_multiple": 0.0,
        "paragraph_spacing_before": 0.0,
        "hyphenation_factor": 0.0,
        "tab_stops": default_tab_stops(),
        "default_tab_interval": 0.0,
        "allows_default_tightening_for_truncation": False,
    }
)
"""Platform default for every paragraph property."""

PARAGRAPH_PROPERTIES: tuple[str, ...] = tuple(PARAGRAPH_DEFAULTS)
"""Every paragraph property, in declaration order."""


class ParagraphStyle(StyleBaseModel):
    """Paragraph-level formatting; ``None`` marks a property as not set."""

    line_spacing: float | None = None
    paragraph_spacing: float | None = None
    alignment: TextAlignment | None = None
    first_line_head_indent: float | None = None
    head_indent: float | None = None
    tail_indent: float | None = None
    line_break_mode: LineBreak | None = None
    minimum_line_height: float | None = None
    maximum_line_height: float | None = None
    base_writing_direction: WritingDirection | None = None
    line_height_multiple: float | None = None
    paragraph_spacing_before: float | None = None
    hyphenation_factor: float | None = None
    tab_stops: tuple[TabStop, ...] | None = None
    default_tab_interval: float | None = None
    allows_default_tightening_for_truncation: bool | None = None

    @classmethod
    def platform_default(cls) -> ParagraphStyle:
        """Return a descriptor with every property set to its platform default."""
        return cls(**PARAGRAPH_DEFAULTS)

    def explicit_properties(self) -> frozenset[str]:
        """Names of the properties this descriptor sets."""
        return frozenset(name for name in PARAGRAPH_PROPERTIES if getattr(self, name) is not None)

    @property
    def is_empty(self) -> bool:
        return not self.explicit_properties()

    def effective(self, name: str) -> Any:
        """Return the value of *name*, falling back to the platform default."""
        value = getattr(self, name)
        return PARAGRAPH_DEFAULTS[name] if value is None else value

    def resolved(self) -> dict[str, Any]:
        """Return every property with platform defaults filled in."""
        return {name: self.effective(name) for name in PARAGRAPH_PROPERTIES}

    def with_properties(self, **changes: Any) -> ParagraphStyle:
        """Return a validated copy with *changes* applied on top of the set properties."""
        current = {name: getattr(self, name) for name in self.explicit_properties()}
        return type(self)(**{**current, **changes})
