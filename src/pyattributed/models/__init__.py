"""Style primitives: colors, fonts, enums and the paragraph style descriptor."""

from pyattributed.models._base import StyleBaseModel, StyleEnum
from pyattributed.models.color import Color, Font
from pyattributed.models.decoration import UnderlineStyle
from pyattributed.models.paragraph import (
    PARAGRAPH_DEFAULTS,
    PARAGRAPH_PROPERTIES,
    LineBreak,
    ParagraphStyle,
    TabStop,
    TextAlignment,
    WritingDirection,
    default_tab_stops,
)

__all__ = [
    "Color",
    "Font",
    "LineBreak",
    "PARAGRAPH_DEFAULTS",
    "PARAGRAPH_PROPERTIES",
    "ParagraphStyle",
    "StyleBaseModel",
    "StyleEnum",
    "TabStop",
    "TextAlignment",
    "UnderlineStyle",
    "WritingDirection",
    "default_tab_stops",
]
