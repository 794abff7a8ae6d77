"""Style keys and the value types they carry.

:class:`StyleKey` names the styling dimensions this library knows about.
The set is open: third-party attributes may emit any other string key and it
is carried through composition untouched.
"""

from __future__ import annotations

from enum import StrEnum

from pyattributed.models.color import Color, Font
from pyattributed.models.decoration import UnderlineStyle
from pyattributed.models.paragraph import ParagraphStyle

__all__ = ["Attributes", "StyleKey", "StyleValue", "normalize_key"]


class StyleKey(StrEnum):
    FOREGROUND_COLOR = "foregroundColor"
    BACKGROUND_COLOR = "backgroundColor"
    FONT = "font"
    KERN = "kern"
    BASELINE_OFFSET = "baselineOffset"
    UNDERLINE_STYLE = "underlineStyle"
    UNDERLINE_COLOR = "underlineColor"
    STRIKETHROUGH_STYLE = "strikethroughStyle"
    STRIKETHROUGH_COLOR = "strikethroughColor"
    LINK = "link"
    PARAGRAPH_STYLE = "paragraphStyle"


StyleValue = Color | Font | ParagraphStyle | UnderlineStyle | float | int | str | bool
"""Every value type a built-in attribute can produce."""

Attributes = dict[StyleKey | str, StyleValue]
"""An attribute mapping: style key to style value, keys unique."""


def normalize_key(key: StyleKey | str) -> StyleKey | str:
    """Return the :class:`StyleKey` member for *key*, or *key* itself when it names none."""
    if isinstance(key, StyleKey):
        return key
    try:
        return StyleKey(key)
    except ValueError:
        return key
