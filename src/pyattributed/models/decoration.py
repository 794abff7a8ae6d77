"""Line decoration styles used by underline and strikethrough."""

from __future__ import annotations

from pyattributed.models._base import StyleEnum

__all__ = ["UnderlineStyle"]


class UnderlineStyle(StyleEnum):
    """Line style for underline and strikethrough decorations."""

    NONE = 0
    SINGLE = 1
    THICK = 2
    DOUBLE = 9
