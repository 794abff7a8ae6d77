"""Color and font primitives.

These stand in for the UI toolkit's own color and font objects: the
composition layer only stores and compares them, it never renders.
"""

from __future__ import annotations

from pydantic import Field

from pyattributed.models._base import StyleBaseModel

__all__ = ["Color", "Font"]


class Color(StyleBaseModel):
    """An sRGB color with components in ``0.0 .. 1.0``."""

    red: float = Field(ge=0.0, le=1.0)
    green: float = Field(ge=0.0, le=1.0)
    blue: float = Field(ge=0.0, le=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> Color:
        """Build a color from 8-bit channel values (0-255)."""
        return cls(red=red / 255, green=green / 255, blue=blue / 255, alpha=alpha)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` (the ``#`` is optional).

        Raises :class:`ValueError` for anything else.
        """
        digits = value.strip().removeprefix("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"expected 3, 6 or 8 hex digits, got {value!r}")
        try:
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError as err:
            raise ValueError(f"invalid hex color {value!r}") from err
        alpha = channels[3] / 255 if len(channels) == 4 else 1.0
        return cls.from_rgb(channels[0], channels[1], channels[2], alpha=alpha)

    def to_hex(self) -> str:
        """Return ``#RRGGBB``, or ``#RRGGBBAA`` when not fully opaque."""
        channels = [self.red, self.green, self.blue]
        if self.alpha < 1.0:
            channels.append(self.alpha)
        return "#" + "".join(f"{round(channel * 255):02x}" for channel in channels)


class Font(StyleBaseModel):
    """A font reference: family/face name and point size."""

    name: str
    size: float = Field(gt=0.0)
