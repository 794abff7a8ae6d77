"""Attributed string value.

A plain carrier pairing a string with the attribute mapping applied to its
whole length. Rendering is left to the host text system.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pyattributed.attributes import SupportsAttributes
from pyattributed.builder import compose_all
from pyattributed.config import ComposeConfig
from pyattributed.keys import Attributes, StyleKey, normalize_key


class AttributedString(BaseModel):
    """Text plus the attributes applied over its full range."""

    model_config = ConfigDict(frozen=True)

    text: str
    attributes: Mapping[Any, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("attributes")
    @classmethod
    def _freeze_attributes(cls, value: Mapping[Any, Any]) -> Mapping[Any, Any]:
        return MappingProxyType({normalize_key(key): item for key, item in value.items()})

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def full_range(self) -> tuple[int, int]:
        """``(location, length)`` covering the whole string."""
        return (0, self.length)

    def attribute(self, key: StyleKey | str) -> Any:
        """Return the value stored under *key*, or ``None``."""
        return self.attributes.get(normalize_key(key))

    def with_attribute(self, key: StyleKey | str, value: Any) -> AttributedString:
        """Return a copy with *key* set to *value* over the full range.

        This is a plain overwrite; paragraph styles are not merged. Use
        :func:`attributed` to merge.
        """
        attributes: Attributes = {**self.attributes, normalize_key(key): value}
        return type(self)(text=self.text, attributes=attributes)

    def __hash__(self) -> int:
        return hash((self.text, frozenset(self.attributes.items())))

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return self.length


def attributed(text: str, *segments: SupportsAttributes, config: ComposeConfig | None = None) -> AttributedString:
    """Build an :class:`AttributedString` with the composed *segments* applied to all of *text*."""
    return AttributedString(text=text, attributes=compose_all(segments, config=config))
