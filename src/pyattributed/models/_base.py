"""Base model and enum for style primitives.

Every style model inherits from :class:`StyleBaseModel` which provides:

* ``frozen=True`` so values can be shared between attribute mappings.
* ``alias_generator=to_camel`` so camelCase platform names
  (``minimumLineHeight``) map to snake_case fields.
* ``populate_by_name`` so Python code can keep using the field names.

Style enums inherit from :class:`StyleEnum` which adds a ``_missing_`` hook
returning the first declared member (the platform default) for any value
without a mapped member.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StyleEnum(enum.IntEnum):
    """Base for platform style enums.

    Subclasses declare their platform default **first**. Raw values with
    no mapped member resolve to that default instead of raising
    ``ValueError``.
    """

    @classmethod
    def _missing_(cls, value: object) -> StyleEnum:
        return next(iter(cls))

    @classmethod
    def default(cls) -> StyleEnum:
        """Return the platform default member."""
        return next(iter(cls))


class StyleBaseModel(BaseModel):
    """Base for immutable style primitives."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the set fields keyed by their camelCase platform names."""
        return self.model_dump(by_alias=True, exclude_none=True)
