"""Composition entry points.

:func:`compose` folds attribute values, in order, into one attribute mapping:

    compose(
        Foreground(Color.from_hex("#222")),
        LineHeight(20),
        LineBreakMode(LineBreak.TRUNCATING_TAIL),
    )

:class:`AttributesBuilder` offers the same fold as a chain with an explicit
terminal :meth:`~AttributesBuilder.build` call.
"""

from __future__ import annotations

from collections.abc import Iterable

from pyattributed.attributes import SupportsAttributes
from pyattributed.composition.composite import AttributesComposite
from pyattributed.config import ComposeConfig
from pyattributed.keys import Attributes


def _new_composite(config: ComposeConfig | None) -> AttributesComposite:
    config = config or ComposeConfig()
    return AttributesComposite(policy=config.merge_policy, log_skipped=config.log_skipped)


def compose_all(segments: Iterable[SupportsAttributes], *, config: ComposeConfig | None = None) -> Attributes:
    """Fold *segments* in order and return the merged attribute mapping."""
    composite = _new_composite(config)
    for segment in segments:
        composite.update(segment.to_mapping())
    return composite.value


def compose(*segments: SupportsAttributes, config: ComposeConfig | None = None) -> Attributes:
    """Fold the given attribute values in order into one attribute mapping."""
    return compose_all(segments, config=config)


class AttributesBuilder:
    """Collects attribute values and composes them on :meth:`build`."""

    def __init__(self, *segments: SupportsAttributes, config: ComposeConfig | None = None) -> None:
        self._segments: list[SupportsAttributes] = list(segments)
        self._config = config

    def add(self, *segments: SupportsAttributes) -> AttributesBuilder:
        self._segments.extend(segments)
        return self

    def build(self) -> Attributes:
        return compose_all(self._segments, config=self._config)

    def __len__(self) -> int:
        return len(self._segments)
