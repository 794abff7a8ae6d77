"""Attribute accumulator.

This is the only component allowed to merge attribute mappings.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pyattributed.composition.merge import merge_paragraph_styles
from pyattributed.composition.policy import DEFAULT_MERGE_POLICY, MergePolicy
from pyattributed.keys import Attributes, StyleKey, normalize_key
from pyattributed.models.paragraph import ParagraphStyle

_logger = logging.getLogger(__name__)


class AttributesComposite:
    """Folds a sequence of attribute mappings into one.

    Paragraph styles are merged property by property; every other key is
    last-write-wins. A composite is itself an attribute source, so it can be
    nested inside another composition.
    """

    def __init__(
        self,
        *,
        policy: MergePolicy = DEFAULT_MERGE_POLICY,
        log_skipped: bool = True,
    ) -> None:
        self._policy = policy
        self._log_skipped = log_skipped
        self._value: Attributes = {}

    @property
    def policy(self) -> MergePolicy:
        return self._policy

    @property
    def value(self) -> Attributes:
        """Copy of the accumulated mapping."""
        return dict(self._value)

    def to_mapping(self) -> Attributes:
        return self.value

    def update(self, attributes: Mapping[StyleKey | str, Any]) -> None:
        """Merge one incoming mapping into the accumulated state."""
        for raw_key, item in attributes.items():
            key = normalize_key(raw_key)
            if key == StyleKey.PARAGRAPH_STYLE:
                self._update_paragraph_style(key, item)
            else:
                self._value[key] = item

    def _update_paragraph_style(self, key: StyleKey, item: Any) -> None:
        current = self._value.get(key)
        match current, item:
            case ParagraphStyle(), ParagraphStyle():
                self._value[key] = merge_paragraph_styles(current, item, policy=self._policy)
            case ParagraphStyle(), _:
                # Nothing to merge into the stored descriptor.
                if self._log_skipped:
                    _logger.debug(
                        "Skipping unsupported %s value type=%s",
                        key.value,
                        type(item).__name__,
                    )
            case _:
                self._value[key] = item
