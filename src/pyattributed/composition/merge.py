"""Property-by-property paragraph style merge."""

from __future__ import annotations

from typing import Any

from pyattributed.composition.policy import DEFAULT_MERGE_POLICY, MergePolicy, is_explicit
from pyattributed.models.paragraph import PARAGRAPH_PROPERTIES, ParagraphStyle


def merge_paragraph_styles(
    base: ParagraphStyle,
    override: ParagraphStyle,
    *,
    policy: MergePolicy = DEFAULT_MERGE_POLICY,
) -> ParagraphStyle:
    """Merge *override* on top of *base*, one property at a time.

    The result starts as a copy of *base*. Every property that *override*
    sets (per *policy*) replaces the inherited value; all other properties
    keep *base*'s value, including ``None``.

    Under :attr:`MergePolicy.DIFFERS_FROM_DEFAULT` the copied value is the
    override's effective value, so an unset property never overrides.
    """
    merged: dict[str, Any] = {name: getattr(base, name) for name in PARAGRAPH_PROPERTIES}
    for name in PARAGRAPH_PROPERTIES:
        if is_explicit(override, name, policy):
            merged[name] = override.effective(name)
    return ParagraphStyle(**merged)
