"""Paragraph merge policy.

Decides which properties of a later paragraph descriptor count as "set" and
therefore override the earlier descriptor. This module contains no merging
itself; see :mod:`pyattributed.composition.merge`.
"""

from __future__ import annotations

from enum import StrEnum

from pyattributed.models.paragraph import PARAGRAPH_DEFAULTS, ParagraphStyle


class MergePolicy(StrEnum):
    EXPLICIT = "explicit"
    """A property is set when it carries a value (is not ``None``)."""

    DIFFERS_FROM_DEFAULT = "differs_from_default"
    """A property is set when its effective value differs from the platform default.

    Mirrors how platform paragraph styles are usually merged: there is no
    presence flag, so explicitly setting a property to its default value is
    indistinguishable from never setting it.
    """


DEFAULT_MERGE_POLICY = MergePolicy.EXPLICIT


def is_explicit(style: ParagraphStyle, name: str, policy: MergePolicy = DEFAULT_MERGE_POLICY) -> bool:
    """Return whether *style* sets property *name* under *policy*."""
    if policy == MergePolicy.DIFFERS_FROM_DEFAULT:
        return style.effective(name) != PARAGRAPH_DEFAULTS[name]
    return getattr(style, name) is not None
