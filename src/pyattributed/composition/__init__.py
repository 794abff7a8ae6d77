"""Composition layer.

This package is the single place where attribute mappings are folded
together and colliding paragraph styles are merged.
"""

from pyattributed.composition.composite import AttributesComposite
from pyattributed.composition.merge import merge_paragraph_styles
from pyattributed.composition.policy import DEFAULT_MERGE_POLICY, MergePolicy, is_explicit

__all__ = [
    "AttributesComposite",
    "DEFAULT_MERGE_POLICY",
    "MergePolicy",
    "is_explicit",
    "merge_paragraph_styles",
]
