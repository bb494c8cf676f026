"""
Culture and segment variation for contenttree.
"""

from contenttree.variation.context import (
    ContextVarVariationContextAccessor,
    FixedVariationContextAccessor,
    VariationContext,
    VariationContextAccessor,
)
from contenttree.variation.resolver import VariationResolver, require_content

__all__ = [
    "VariationContext",
    "VariationContextAccessor",
    "FixedVariationContextAccessor",
    "ContextVarVariationContextAccessor",
    "VariationResolver",
    "require_content",
]
