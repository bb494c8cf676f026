"""
Property value resolution for contenttree.
"""

from contenttree.values.fallback import (
    NO_FALLBACK,
    ChainedValueFallback,
    Fallback,
    FallbackKind,
    FallbackResult,
    NoValueFallback,
    PublishedValueFallback,
)
from contenttree.values.resolver import ValueResolver

__all__ = [
    "ValueResolver",
    "Fallback",
    "FallbackKind",
    "FallbackResult",
    "NO_FALLBACK",
    "PublishedValueFallback",
    "NoValueFallback",
    "ChainedValueFallback",
]
