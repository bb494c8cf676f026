"""
contenttree - read-only traversal and value resolution over published content

contenttree walks the ancestry of published nodes through materialized paths
and resolves culture-aware property values with configurable fallback.
"""

from importlib.metadata import version

from contenttree.config import ContentTreeSettings
from contenttree.core.models import ContentType, CultureInfo, PublishedContent
from contenttree.core.property import PublishedProperty
from contenttree.navigation import InMemoryContentStore, TreeNavigator
from contenttree.values import ChainedValueFallback, Fallback, FallbackKind, ValueResolver
from contenttree.variation import VariationContext, VariationResolver

__version__ = version("contenttree")

__all__ = [
    "__version__",
    "ContentTreeSettings",
    "ContentType",
    "CultureInfo",
    "PublishedContent",
    "PublishedProperty",
    "InMemoryContentStore",
    "TreeNavigator",
    "VariationContext",
    "VariationResolver",
    "ValueResolver",
    "ChainedValueFallback",
    "Fallback",
    "FallbackKind",
]
