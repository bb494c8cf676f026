"""
Core contenttree components.

This package provides the published content snapshot model, property storage,
materialized path handling and shared type definitions.
"""

from contenttree.core.conversion import try_convert
from contenttree.core.models import ContentType, CultureInfo, PublishedContent
from contenttree.core.path_codec import PATH_DELIMITER, ROOT_ID, PathCodec
from contenttree.core.property import (
    ListValueConverter,
    PropertyValueConverter,
    PublishedProperty,
)
from contenttree.core.types import (
    DEFAULT_SEGMENT,
    INVARIANT_CULTURE,
    ContentId,
    ContentPredicate,
    PropertyValue,
)

__all__ = [
    "ContentType",
    "CultureInfo",
    "PublishedContent",
    "PublishedProperty",
    "PropertyValueConverter",
    "ListValueConverter",
    "PathCodec",
    "PATH_DELIMITER",
    "ROOT_ID",
    "INVARIANT_CULTURE",
    "DEFAULT_SEGMENT",
    "ContentId",
    "ContentPredicate",
    "PropertyValue",
    "try_convert",
]
