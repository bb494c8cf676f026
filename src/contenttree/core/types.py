"""
Core type definitions for contenttree.

This module contains the type aliases and constants shared by the
navigation, variation and value resolution packages.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from contenttree.core.models import PublishedContent

# Culture key of the invariant (non-localized) value
INVARIANT_CULTURE = ""

# Segment key of the default (non-segmented) value
DEFAULT_SEGMENT = ""

ContentId = int

ContentPredicate = Callable[["PublishedContent"], bool]

PropertyValue = Any
