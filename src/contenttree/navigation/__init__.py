"""
Tree navigation for contenttree.
"""

from contenttree.navigation.navigator import TreeNavigator, level_at_most, of_content_type
from contenttree.navigation.store import ContentStore, InMemoryContentStore

__all__ = [
    "TreeNavigator",
    "ContentStore",
    "InMemoryContentStore",
    "level_at_most",
    "of_content_type",
]
