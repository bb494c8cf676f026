"""
Content lookup used to follow parent relations.

Nodes do not own their parents. The navigator resolves a parent id through a
store owned by the caller.
"""

from collections.abc import Iterable
from typing import Protocol

from contenttree.core.models import PublishedContent
from contenttree.core.types import ContentId


class ContentStore(Protocol):
    """Lookup of published content by id."""

    def get_by_id(self, content_id: ContentId) -> PublishedContent | None: ...


class InMemoryContentStore:
    """Dictionary-backed content store for snapshots already in memory."""

    def __init__(self, contents: Iterable[PublishedContent] = ()):
        self._contents: dict[ContentId, PublishedContent] = {}
        for content in contents:
            self.add(content)

    def add(self, content: PublishedContent) -> None:
        """Register a snapshot, replacing any previous one with the same id."""
        self._contents[content.id] = content

    def get_by_id(self, content_id: ContentId) -> PublishedContent | None:
        return self._contents.get(content_id)

    def __contains__(self, content_id: object) -> bool:
        return content_id in self._contents

    def __len__(self) -> int:
        return len(self._contents)
