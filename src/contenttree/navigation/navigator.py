"""
Ancestor traversal over published content.

All sequence operations are thin adapters over one lazy producer walking the
parent chain bottom-up (closest ancestor first, root last), optionally
filtered by a predicate. Relationship checks compare materialized paths and
never walk the tree.
"""

import logging
from collections.abc import Iterator
from typing import TypeVar

from contenttree.config import NavigationSettings
from contenttree.core.models import PublishedContent
from contenttree.core.path_codec import PathCodec
from contenttree.core.types import ContentPredicate
from contenttree.exceptions import InvalidArgumentError, TreeIntegrityError
from contenttree.navigation.store import ContentStore
from contenttree.variation.resolver import require_content

logger = logging.getLogger(__name__)

ContentT = TypeVar("ContentT", bound=PublishedContent)


def level_at_most(max_level: int) -> ContentPredicate:
    """Predicate keeping nodes at or above ``max_level``."""
    return lambda content: content.level <= max_level


def of_content_type(alias: str) -> ContentPredicate:
    """Predicate keeping nodes whose content type alias matches, ignoring case."""
    folded = alias.casefold()
    return lambda content: content.content_type.alias.casefold() == folded


class TreeNavigator:
    """Walks the ancestry of published content held in a content store."""

    def __init__(self, store: ContentStore, settings: NavigationSettings | None = None):
        """
        Initialize the navigator.

        Params:
            store: Store resolving parent ids to snapshots
            settings: Traversal limits, defaults to NavigationSettings()
        """
        self.store = store
        self.settings = settings or NavigationSettings()

    def parent(self, content: PublishedContent) -> PublishedContent | None:
        """Get the parent of ``content``, or None for top-level nodes."""
        require_content(content)
        parent_id = content.parent_id
        if parent_id is None:
            return None

        parent = self.store.get_by_id(parent_id)
        if parent is None:
            logger.warning(
                "Parent %s of content %s is missing from the store", parent_id, content.id
            )
        return parent

    def walk(
        self,
        content: PublishedContent,
        include_self: bool,
        predicate: ContentPredicate | None = None,
    ) -> Iterator[PublishedContent]:
        """
        Produce the ancestors of ``content`` lazily, bottom-up.

        Arguments are checked immediately; nodes are only fetched as the
        returned iterator is consumed.

        Params:
            content: Starting node
            include_self: Whether ``content`` itself may be produced first
            predicate: Optional filter applied to every candidate, self included

        Returns:
            Iterator over the matching nodes, closest first

        Raises:
            InvalidArgumentError: If content is None
            TreeIntegrityError: While iterating, if the parent chain loops or
                exceeds the configured maximum depth
        """
        require_content(content)
        return self._walk(content, include_self, predicate)

    def _walk(
        self,
        content: PublishedContent,
        include_self: bool,
        predicate: ContentPredicate | None,
    ) -> Iterator[PublishedContent]:
        if include_self and (predicate is None or predicate(content)):
            yield content

        seen = {content.id}
        depth = 0
        parent = self.parent(content)
        while parent is not None:
            depth += 1
            if parent.id in seen:
                logger.warning("Parent chain of content %s revisits %s", content.id, parent.id)
                raise TreeIntegrityError(content.id, f"content {parent.id} appears twice")
            if depth > self.settings.max_depth:
                logger.warning(
                    "Parent chain of content %s exceeds %s levels", content.id, self.settings.max_depth
                )
                raise TreeIntegrityError(
                    content.id, f"more than {self.settings.max_depth} ancestors"
                )
            seen.add(parent.id)

            if predicate is None or predicate(parent):
                yield parent
            parent = self.parent(parent)

    @staticmethod
    def _predicate_for(
        max_level: int | None, content_type_alias: str | None
    ) -> ContentPredicate | None:
        if max_level is not None and content_type_alias is not None:
            raise InvalidArgumentError(
                "content_type_alias", "cannot be combined with max_level"
            )
        if max_level is not None:
            return level_at_most(max_level)
        if content_type_alias is not None:
            return of_content_type(content_type_alias)
        return None

    @staticmethod
    def _of_type(
        sequence: Iterator[PublishedContent], of_type: type[ContentT] | None
    ) -> Iterator[PublishedContent]:
        if of_type is None:
            return sequence
        return (content for content in sequence if isinstance(content, of_type))

    def ancestors(
        self,
        content: PublishedContent,
        *,
        max_level: int | None = None,
        content_type_alias: str | None = None,
        of_type: type[ContentT] | None = None,
    ) -> Iterator[PublishedContent]:
        """
        Get the ancestors of ``content``, closest first. Never includes ``content``.

        Params:
            content: Starting node
            max_level: Keep only ancestors at this level or higher in the tree
            content_type_alias: Keep only ancestors of this content type
            of_type: Keep only ancestors that are instances of this model class

        Returns:
            Lazy iterator over the matching ancestors

        Raises:
            InvalidArgumentError: If content is None, or if both max_level and
                content_type_alias are given
        """
        predicate = self._predicate_for(max_level, content_type_alias)
        return self._of_type(self.walk(content, False, predicate), of_type)

    def ancestors_or_self(
        self,
        content: PublishedContent,
        *,
        max_level: int | None = None,
        content_type_alias: str | None = None,
        of_type: type[ContentT] | None = None,
    ) -> Iterator[PublishedContent]:
        """
        Get ``content`` and its ancestors, closest first.

        ``content`` itself is subject to the same filters as its ancestors.
        """
        predicate = self._predicate_for(max_level, content_type_alias)
        return self._of_type(self.walk(content, True, predicate), of_type)

    def ancestor(
        self,
        content: PublishedContent,
        *,
        max_level: int | None = None,
        content_type_alias: str | None = None,
        of_type: type[ContentT] | None = None,
    ) -> PublishedContent | None:
        """Get the closest matching ancestor, or None. Without filters, the parent."""
        return next(
            self.ancestors(
                content,
                max_level=max_level,
                content_type_alias=content_type_alias,
                of_type=of_type,
            ),
            None,
        )

    def ancestor_or_self(
        self,
        content: PublishedContent,
        *,
        max_level: int | None = None,
        content_type_alias: str | None = None,
        of_type: type[ContentT] | None = None,
    ) -> PublishedContent | None:
        """Get ``content`` or its closest ancestor matching the filters, or None."""
        return next(
            self.ancestors_or_self(
                content,
                max_level=max_level,
                content_type_alias=content_type_alias,
                of_type=of_type,
            ),
            None,
        )

    def is_descendant(self, content: PublishedContent, other: PublishedContent) -> bool:
        """Determine whether ``content`` is a descendant of ``other``."""
        require_content(content)
        require_content(other, "other")
        return PathCodec.is_descendant(content, other)

    def is_descendant_or_self(self, content: PublishedContent, other: PublishedContent) -> bool:
        """Determine whether ``content`` is ``other`` or a descendant of it."""
        require_content(content)
        require_content(other, "other")
        return PathCodec.is_descendant_or_self(content, other)

    def is_ancestor(self, content: PublishedContent, other: PublishedContent) -> bool:
        """Determine whether ``content`` is an ancestor of ``other``."""
        require_content(content)
        require_content(other, "other")
        return PathCodec.is_ancestor(content, other)

    def is_ancestor_or_self(self, content: PublishedContent, other: PublishedContent) -> bool:
        """Determine whether ``content`` is ``other`` or an ancestor of it."""
        require_content(content)
        require_content(other, "other")
        return PathCodec.is_ancestor_or_self(content, other)
