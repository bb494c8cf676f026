"""
Effective culture and segment resolution for published content.

Rules, in order:
    - a node whose type does not vary gets the invariant key, whatever was asked
    - an explicit culture (or segment) is used verbatim
    - otherwise the variation context decides
    - otherwise the invariant key

The resolved key is never None. A key absent from the node's cultures means
"no information", not an error.
"""

from datetime import datetime

from contenttree.core.models import CultureInfo, PublishedContent
from contenttree.core.types import DEFAULT_SEGMENT, INVARIANT_CULTURE
from contenttree.exceptions import InvalidArgumentError
from contenttree.variation.context import VariationContext, VariationContextAccessor


def require_content(content: PublishedContent | None, argument: str = "content") -> None:
    """
    Fail fast when a required content argument is missing.

    Params:
        content: The content to check
        argument: Argument name used in the error message

    Raises:
        InvalidArgumentError: If content is None
    """
    if content is None:
        raise InvalidArgumentError(argument)


class VariationResolver:
    """Resolves cultures and segments, and culture-dependent node metadata."""

    def __init__(self, accessor: VariationContextAccessor | None = None):
        """
        Initialize the resolver.

        Params:
            accessor: Source of the ambient variation context; without one,
                omitted cultures resolve to the invariant key
        """
        self.accessor = accessor

    @property
    def context(self) -> VariationContext | None:
        """The current variation context, if any."""
        if self.accessor is None:
            return None
        return self.accessor.variation_context

    def resolve_culture(self, content: PublishedContent, culture: str | None = None) -> str:
        """
        Resolve the culture to use when reading ``content``.

        Params:
            content: The node being read
            culture: Explicitly requested culture, or None for the current one

        Returns:
            The effective culture key, never None
        """
        require_content(content)

        if not content.content_type.varies_by_culture:
            return INVARIANT_CULTURE

        if culture is not None:
            return culture

        context = self.context
        return (context.culture if context else None) or INVARIANT_CULTURE

    def resolve_segment(self, content: PublishedContent, segment: str | None = None) -> str:
        """Resolve the segment to use when reading ``content``."""
        require_content(content)

        if not content.content_type.varies_by_segment:
            return DEFAULT_SEGMENT

        if segment is not None:
            return segment

        context = self.context
        return (context.segment if context else None) or DEFAULT_SEGMENT

    def culture_info(
        self, content: PublishedContent, culture: str | None = None
    ) -> CultureInfo | None:
        """
        Get the culture information of ``content`` for the effective culture.

        A variant node resolved to the invariant key has no information.
        """
        effective = self.resolve_culture(content, culture)
        if content.content_type.varies_by_culture and effective == INVARIANT_CULTURE:
            return None
        return content.get_culture(effective)

    def name(self, content: PublishedContent, culture: str | None = None) -> str:
        """Get the node name, or an empty string when the culture has none."""
        info = self.culture_info(content, culture)
        return info.name if info else ""

    def url_segment(self, content: PublishedContent, culture: str | None = None) -> str | None:
        """Get the node URL segment, or None when the culture has none."""
        info = self.culture_info(content, culture)
        return info.url_segment if info else None

    def culture_date(self, content: PublishedContent, culture: str | None = None) -> datetime:
        """
        Get the publishing date of ``content`` for a culture.

        Invariant nodes report their update date. A variant node without
        information for the culture reports ``datetime.min``.
        """
        require_content(content)
        if not content.content_type.varies_by_culture:
            return content.update_date

        info = self.culture_info(content, culture)
        return info.date if info else datetime.min

    def has_culture(self, content: PublishedContent, culture: str | None) -> bool:
        """Determine whether ``content`` has information for ``culture``."""
        require_content(content)
        return content.get_culture(culture or INVARIANT_CULTURE) is not None

    def is_invariant_or_has_culture(self, content: PublishedContent, culture: str | None) -> bool:
        """Determine whether ``content`` is invariant or has ``culture``."""
        require_content(content)
        return not content.content_type.varies_by_culture or self.has_culture(content, culture)
