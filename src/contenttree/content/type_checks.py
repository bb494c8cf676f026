"""
Content type checks and identity comparison for published content.
"""

from contenttree.core.models import PublishedContent


def is_composed_of(content: PublishedContent, alias: str) -> bool:
    """Determine whether the content type of ``content`` is composed of ``alias``."""
    folded = alias.casefold()
    return any(
        composition.casefold() == folded
        for composition in content.content_type.composition_aliases
    )


def is_document_type(content: PublishedContent, alias: str, recursive: bool = False) -> bool:
    """
    Determine whether ``content`` is of the content type ``alias``.

    Params:
        content: The node
        alias: Content type alias, compared case-insensitively
        recursive: Also accept content types composed of ``alias``

    Returns:
        True if the content type matches
    """
    if content.content_type.alias.casefold() == alias.casefold():
        return True
    return recursive and is_composed_of(content, alias)


def is_equal(content: PublishedContent, other: PublishedContent) -> bool:
    """Two snapshots are equal when they describe the same node."""
    return content.id == other.id


def is_not_equal(content: PublishedContent, other: PublishedContent) -> bool:
    return not is_equal(content, other)
