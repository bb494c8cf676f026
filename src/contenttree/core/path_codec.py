"""
Materialized path encoding for published content.

A node's path is the comma-separated list of identifiers from the root
sentinel down to the node itself, e.g. ``"-1,1054,1102"``. Because the full
ancestry is encoded, structural relationships between two nodes can be
decided by comparing their paths without walking the tree.
"""

from collections.abc import Iterable
from typing import Protocol

from contenttree.exceptions import PathFormatError

PATH_DELIMITER = ","
ROOT_ID = -1


class PathedContent(Protocol):
    """Anything carrying a materialized path and a tree level."""

    path: str
    level: int


class PathCodec:
    """Encoding, decoding and relationship checks over materialized paths."""

    @staticmethod
    def encode(ids: Iterable[int]) -> str:
        """
        Encode an ordered sequence of identifiers as a path string.

        Params:
            ids: Identifiers from the root sentinel down to the node

        Returns:
            Delimited path string

        Examples:
            [-1, 5, 12] -> "-1,5,12"
        """
        return PATH_DELIMITER.join(str(content_id) for content_id in ids)

    @staticmethod
    def decode(path: str) -> list[int]:
        """
        Decode a path string into its ordered identifiers.

        Params:
            path: Delimited path string

        Returns:
            Identifiers from the root sentinel down to the node

        Raises:
            PathFormatError: If the path is empty or holds a non-integer part
        """
        if not path or not isinstance(path, str):
            raise PathFormatError(str(path), "must be a non-empty string")

        try:
            return [int(part) for part in path.split(PATH_DELIMITER)]
        except ValueError:
            raise PathFormatError(path, "identifiers must be integers") from None

    @staticmethod
    def append(path: str, content_id: int) -> str:
        """Return the path of a child with id ``content_id`` under ``path``."""
        return f"{PathCodec.ensure_trailing_delimiter(path)}{content_id}"

    @staticmethod
    def ensure_trailing_delimiter(path: str) -> str:
        """Return ``path`` terminated by exactly one delimiter."""
        return path if path.endswith(PATH_DELIMITER) else path + PATH_DELIMITER

    @staticmethod
    def paths_equal(path: str, other: str) -> bool:
        """Case-insensitive path equality."""
        return path.casefold() == other.casefold()

    @staticmethod
    def is_descendant(content: PathedContent, other: PathedContent) -> bool:
        """
        Determine whether ``content`` is a descendant of ``other``.

        The prefix check is made against ``other.path`` with a trailing
        delimiter so that ``"-1,50"`` is never read as below ``"-1,5"``.

        Params:
            content: The candidate descendant
            other: The candidate ancestor

        Returns:
            True if ``other`` is strictly above ``content`` on its path
        """
        return other.level < content.level and content.path.casefold().startswith(
            PathCodec.ensure_trailing_delimiter(other.path).casefold()
        )

    @staticmethod
    def is_descendant_or_self(content: PathedContent, other: PathedContent) -> bool:
        """Determine whether ``content`` is ``other`` or one of its descendants."""
        return PathCodec.paths_equal(content.path, other.path) or PathCodec.is_descendant(
            content, other
        )

    @staticmethod
    def is_ancestor(content: PathedContent, other: PathedContent) -> bool:
        """Determine whether ``content`` is an ancestor of ``other``."""
        return content.level < other.level and other.path.casefold().startswith(
            PathCodec.ensure_trailing_delimiter(content.path).casefold()
        )

    @staticmethod
    def is_ancestor_or_self(content: PathedContent, other: PathedContent) -> bool:
        """Determine whether ``content`` is ``other`` or one of its ancestors."""
        return PathCodec.paths_equal(other.path, content.path) or PathCodec.is_ancestor(
            content, other
        )
