"""
contenttree exception classes.

This package provides all exception types used throughout contenttree
for consistent error handling and reporting.
"""

from contenttree.exceptions.core import (
    ContentTreeError,
    ContentTypeNotFoundError,
    InvalidArgumentError,
    MissingProviderError,
    PathFormatError,
    TreeIntegrityError,
    UnsupportedModeError,
)

__all__ = [
    "ContentTreeError",
    "ContentTypeNotFoundError",
    "InvalidArgumentError",
    "MissingProviderError",
    "PathFormatError",
    "TreeIntegrityError",
    "UnsupportedModeError",
]
