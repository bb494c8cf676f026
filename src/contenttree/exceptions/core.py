"""
Exception classes for contenttree traversal and value resolution.

This module defines the error taxonomy of the library. Data absence (no
ancestor, no culture, no property value) is never an error; these exceptions
cover broken call contracts and data-integrity faults only.
"""


class ContentTreeError(Exception):
    """Base exception for all contenttree errors."""

    pass


class InvalidArgumentError(ContentTreeError, ValueError):
    """Raised when a required argument is missing or arguments conflict."""

    def __init__(self, argument: str, reason: str = "must not be None"):
        """
        Initialize the exception.

        Params:
            argument: Name of the offending argument
            reason: Why the argument is invalid
        """
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


class UnsupportedModeError(InvalidArgumentError):
    """Raised when an enumeration value has no supported behavior."""

    def __init__(self, argument: str, mode: object):
        """
        Initialize the exception.

        Params:
            argument: Name of the argument carrying the mode
            mode: The unsupported mode value
        """
        self.mode = mode
        super().__init__(argument, f"mode {mode!r} is not supported")


class MissingProviderError(ContentTreeError):
    """Raised when an operation needs a collaborator that was not supplied."""

    def __init__(self, provider: str, operation: str):
        """
        Initialize the exception.

        Params:
            provider: Name of the missing collaborator
            operation: The operation that required it
        """
        self.provider = provider
        self.operation = operation
        super().__init__(f"Cannot {operation} without a {provider}")


class PathFormatError(ContentTreeError, ValueError):
    """Raised when a materialized path string cannot be decoded."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: The malformed path
            reason: Why the path could not be decoded
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid content path '{path}': {reason}")


class TreeIntegrityError(ContentTreeError):
    """Raised when the parent chain of a node is cyclic or unbounded."""

    def __init__(self, content_id: int, reason: str):
        """
        Initialize the exception.

        Params:
            content_id: Id of the node where the walk started
            reason: What was detected in the parent chain
        """
        self.content_id = content_id
        self.reason = reason
        super().__init__(f"Corrupt ancestry for content {content_id}: {reason}")


class ContentTypeNotFoundError(ContentTreeError):
    """Raised when a content type required by published content does not exist."""

    def __init__(self, content_type_id: int):
        """
        Initialize the exception.

        Params:
            content_type_id: Id of the content type that could not be found
        """
        self.content_type_id = content_type_id
        super().__init__(
            f"No content type returned for published content (content_type='{content_type_id}')"
        )
