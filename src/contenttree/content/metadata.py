"""
Authorship display names for published content.
"""

from typing import Protocol

from contenttree.core.models import PublishedContent


class User(Protocol):
    name: str


class UserService(Protocol):
    """Lookup of back-office users by id."""

    def get_user_by_id(self, user_id: int) -> User | None: ...


def get_creator_name(content: PublishedContent, user_service: UserService) -> str:
    """Get the name of the user who created ``content``, or an empty string."""
    creator = user_service.get_user_by_id(content.creator_id)
    return creator.name if creator is not None and creator.name else ""


def get_writer_name(content: PublishedContent, user_service: UserService) -> str:
    """Get the name of the user who last edited ``content``, or an empty string."""
    writer = user_service.get_user_by_id(content.writer_id)
    return writer.name if writer is not None and writer.name else ""
