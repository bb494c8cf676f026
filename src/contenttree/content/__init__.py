"""
Content type, authorship, template and URL helpers for published content.
"""

from contenttree.content.metadata import UserService, get_creator_name, get_writer_name
from contenttree.content.templates import (
    ContentTypeService,
    FileService,
    get_template_alias,
    is_allowed_template,
)
from contenttree.content.type_checks import (
    is_composed_of,
    is_document_type,
    is_equal,
    is_not_equal,
)
from contenttree.content.urls import PublishedUrlProvider, UrlMode, url

__all__ = [
    "is_composed_of",
    "is_document_type",
    "is_equal",
    "is_not_equal",
    "UserService",
    "get_creator_name",
    "get_writer_name",
    "FileService",
    "ContentTypeService",
    "get_template_alias",
    "is_allowed_template",
    "PublishedUrlProvider",
    "UrlMode",
    "url",
]
