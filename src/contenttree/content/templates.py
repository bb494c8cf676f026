"""
Template lookups for published content.

Templates and content type definitions live in external services; these
helpers only combine their answers with the routing settings.
"""

import logging
from typing import Protocol

from contenttree.config import WebRoutingSettings
from contenttree.core.models import PublishedContent
from contenttree.exceptions import ContentTypeNotFoundError, MissingProviderError

logger = logging.getLogger(__name__)


class Template(Protocol):
    id: int
    alias: str


class FileService(Protocol):
    """Lookup of templates by id or alias."""

    def get_template(self, id_or_alias: int | str) -> Template | None: ...


class EditableContentType(Protocol):
    """Content type definition as stored, exposing its allowed templates."""

    def is_allowed_template(self, template_id: int) -> bool: ...


class ContentTypeService(Protocol):
    """Lookup of stored content type definitions by id."""

    def get(self, content_type_id: int) -> EditableContentType | None: ...


def get_template_alias(content: PublishedContent, file_service: FileService) -> str:
    """Get the alias of the template assigned to ``content``, or an empty string."""
    if content.template_id is None:
        return ""

    template = file_service.get_template(content.template_id)
    return template.alias if template is not None else ""


def is_allowed_template(
    content: PublishedContent,
    content_type_service: ContentTypeService,
    settings: WebRoutingSettings,
    template: int | str,
    file_service: FileService | None = None,
) -> bool:
    """
    Determine whether ``template`` may render ``content``.

    Params:
        content: The node
        content_type_service: Source of the content type's allowed templates
        settings: Alternative template switches
        template: Template id, or alias resolved through ``file_service``
        file_service: Required when ``template`` is an alias

    Returns:
        True if the template is allowed; an unknown alias is never allowed

    Raises:
        ContentTypeNotFoundError: If the content type of ``content`` does not exist
        MissingProviderError: If template is an alias and file_service is None
    """
    if isinstance(template, str):
        if file_service is None:
            raise MissingProviderError("file service", "resolve a template alias")
        resolved = file_service.get_template(template)
        if resolved is None:
            logger.debug("Template alias %s not found", template)
            return False
        template = resolved.id

    if settings.disable_alternative_templates:
        return content.template_id == template

    if content.template_id == template or not settings.validate_alternative_templates:
        return True

    content_type = content_type_service.get(content.content_type.id)
    if content_type is None:
        logger.warning(
            "Content %s references missing content type %s", content.id, content.content_type.id
        )
        raise ContentTypeNotFoundError(content.content_type.id)

    return content_type.is_allowed_template(template)
