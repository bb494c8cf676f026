"""
URL generation for published content, delegated to a URL provider.
"""

from enum import Enum
from typing import Protocol

from contenttree.core.models import PublishedContent
from contenttree.exceptions import MissingProviderError, UnsupportedModeError


class UrlMode(Enum):
    """How a URL is rendered."""

    DEFAULT = "default"  # Provider decides
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    AUTO = "auto"  # Legacy: absolute when the relative URL is all there is


class PublishedUrlProvider(Protocol):
    def get_url(self, content: PublishedContent, mode: UrlMode, culture: str | None) -> str: ...


def url(
    content: PublishedContent,
    url_provider: PublishedUrlProvider | None,
    culture: str | None = None,
    mode: UrlMode = UrlMode.DEFAULT,
) -> str:
    """
    Get the URL of ``content``.

    Params:
        content: The node
        url_provider: Provider generating URLs
        culture: Culture of the URL, None for the current one
        mode: Rendering mode

    Returns:
        The URL

    Raises:
        MissingProviderError: If url_provider is None
        UnsupportedModeError: If mode is not a UrlMode
    """
    if url_provider is None:
        raise MissingProviderError("URL provider", "get a URL")

    if mode in (UrlMode.DEFAULT, UrlMode.RELATIVE, UrlMode.ABSOLUTE):
        return url_provider.get_url(content, mode, culture)

    if mode is UrlMode.AUTO:
        result = url_provider.get_url(content, UrlMode.DEFAULT, culture)
        if result.startswith(("http://", "https://")):
            return result
        relative = url_provider.get_url(content, UrlMode.RELATIVE, culture)
        if relative == result:
            return url_provider.get_url(content, UrlMode.ABSOLUTE, culture)
        return result

    raise UnsupportedModeError("mode", mode)
