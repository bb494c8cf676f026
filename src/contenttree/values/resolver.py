"""
Property value resolution for published content.

Each lookup runs the same decision sequence:
    1. the node's own property, when it has a value for the culture/segment
    2. the fallback chain, when it produces a value
    3. the property's converter view of "no value", when the property exists
    4. the caller-supplied default

Absence is never an error. Only a missing content argument raises.
"""

from typing import Any, TypeVar

from contenttree.core.models import PublishedContent
from contenttree.values.fallback import (
    NO_FALLBACK,
    Fallback,
    NoValueFallback,
    PublishedValueFallback,
)
from contenttree.variation.resolver import VariationResolver, require_content

T = TypeVar("T")


class ValueResolver:
    """Resolves property values with culture normalization and fallback."""

    def __init__(
        self,
        value_fallback: PublishedValueFallback | None = None,
        variation: VariationResolver | None = None,
    ):
        """
        Initialize the resolver.

        Params:
            value_fallback: Fallback chain consulted when a node has no value,
                defaults to a chain that never produces one
            variation: Culture/segment resolver, defaults to one without an
                ambient context
        """
        self.value_fallback = value_fallback or NoValueFallback()
        self.variation = variation or VariationResolver()

    def _variation_keys(
        self, content: PublishedContent, culture: str | None, segment: str | None
    ) -> tuple[str, str]:
        return (
            self.variation.resolve_culture(content, culture),
            self.variation.resolve_segment(content, segment),
        )

    def has_value(
        self,
        content: PublishedContent,
        alias: str,
        culture: str | None = None,
        segment: str | None = None,
        fallback: Fallback = NO_FALLBACK,
    ) -> bool:
        """
        Determine whether a value can be produced for a property.

        Params:
            content: The node
            alias: Property alias
            culture: Requested culture, None for the current one
            segment: Requested segment, None for the current one
            fallback: Fallback kinds to consider

        Returns:
            True if the node or the fallback chain has a value
        """
        require_content(content)
        culture_key, segment_key = self._variation_keys(content, culture, segment)

        prop = content.get_property(alias)
        if prop is not None and prop.has_value(culture_key, segment_key):
            return True

        return self.value_fallback.try_get_value(
            content, alias, culture, segment, fallback, None
        ).success

    def value(
        self,
        content: PublishedContent,
        alias: str,
        culture: str | None = None,
        segment: str | None = None,
        fallback: Fallback = NO_FALLBACK,
        default_value: Any = None,
    ) -> Any:
        """
        Get the value of a property.

        Params:
            content: The node
            alias: Property alias
            culture: Requested culture, None for the current one
            segment: Requested segment, None for the current one
            fallback: Fallback kinds to try when the node has no value
            default_value: Returned when nothing else applies; also the value
                produced by the default-value fallback kind

        Returns:
            The resolved value

        Raises:
            InvalidArgumentError: If content is None
        """
        require_content(content)
        culture_key, segment_key = self._variation_keys(content, culture, segment)

        prop = content.get_property(alias)
        if prop is not None and prop.has_value(culture_key, segment_key):
            return prop.get_value(culture_key, segment_key)

        result = self.value_fallback.try_get_value(
            content, alias, culture, segment, fallback, default_value
        )
        if result.success:
            return result.value

        # Let the converter express "present but empty" (e.g. an empty list)
        no_value_property = result.source_property or prop
        if no_value_property is not None:
            return no_value_property.get_value(culture_key, segment_key)

        return default_value

    def value_as(
        self,
        content: PublishedContent,
        target_type: type[T] | Any,
        alias: str,
        culture: str | None = None,
        segment: str | None = None,
        fallback: Fallback = NO_FALLBACK,
        default_value: T | None = None,
    ) -> T | None:
        """
        Get the value of a property converted to ``target_type``.

        Runs the same sequence as ``value``; a step whose value does not
        convert is skipped like a step without a value.

        Params:
            content: The node
            target_type: Requested type, a class or typing construct
            alias: Property alias
            culture: Requested culture, None for the current one
            segment: Requested segment, None for the current one
            fallback: Fallback kinds to try when the node has no value
            default_value: Returned when no step produces a convertible value

        Returns:
            The typed value, or default_value
        """
        require_content(content)
        culture_key, segment_key = self._variation_keys(content, culture, segment)

        prop = content.get_property(alias)
        if prop is not None and prop.has_value(culture_key, segment_key):
            converted, value = prop.value_as(target_type, culture_key, segment_key)
            if converted:
                return value

        result = self.value_fallback.try_get_value(
            content, alias, culture, segment, fallback, default_value, target_type
        )
        if result.success:
            return result.value

        no_value_property = result.source_property or prop
        if no_value_property is not None:
            converted, value = no_value_property.value_as(target_type, culture_key, segment_key)
            if converted:
                return value

        return default_value
