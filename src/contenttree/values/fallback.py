"""
Fallback strategies for property values.

When a node has no value for a property, the caller may name an ordered list
of fallback kinds to try. The chain stops at the first kind producing a value,
or at ``FallbackKind.NONE``.
"""

import logging
from enum import Enum
from typing import Any, Protocol

from attrs import frozen

from contenttree.config import LocalizationSettings
from contenttree.core.models import PublishedContent
from contenttree.core.property import PublishedProperty
from contenttree.exceptions import UnsupportedModeError
from contenttree.navigation.navigator import TreeNavigator
from contenttree.variation.resolver import VariationResolver

logger = logging.getLogger(__name__)


class FallbackKind(Enum):
    """Behaviors available to a fallback chain."""

    NONE = "none"  # Stop here
    DEFAULT_VALUE = "default_value"  # Use the caller-supplied default
    LANGUAGE = "language"  # Try the configured fallback cultures
    ANCESTORS = "ancestors"  # Try the same property on ancestor nodes


@frozen
class Fallback:
    """Ordered fallback kinds for one value lookup."""

    kinds: tuple[FallbackKind, ...] = ()

    @classmethod
    def to(cls, *kinds: FallbackKind) -> "Fallback":
        """Build a fallback trying ``kinds`` in order."""
        return cls(tuple(kinds))

    def __iter__(self):
        return iter(self.kinds)


NO_FALLBACK = Fallback()


@frozen
class FallbackResult:
    """Outcome of a fallback lookup.

    Params:
        success: Whether a value was produced
        value: The produced value, None on failure
        source_property: Property that supplied the value, or on failure the
            node's own property (if any) for its "no value" representation
    """

    success: bool
    value: Any = None
    source_property: PublishedProperty | None = None


class PublishedValueFallback(Protocol):
    """Produces a value for a property when the node itself has none.

    ``culture`` and ``segment`` are passed as requested by the caller (None
    for the current ones); every node read by the fallback resolves them
    against its own content type.
    """

    def try_get_value(
        self,
        content: PublishedContent,
        alias: str,
        culture: str | None,
        segment: str | None,
        fallback: Fallback,
        default_value: Any = None,
        target_type: Any = None,
    ) -> FallbackResult: ...


class NoValueFallback:
    """Fallback that never produces a value."""

    def try_get_value(
        self,
        content: PublishedContent,
        alias: str,
        culture: str | None,
        segment: str | None,
        fallback: Fallback,
        default_value: Any = None,
        target_type: Any = None,
    ) -> FallbackResult:
        return FallbackResult(False, None, content.get_property(alias))


def _produce(
    prop: PublishedProperty, culture: str, segment: str, target_type: Any
) -> tuple[bool, Any]:
    if target_type is None:
        return True, prop.get_value(culture, segment)
    return prop.value_as(target_type, culture, segment)


class ChainedValueFallback:
    """Fallback chain supporting language, ancestor and default-value kinds."""

    def __init__(
        self,
        navigator: TreeNavigator,
        localization: LocalizationSettings | None = None,
        variation: VariationResolver | None = None,
    ):
        """
        Initialize the fallback chain.

        Params:
            navigator: Navigator used by the ancestors kind
            localization: Culture fallback configuration used by the language kind
            variation: Resolves the requested culture and segment for every
                node the chain reads, defaults to one without an ambient context
        """
        self.navigator = navigator
        self.localization = localization or LocalizationSettings()
        self.variation = variation or VariationResolver()

    def try_get_value(
        self,
        content: PublishedContent,
        alias: str,
        culture: str | None,
        segment: str | None,
        fallback: Fallback,
        default_value: Any = None,
        target_type: Any = None,
    ) -> FallbackResult:
        """
        Try each fallback kind in order.

        Params:
            content: Node whose property has no value
            alias: Property alias
            culture: Requested culture, None for the current one
            segment: Requested segment, None for the current one
            fallback: Kinds to try, in order
            default_value: Value produced by the default-value kind
            target_type: When given, candidate values must convert to this type

        Returns:
            FallbackResult of the first kind that produced a value, or a
            failed result carrying the node's own property

        Raises:
            UnsupportedModeError: If fallback holds an unknown kind
        """
        for kind in fallback:
            if kind is FallbackKind.NONE:
                break
            elif kind is FallbackKind.DEFAULT_VALUE:
                if default_value is not None:
                    return FallbackResult(True, default_value, None)
            elif kind is FallbackKind.LANGUAGE:
                result = self._try_language(content, alias, culture, segment, target_type)
                if result.success:
                    return result
            elif kind is FallbackKind.ANCESTORS:
                result = self._try_ancestors(content, alias, culture, segment, target_type)
                if result.success:
                    return result
            else:
                raise UnsupportedModeError("fallback", kind)

        return FallbackResult(False, None, content.get_property(alias))

    def _try_language(
        self,
        content: PublishedContent,
        alias: str,
        culture: str | None,
        segment: str | None,
        target_type: Any,
    ) -> FallbackResult:
        prop = content.get_property(alias)
        culture = self.variation.resolve_culture(content, culture)
        segment = self.variation.resolve_segment(content, segment)
        if prop is None or not prop.varies_by_culture or not culture:
            return FallbackResult(False)

        visited = {culture.casefold()}
        candidate = self.localization.fallback_for(culture)
        while candidate:
            if candidate.casefold() in visited:
                logger.debug("Language fallback loop at %s for property %s", candidate, alias)
                break
            visited.add(candidate.casefold())

            if prop.has_value(candidate, segment):
                converted, value = _produce(prop, candidate, segment, target_type)
                if converted:
                    logger.debug(
                        "Property %s of content %s resolved from culture %s",
                        alias,
                        content.id,
                        candidate,
                    )
                    return FallbackResult(True, value, prop)
            candidate = self.localization.fallback_for(candidate)

        return FallbackResult(False)

    def _try_ancestors(
        self,
        content: PublishedContent,
        alias: str,
        culture: str | None,
        segment: str | None,
        target_type: Any,
    ) -> FallbackResult:
        for ancestor in self.navigator.ancestors(content):
            prop = ancestor.get_property(alias)
            if prop is None:
                continue

            # Each ancestor resolves the request against its own content type
            ancestor_culture = self.variation.resolve_culture(ancestor, culture)
            ancestor_segment = self.variation.resolve_segment(ancestor, segment)
            if not prop.has_value(ancestor_culture, ancestor_segment):
                continue

            converted, value = _produce(prop, ancestor_culture, ancestor_segment, target_type)
            if converted:
                logger.debug(
                    "Property %s of content %s resolved from ancestor %s",
                    alias,
                    content.id,
                    ancestor.id,
                )
                return FallbackResult(True, value, prop)

        return FallbackResult(False)
