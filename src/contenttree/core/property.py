"""
Published property storage and value converters.

A published property holds the raw values of one property alias on one node,
keyed by culture and segment, and exposes them through a converter. The
converter decides what counts as a value and what "no value" looks like for
its property editor (an empty list for a multi-picker, None for a text box).
"""

from collections.abc import Mapping
from typing import Any

from contenttree.core.conversion import try_convert
from contenttree.core.types import DEFAULT_SEGMENT, INVARIANT_CULTURE, PropertyValue


class PropertyValueConverter:
    """Default converter: passes raw values through unchanged.

    Blank strings and None are not values. Subclasses override
    ``convert`` to shape raw values and ``is_value`` to redefine emptiness;
    ``convert(None)`` is the "no value" form of the property.
    """

    def is_value(self, raw: Any) -> bool:
        """Return whether a raw stored value counts as a value."""
        if raw is None:
            return False
        if isinstance(raw, str):
            return raw.strip() != ""
        return True

    def convert(self, raw: Any) -> PropertyValue:
        """Convert a raw stored value (possibly None) into its public form."""
        return raw


class ListValueConverter(PropertyValueConverter):
    """Converter for multi-value editors; no value converts to an empty list."""

    def is_value(self, raw: Any) -> bool:
        return raw is not None and len(raw) > 0

    def convert(self, raw: Any) -> PropertyValue:
        if raw is None:
            return []
        return list(raw)


VariationKey = tuple[str, str]


class PublishedProperty:
    """Values of one property alias on one published node.

    Invariant properties ignore the requested culture and segment-invariant
    properties ignore the requested segment, so a lookup against them always
    lands on the single stored value.
    """

    def __init__(
        self,
        alias: str,
        values: Mapping[str | VariationKey, Any] | None = None,
        *,
        varies_by_culture: bool = False,
        varies_by_segment: bool = False,
        converter: PropertyValueConverter | None = None,
    ):
        """
        Initialize the property.

        Params:
            alias: Property alias
            values: Raw values keyed by culture or by (culture, segment)
            varies_by_culture: Whether values are stored per culture
            varies_by_segment: Whether values are stored per segment
            converter: Converter shaping raw values, defaults to pass-through
        """
        self.alias = alias
        self.varies_by_culture = varies_by_culture
        self.varies_by_segment = varies_by_segment
        self.converter = converter or PropertyValueConverter()
        self._values: dict[VariationKey, Any] = {}

        for key, raw in (values or {}).items():
            culture, segment = (key, DEFAULT_SEGMENT) if isinstance(key, str) else key
            self._values[self._variation_key(culture, segment)] = raw

    @classmethod
    def invariant(
        cls, alias: str, value: Any, converter: PropertyValueConverter | None = None
    ) -> "PublishedProperty":
        """Build an invariant property holding a single raw value."""
        return cls(alias, {INVARIANT_CULTURE: value}, converter=converter)

    def __repr__(self) -> str:
        return f"PublishedProperty(alias={self.alias!r}, values={self._values!r})"

    def _variation_key(self, culture: str | None, segment: str | None) -> VariationKey:
        culture_key = INVARIANT_CULTURE
        if self.varies_by_culture:
            culture_key = (culture or INVARIANT_CULTURE).casefold()
        segment_key = DEFAULT_SEGMENT
        if self.varies_by_segment:
            segment_key = segment or DEFAULT_SEGMENT
        return culture_key, segment_key

    def get_source_value(self, culture: str | None = None, segment: str | None = None) -> Any:
        """Return the raw stored value, or None when nothing is stored."""
        return self._values.get(self._variation_key(culture, segment))

    def has_value(self, culture: str | None = None, segment: str | None = None) -> bool:
        """Return whether the converter considers the stored value a value."""
        return self.converter.is_value(self.get_source_value(culture, segment))

    def get_value(self, culture: str | None = None, segment: str | None = None) -> PropertyValue:
        """
        Return the converted value.

        When nothing is stored the converter still runs, which lets it return
        its own representation of "no value".
        """
        return self.converter.convert(self.get_source_value(culture, segment))

    def value_as(
        self, target_type: Any, culture: str | None = None, segment: str | None = None
    ) -> tuple[bool, Any]:
        """
        Return the converted value as ``target_type``.

        Params:
            target_type: Requested type
            culture: Variation culture
            segment: Variation segment

        Returns:
            Tuple of (success, typed value)
        """
        return try_convert(self.get_value(culture, segment), target_type)
