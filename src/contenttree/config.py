"""
Settings objects for contenttree.

Settings are immutable values built by the caller and passed explicitly to the
components that need them. Nothing here reads the environment or global state.
"""

from collections.abc import Mapping

from attrs import field, frozen


def _casefold_keys(mapping: Mapping[str, str] | None) -> dict[str, str]:
    return {key.casefold(): value for key, value in (mapping or {}).items()}


@frozen
class NavigationSettings:
    """Limits applied while walking parent chains.

    Params:
        max_depth: Maximum number of parents visited before the chain is
            considered corrupt.
    """

    max_depth: int = 1024


@frozen
class LocalizationSettings:
    """Culture configuration used by the language fallback.

    Params:
        default_culture: Culture of the default language, if any.
        fallback_languages: Maps a culture to the culture it falls back to
            (e.g. ``{"fr-CA": "fr-FR", "fr-FR": "en-US"}``).
    """

    default_culture: str | None = None
    fallback_languages: dict[str, str] = field(factory=dict, converter=_casefold_keys)

    def fallback_for(self, culture: str | None) -> str | None:
        """Return the culture that ``culture`` falls back to, or None."""
        if not culture:
            return None
        return self.fallback_languages.get(culture.casefold())


@frozen
class WebRoutingSettings:
    """Template routing switches.

    Params:
        disable_alternative_templates: Only the assigned template is allowed.
        validate_alternative_templates: Check alternative templates against the
            content type's allowed templates.
    """

    disable_alternative_templates: bool = False
    validate_alternative_templates: bool = False


@frozen
class ContentTreeSettings:
    """Aggregate of all contenttree settings with defaults."""

    navigation: NavigationSettings = field(factory=NavigationSettings)
    localization: LocalizationSettings = field(factory=LocalizationSettings)
    web_routing: WebRoutingSettings = field(factory=WebRoutingSettings)
