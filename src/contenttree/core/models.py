"""
Published content snapshot models.

Models are immutable pydantic snapshots. Tree ownership lives in an external
store: a node only knows its own materialized path, from which the id of its
parent is derived.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from contenttree.core.path_codec import ROOT_ID, PathCodec
from contenttree.core.property import PublishedProperty
from contenttree.core.types import INVARIANT_CULTURE, ContentId


class ContentType(BaseModel):
    """Type metadata of published content."""

    model_config = ConfigDict(frozen=True)

    id: int = 0
    alias: str
    composition_aliases: frozenset[str] = frozenset()
    varies_by_culture: bool = False
    varies_by_segment: bool = False


class CultureInfo(BaseModel):
    """Per-culture publishing information of a node."""

    model_config = ConfigDict(frozen=True)

    culture: str = INVARIANT_CULTURE
    name: str
    url_segment: str | None = None
    date: datetime = datetime.min


class PublishedContent(BaseModel):
    """
    Immutable snapshot of a published node.

    Subclasses act as strongly typed content models and can be used to filter
    navigation results by class.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: ContentId
    key: UUID | None = None
    path: str
    level: int
    content_type: ContentType
    cultures: dict[str, CultureInfo] = Field(default_factory=dict)
    properties: dict[str, PublishedProperty] = Field(default_factory=dict)
    template_id: int | None = None
    creator_id: int = 0
    writer_id: int = 0
    create_date: datetime = datetime.min
    update_date: datetime = datetime.min

    @model_validator(mode="after")
    def _check_path_and_cultures(self) -> "PublishedContent":
        ids = PathCodec.decode(self.path)
        if ids[-1] != self.id:
            raise ValueError(f"path '{self.path}' does not end with content id {self.id}")
        if self.level != len(ids) - 1:
            raise ValueError(
                f"level {self.level} is inconsistent with path '{self.path}'"
            )
        variant_keys = set(self.cultures) - {INVARIANT_CULTURE}
        if not self.content_type.varies_by_culture and variant_keys:
            raise ValueError(
                f"content type '{self.content_type.alias}' is invariant but cultures "
                f"{sorted(self.cultures)} were given"
            )
        return self

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def parent_id(self) -> ContentId | None:
        """Id of the parent node, or None for top-level nodes."""
        ids = PathCodec.decode(self.path)
        if len(ids) < 2 or ids[-2] == ROOT_ID:
            return None
        return ids[-2]

    @property
    def ancestor_ids(self) -> list[ContentId]:
        """Ids of all ancestors, root first, excluding the root sentinel."""
        ids = PathCodec.decode(self.path)[:-1]
        return [content_id for content_id in ids if content_id != ROOT_ID]

    def get_property(self, alias: str) -> PublishedProperty | None:
        """
        Get a property by alias.

        Params:
            alias: Property alias, matched case-insensitively

        Returns:
            The property, or None if the node has no such property
        """
        prop = self.properties.get(alias)
        if prop is not None:
            return prop

        folded = alias.casefold()
        for key, candidate in self.properties.items():
            if key.casefold() == folded:
                return candidate
        return None

    def get_culture(self, culture: str | None) -> CultureInfo | None:
        """
        Get culture information by culture key.

        Params:
            culture: Culture key, matched case-insensitively; None means invariant

        Returns:
            The culture information, or None if the node has none for that key
        """
        key = culture or INVARIANT_CULTURE
        info = self.cultures.get(key)
        if info is not None:
            return info

        folded = key.casefold()
        for candidate_key, candidate in self.cultures.items():
            if candidate_key.casefold() == folded:
                return candidate
        return None
