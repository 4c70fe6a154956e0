"""Unified envelope schema for every normalized catalog item.

Provides the ContentType enum and the CanonicalItem Pydantic model that
all provider payloads are normalized into. Wire keys are camelCase.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContentType(Enum):
    """Content types with a registered details schema."""

    CONSTRUCT_TOY = "construct_toy"
    BOOK = "book"
    VIDEOGAME = "videogame"
    MOVIE = "movie"
    SERIES = "series"
    ANIME = "anime"
    MANGA = "manga"
    TCG_CARD = "tcg_card"
    BOARD_GAME = "board_game"
    MUSIC = "music"
    COLLECTIBLE = "collectible"
    PRODUCT = "product"


class EnvelopeModel(BaseModel):
    """Base for envelope models: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class ItemImages(EnvelopeModel):
    """Image URLs of an item. Every entry is a validated absolute URL."""

    primary: str | None = None
    thumbnail: str | None = None
    gallery: list[str] = Field(default_factory=list)


class ItemUrls(EnvelopeModel):
    """Links for an item: upstream page and internal detail endpoint."""

    source: str | None = Field(None, description="Original provider page")
    detail: str = Field(..., min_length=1, description="Internal detail endpoint")


class CanonicalItem(EnvelopeModel):
    """Unified schema for all normalized catalog content.

    Provides a common structure for data from every provider. Only
    ``details`` varies, and its shape is chosen by ``type``.
    """

    # Identification
    id: str = Field(..., min_length=1, description="Globally unique id: {source}:{sourceId}")
    type: str = Field(..., min_length=1, description="Content type tag selecting the details schema")
    source: str = Field(..., min_length=1, description="Provider identifier")
    source_id: str = Field(..., min_length=1, description="Provider-local identifier")

    # Core content
    title: str = Field(..., min_length=1)
    title_original: str | None = None
    description: str | None = None
    year: int | None = Field(None, ge=1800, le=2100)

    # Media and links
    images: ItemImages = Field(default_factory=ItemImages)
    urls: ItemUrls

    # Type-specific sub-document
    details: dict[str, Any] = Field(default_factory=dict)

    # Provenance
    raw: Any = Field(None, alias="_raw", description="Original payload, debug only")

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible wire representation.

        ``_raw`` is present only when it was attached.
        """
        data = self.model_dump(by_alias=True, exclude={"raw"})
        if self.raw is not None:
            data["_raw"] = self.raw
        return data
