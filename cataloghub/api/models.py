"""Pydantic models for API requests and responses.

This module defines the wire contract shared by every provider: query
parameters accepted by search/detail requests, the search and detail
response envelopes, and the failure body.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Request Models
# =============================================================================


class SearchQuery(WireModel):
    """Query parameters for a provider search."""

    q: str = Field(..., min_length=1, description="Search terms")
    lang: str = Field(default="fr", min_length=2, max_length=2, description="2-letter language code")
    locale: Optional[str] = Field(
        None,
        pattern=r"^[a-z]{2}-[A-Z]{2}$",
        description="Full locale (xx-XX)",
    )
    max: int = Field(default=20, ge=1, le=100, description="Maximum number of results")
    page: int = Field(default=1, ge=1, description="1-based page number")
    auto_trad: bool = Field(default=False, description="Translate text fields post-hoc")
    refresh: bool = Field(default=False, description="Bypass the response cache")


class DetailQuery(WireModel):
    """Query parameters for a provider detail lookup."""

    detail_url: Optional[str] = Field(None, description="Detail URL returned by a search")
    id: Optional[str] = Field(None, description="Provider id (legacy)")
    lang: str = Field(default="fr", min_length=2, max_length=2)
    locale: Optional[str] = Field(None, pattern=r"^[a-z]{2}-[A-Z]{2}$")
    auto_trad: bool = False
    refresh: bool = False

    @model_validator(mode="after")
    def require_target(self) -> "DetailQuery":
        """Either detailUrl or id must be given."""
        if not self.detail_url and not self.id:
            raise ValueError("Either detailUrl or id is required")
        return self


# =============================================================================
# Response Metadata
# =============================================================================


class Pagination(WireModel):
    """Pagination block of a search response."""

    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=0)
    total_results: int = Field(..., ge=0)
    total_pages: Optional[int] = Field(None, ge=0)
    has_more: bool = False


class ResponseMeta(WireModel):
    """Request metadata supplied by the caller when assembling a response.

    ``total`` is the provider-reported result count; when absent the
    number of normalized items is used.
    """

    query: str = ""
    total: Optional[int] = Field(None, ge=0)
    pagination: Optional[Pagination] = None
    lang: Optional[str] = None
    cached: bool = False
    cache_age: Optional[float] = Field(None, ge=0)


class MetaOut(WireModel):
    """``meta`` block of every response envelope."""

    fetched_at: str = Field(..., description="ISO-8601 assembly timestamp")
    lang: str
    cached: bool = False
    cache_age: Optional[float] = None
    errors: Optional[int] = Field(None, ge=1, description="Dropped item count, omitted when zero")


# =============================================================================
# Response Envelopes
# =============================================================================


class SearchResponse(WireModel):
    """Envelope for a multi-item search result."""

    success: Literal[True] = True
    provider: str
    domain: str
    query: str
    total: int
    count: int
    data: list[dict[str, Any]] = Field(default_factory=list)
    pagination: Optional[Pagination] = None
    meta: MetaOut

    def to_dict(self) -> dict[str, Any]:
        return _dump_envelope(self)


class DetailResponse(WireModel):
    """Envelope for a single-item detail result."""

    success: Literal[True] = True
    provider: str
    domain: str
    id: str
    data: dict[str, Any]
    meta: MetaOut

    def to_dict(self) -> dict[str, Any]:
        return _dump_envelope(self)


class ErrorResponse(WireModel):
    """Failure body returned when a request cannot produce a result."""

    success: Literal[False] = False
    error: str
    message: str
    code: Optional[str] = None
    details: Optional[Any] = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def _dump_envelope(envelope: BaseModel) -> dict[str, Any]:
    data = envelope.model_dump(by_alias=True)
    if data["meta"].get("errors") is None:
        data["meta"].pop("errors", None)
    return data
