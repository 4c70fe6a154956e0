"""Normalizer contract and the single-item normalization algorithm.

A provider normalizer is a ProviderNormalizer: a frozen set of extractor
hooks. Three hooks are mandatory (source id, title, details); the others
have safe defaults, so a provider only overrides what its payload offers.
Normalizer runs the hooks, cleans every field through the coercion
utilities and validates ``details`` against the schema registry.

Usage:
    brickset = ProviderNormalizer(
        source="brickset",
        type=ContentType.CONSTRUCT_TOY,
        domain="construction-toys",
        extract_source_id=lambda raw: raw.get("setID"),
        extract_title=lambda raw: raw.get("name"),
        extract_details=lambda raw: {"brand": "LEGO"},
    )
    item = Normalizer(brickset).normalize(raw)
"""

import json
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog
from pydantic import ValidationError

from cataloghub.config.settings import Settings, get_settings
from cataloghub.core.exceptions import (
    ConfigurationError,
    InvalidItemError,
    MissingFieldError,
    MissingPayloadError,
    NormalizationError,
)
from cataloghub.normalization.coercion import (
    clean_string,
    parse_url,
    parse_year,
    to_array,
)
from cataloghub.normalization.registry import (
    DEFAULT_REGISTRY,
    SchemaRegistry,
    format_validation_errors,
)
from cataloghub.normalization.schema import CanonicalItem, ContentType, ItemImages, ItemUrls

if TYPE_CHECKING:
    from cataloghub.normalization.batch import BatchResult

logger = structlog.get_logger(__name__)

Extractor = Callable[[Any], Any]


def no_value(raw: Any) -> None:
    """Default hook for optional scalar extractors."""
    return None


def no_images(raw: Any) -> dict[str, Any]:
    """Default hook for extract_images."""
    return {"primary": None, "thumbnail": None, "gallery": []}


_REQUIRED_HOOKS = ("extract_source_id", "extract_title", "extract_details")


@dataclass(frozen=True)
class ProviderNormalizer:
    """Extractor hooks describing how to read one provider's payloads.

    Omitting a mandatory hook fails at construction time, never on first use.
    """

    source: str
    type: str
    domain: str
    extract_source_id: Extractor
    extract_title: Extractor
    extract_details: Extractor
    extract_title_original: Extractor = no_value
    extract_description: Extractor = no_value
    extract_year: Extractor = no_value
    extract_images: Extractor = no_images
    extract_source_url: Extractor = no_value
    build_detail_url: Optional[Callable[[str, str], str]] = None

    def __post_init__(self) -> None:
        if isinstance(self.type, ContentType):
            object.__setattr__(self, "type", self.type.value)

        for name in ("source", "type", "domain"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(
                    "Normalizer requires non-empty source, type and domain",
                    config_key=name,
                )

        for f in fields(self):
            if not f.name.startswith(("extract_", "build_")):
                continue
            hook = getattr(self, f.name)
            if hook is None and f.name not in _REQUIRED_HOOKS:
                continue
            if not callable(hook):
                raise ConfigurationError(
                    f"Normalizer hook '{f.name}' for {self.source} must be callable",
                    config_key=f.name,
                )


@dataclass(frozen=True)
class NormalizeOptions:
    """Per-call normalization options."""

    include_raw: bool = False
    raw_log_limit: int = 500
    api_prefix: str = "/api"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **overrides: Any) -> "NormalizeOptions":
        """Build options from application settings, with explicit overrides."""
        settings = settings or get_settings()
        values = {
            "include_raw": settings.debug,
            "raw_log_limit": settings.raw_log_limit,
            "api_prefix": settings.api_prefix,
        }
        values.update(overrides)
        return cls(**values)


DEFAULT_OPTIONS = NormalizeOptions()


def truncate_payload(raw: Any, limit: int) -> str:
    """Serialize a payload for logging, cut to ``limit`` characters."""
    try:
        text = json.dumps(raw, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        text = repr(raw)
    return text[:limit]


class Normalizer:
    """Converts raw provider records into CanonicalItem envelopes.

    Stateless between calls: the result depends only on the raw payload,
    the provider hooks, the (immutable) registry and the call options.

    Args:
        provider: Extractor hooks for the provider.
        registry: Details schema registry. Defaults to DEFAULT_REGISTRY.
    """

    def __init__(self, provider: ProviderNormalizer, registry: Optional[SchemaRegistry] = None):
        self.provider = provider
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.details_schema = self.registry.get_details_schema(provider.type)

        if self.details_schema is None:
            logger.warning(
                "details_schema_missing",
                source=provider.source,
                type=provider.type,
                fallback="permissive",
            )

    @property
    def source(self) -> str:
        return self.provider.source

    @property
    def type(self) -> str:
        return self.provider.type

    @property
    def domain(self) -> str:
        return self.provider.domain

    def __repr__(self) -> str:
        return f"Normalizer(source={self.source!r}, type={self.type!r}, domain={self.domain!r})"

    # -------------------------------------------------------------------------
    # Single item
    # -------------------------------------------------------------------------

    def build_detail_url(self, source_id: str, options: NormalizeOptions = DEFAULT_OPTIONS) -> str:
        """Return the internal detail path for an item."""
        prefix = options.api_prefix.rstrip("/")
        default = f"{prefix}/{self.domain}/{self.source}/{source_id}"
        if self.provider.build_detail_url is None:
            return default
        url = self._run_optional("build_detail_url", self.provider.build_detail_url, source_id, prefix)
        return clean_string(url) or default

    def normalize(self, raw: Any, options: Optional[NormalizeOptions] = None) -> CanonicalItem:
        """Normalize one raw record.

        Args:
            raw: Decoded provider payload for one item.
            options: Per-call options (debug raw passthrough, log limits).

        Returns:
            The normalized CanonicalItem.

        Raises:
            MissingPayloadError: If raw is None.
            MissingFieldError: If sourceId or title is empty after cleaning.
            InvalidItemError: If the extracted values do not form a valid envelope
                (e.g. details with non-string keys).
        """
        options = options or DEFAULT_OPTIONS

        if raw is None:
            error = MissingPayloadError(self.source)
            logger.error("normalization_failed", source=self.source, error=str(error))
            raise error

        try:
            source_id = self._extract_required("sourceId", self.provider.extract_source_id, raw)
            title = self._extract_required("title", self.provider.extract_title, raw)
        except NormalizationError as e:
            logger.error(
                "normalization_failed",
                source=self.source,
                error=str(e),
                raw=truncate_payload(raw, options.raw_log_limit),
            )
            raise

        item_id = f"{self.source}:{source_id}"
        images = self._run_optional("extract_images", self.provider.extract_images, raw)

        try:
            item = CanonicalItem(
                id=item_id,
                type=self.type,
                source=self.source,
                source_id=source_id,
                title=title,
                title_original=clean_string(
                    self._run_optional("extract_title_original", self.provider.extract_title_original, raw)
                ),
                description=clean_string(
                    self._run_optional("extract_description", self.provider.extract_description, raw)
                ),
                year=parse_year(self._run_optional("extract_year", self.provider.extract_year, raw)),
                images=normalize_images(images),
                urls=ItemUrls(
                    source=parse_url(
                        self._run_optional("extract_source_url", self.provider.extract_source_url, raw)
                    ),
                    detail=self.build_detail_url(source_id, options),
                ),
                details=self._validated_details(item_id, raw),
                raw=raw if options.include_raw else None,
            )
        except ValidationError as e:
            error = InvalidItemError(self.source, format_validation_errors(e))
            logger.error(
                "normalization_failed",
                source=self.source,
                error=str(error),
                raw=truncate_payload(raw, options.raw_log_limit),
            )
            raise error from e
        return item

    def _extract_required(self, field: str, hook: Extractor, raw: Any) -> str:
        try:
            value = clean_string(hook(raw))
        except Exception as e:
            raise MissingFieldError(self.source, field) from e
        if value is None:
            raise MissingFieldError(self.source, field)
        return value

    def _run_optional(self, name: str, hook: Callable[..., Any], *args: Any) -> Any:
        try:
            return hook(*args)
        except Exception as e:
            logger.warning(
                "extractor_failed",
                source=self.source,
                extractor=name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def _validated_details(self, item_id: str, raw: Any) -> dict[str, Any]:
        details = self._run_optional("extract_details", self.provider.extract_details, raw)
        result = self.registry.validate_details(self.type, details)

        if not result.schema_found:
            logger.debug("details_schema_bypassed", item_id=item_id, type=self.type)
        elif not result.valid:
            logger.warning(
                "details_validation_failed",
                item_id=item_id,
                source=self.source,
                type=self.type,
                errors=result.errors,
            )
        return result.details

    # -------------------------------------------------------------------------
    # Batch and response shortcuts
    # -------------------------------------------------------------------------

    def normalize_many(self, raw_items: Any, options: Optional[NormalizeOptions] = None) -> "BatchResult":
        from cataloghub.normalization.batch import normalize_many

        return normalize_many(self, raw_items, options)

    def normalize_search_response(
        self, raw_items: Any, meta: Any = None, options: Optional[NormalizeOptions] = None
    ) -> dict[str, Any]:
        from cataloghub.normalization.responses import normalize_search_response

        return normalize_search_response(self, raw_items, meta, options)

    def normalize_detail_response(
        self, raw_item: Any, meta: Any = None, options: Optional[NormalizeOptions] = None
    ) -> dict[str, Any]:
        from cataloghub.normalization.responses import normalize_detail_response

        return normalize_detail_response(self, raw_item, meta, options)


def normalize_images(images: Any) -> ItemImages:
    """Clean an extracted images mapping.

    The thumbnail falls back to the primary image; invalid gallery URLs
    are dropped.
    """
    if not isinstance(images, dict):
        images = {}
    primary = parse_url(images.get("primary"))
    thumbnail = parse_url(images.get("thumbnail")) or primary
    gallery = [url for url in (parse_url(value) for value in to_array(images.get("gallery"))) if url]
    return ItemImages(primary=primary, thumbnail=thumbnail, gallery=gallery)
