"""Normalization infrastructure for provider payloads.

Provides the unified envelope schema, the details schema registry, the
normalizer contract, batch normalization and the response assemblers.
"""

from cataloghub.normalization.batch import BatchError, BatchResult, normalize_many
from cataloghub.normalization.catalog import NormalizerCatalog, build_default_catalog
from cataloghub.normalization.normalizer import (
    DEFAULT_OPTIONS,
    NormalizeOptions,
    Normalizer,
    ProviderNormalizer,
)
from cataloghub.normalization.registry import (
    DEFAULT_REGISTRY,
    DetailsValidation,
    SchemaRegistry,
    build_default_registry,
)
from cataloghub.normalization.responses import (
    build_error_response,
    normalize_detail_response,
    normalize_search_response,
)
from cataloghub.normalization.schema import CanonicalItem, ContentType, ItemImages, ItemUrls

__all__ = [
    "BatchError",
    "BatchResult",
    "CanonicalItem",
    "ContentType",
    "DEFAULT_OPTIONS",
    "DEFAULT_REGISTRY",
    "DetailsValidation",
    "ItemImages",
    "ItemUrls",
    "NormalizeOptions",
    "Normalizer",
    "NormalizerCatalog",
    "ProviderNormalizer",
    "SchemaRegistry",
    "build_default_catalog",
    "build_default_registry",
    "build_error_response",
    "normalize_detail_response",
    "normalize_many",
    "normalize_search_response",
]
