"""Response assemblers.

Wrap normalized items into the search and detail envelopes returned by
every provider, and render exceptions into the shared failure body.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Optional

import structlog

from cataloghub.api.models import (
    DetailResponse,
    ErrorResponse,
    MetaOut,
    ResponseMeta,
    SearchResponse,
)
from cataloghub.core.exceptions import CatalogHubError
from cataloghub.normalization.batch import normalize_many

if TYPE_CHECKING:
    from cataloghub.normalization.normalizer import NormalizeOptions, Normalizer

logger = structlog.get_logger(__name__)

DEFAULT_LANG = "en"


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def coerce_meta(meta: Any) -> ResponseMeta:
    """Accept a ResponseMeta, a (camel or snake case) dict or None."""
    if meta is None:
        return ResponseMeta()
    if isinstance(meta, ResponseMeta):
        return meta
    return ResponseMeta.model_validate(meta)


def _meta_out(meta: ResponseMeta, errors: int = 0) -> MetaOut:
    return MetaOut(
        fetched_at=utc_timestamp(),
        lang=meta.lang or DEFAULT_LANG,
        cached=meta.cached,
        cache_age=meta.cache_age,
        errors=errors or None,
    )


def normalize_search_response(
    normalizer: "Normalizer",
    raw_items: Any,
    meta: Any = None,
    options: Optional["NormalizeOptions"] = None,
) -> dict[str, Any]:
    """Normalize a list of raw records into a search envelope.

    Items that fail normalization are dropped; their number is reported
    as ``meta.errors``, which is omitted when nothing was dropped.
    """
    meta = coerce_meta(meta)
    batch = normalize_many(normalizer, raw_items, options)
    data = [item.to_dict() for item in batch.items]

    response = SearchResponse(
        provider=normalizer.source,
        domain=normalizer.domain,
        query=meta.query,
        total=meta.total if meta.total is not None else len(data),
        count=len(data),
        data=data,
        pagination=meta.pagination,
        meta=_meta_out(meta, errors=len(batch.errors)),
    )
    return response.to_dict()


def normalize_detail_response(
    normalizer: "Normalizer",
    raw_item: Any,
    meta: Any = None,
    options: Optional["NormalizeOptions"] = None,
) -> dict[str, Any]:
    """Normalize one raw record into a detail envelope.

    Raises:
        NormalizationError: If the record cannot be normalized.
    """
    meta = coerce_meta(meta)
    item = normalizer.normalize(raw_item, options)

    response = DetailResponse(
        provider=normalizer.source,
        domain=normalizer.domain,
        id=item.id,
        data=item.to_dict(),
        meta=_meta_out(meta),
    )
    return response.to_dict()


def error_status_code(exc: BaseException) -> int:
    """HTTP status for an exception (500 for anything unexpected)."""
    if isinstance(exc, CatalogHubError):
        return exc.status_code
    return 500


def build_error_response(exc: BaseException) -> dict[str, Any]:
    """Render an exception as the shared failure body.

    Unexpected exceptions are logged and reported without their message.
    """
    if isinstance(exc, CatalogHubError):
        response = ErrorResponse(
            error=type(exc).__name__,
            message=exc.message,
            code=exc.code,
            details=exc.details or None,
        )
    else:
        logger.error("unhandled_error", error=str(exc), error_type=type(exc).__name__)
        response = ErrorResponse(
            error="InternalServerError",
            message="An unexpected error occurred",
            code=CatalogHubError.code,
        )
    return response.to_dict()
