"""
CatalogHub wire contract.

Request, response and error models shared by every provider. Routing is
handled by the host HTTP application; this package only defines shapes.
"""

from cataloghub.api.models import (
    DetailQuery,
    DetailResponse,
    ErrorResponse,
    MetaOut,
    Pagination,
    ResponseMeta,
    SearchQuery,
    SearchResponse,
)

__all__ = [
    "DetailQuery",
    "DetailResponse",
    "ErrorResponse",
    "MetaOut",
    "Pagination",
    "ResponseMeta",
    "SearchQuery",
    "SearchResponse",
]
