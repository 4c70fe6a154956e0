"""
CatalogHub - catalog normalization and validation pipeline.

This package turns heterogeneous upstream provider payloads into one
canonical item shape:
- core: exception hierarchy and structured logging setup
- config: Pydantic settings
- normalization: coercion utilities, envelope schema, details registry,
  normalizer contract, batch runner, response assemblers, provider catalog
- domains: provider normalizers grouped by catalog domain
- api: request, response and error wire models
"""

__version__ = "0.1.0"
