"""
Core infrastructure modules for CatalogHub.

Provides common utilities used across the application:
- exceptions: Standardized exception hierarchy
- logging_config: structlog setup
"""

from cataloghub.core.exceptions import (
    CatalogHubError,
    RetryableError,
    PermanentError,
    ConfigurationError,
    NormalizationError,
    MissingPayloadError,
    MissingFieldError,
    InvalidItemError,
    ProviderError,
    ProviderNotFoundError,
)

from cataloghub.core.logging_config import configure_logging

__all__ = [
    # Exceptions
    "CatalogHubError",
    "RetryableError",
    "PermanentError",
    "ConfigurationError",
    "NormalizationError",
    "MissingPayloadError",
    "MissingFieldError",
    "InvalidItemError",
    "ProviderError",
    "ProviderNotFoundError",
    # Logging
    "configure_logging",
]
