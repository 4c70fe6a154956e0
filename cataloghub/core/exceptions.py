"""
Core exception hierarchy for CatalogHub.

Provides standardized exception types with categorization for retry logic
and an HTTP mapping for the response layer.
All components should use these exceptions instead of generic Exception.
"""

from typing import Any, Optional


# =============================================================================
# Base Exceptions
# =============================================================================


class CatalogHubError(Exception):
    """Base exception for all CatalogHub errors."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for an API failure body."""
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "statusCode": self.status_code,
        }
        if self.details:
            payload["details"] = self.details
        return payload


class RetryableError(CatalogHubError):
    """
    Transient errors that should be retried.

    Examples: Upstream rate limits, timeouts, temporary network issues.
    """

    pass


class PermanentError(CatalogHubError):
    """
    Errors that won't be fixed by retrying.

    Examples: Invalid input, missing required data, misconfiguration.
    """

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PermanentError):
    """Raised when configuration is invalid or missing."""

    code = "CONFIGURATION_ERROR"

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details)


# =============================================================================
# Normalization Errors
# =============================================================================


class NormalizationError(PermanentError):
    """Base exception for item normalization failures."""

    code = "NORMALIZATION_ERROR"
    status_code = 422

    def __init__(
        self,
        source: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.source = source
        super().__init__(f"[{source}] {message}", details)


class MissingPayloadError(NormalizationError):
    """Raised when normalize() receives no raw payload at all."""

    code = "MISSING_PAYLOAD"
    status_code = 400

    def __init__(self, source: str):
        super().__init__(source, "raw payload is missing")


class MissingFieldError(NormalizationError):
    """Raised when a mandatory envelope field is empty after cleaning.

    Only ``sourceId`` and ``title`` are mandatory; this is the single hard
    failure condition for an item.
    """

    code = "MISSING_FIELD"

    def __init__(self, source: str, field: str):
        self.field = field
        super().__init__(
            source,
            f"required field '{field}' is missing from the payload",
            {"field": field},
        )


class InvalidItemError(NormalizationError):
    """Raised when extracted values cannot form a valid CanonicalItem."""

    code = "INVALID_ITEM"

    def __init__(self, source: str, errors: list[str]):
        self.errors = errors
        super().__init__(
            source,
            "normalized item failed envelope validation",
            {"errors": errors},
        )


# =============================================================================
# Provider Errors
# =============================================================================


class ProviderError(RetryableError):
    """Raised by the fetch layer when an upstream provider fails."""

    code = "PROVIDER_ERROR"
    status_code = 502

    def __init__(
        self,
        provider: str,
        message: str = "Provider error",
        details: Optional[dict[str, Any]] = None,
    ):
        self.provider = provider
        merged = {"provider": provider, **(details or {})}
        super().__init__(f"{provider}: {message}", merged)


class ProviderNotFoundError(PermanentError):
    """Raised when no normalizer is registered for a provider."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unknown provider: {provider}", {"provider": provider})
