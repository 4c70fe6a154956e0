"""Normalizer catalog for runtime provider selection.

Maps a provider name to its ready-to-use Normalizer. The catalog is built
once from ProviderNormalizer definitions and is read-only afterwards.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Optional

from cataloghub.core.exceptions import ConfigurationError, ProviderNotFoundError
from cataloghub.normalization.normalizer import Normalizer, ProviderNormalizer
from cataloghub.normalization.registry import SchemaRegistry


class NormalizerCatalog:
    """Immutable lookup from provider name to Normalizer.

    Args:
        providers: Provider definitions; source names must be unique.
        registry: Details schema registry shared by every normalizer.

    Raises:
        ConfigurationError: If two providers share a source name.
    """

    def __init__(self, providers: Iterable[ProviderNormalizer], registry: Optional[SchemaRegistry] = None):
        normalizers: dict[str, Normalizer] = {}
        for provider in providers:
            if provider.source in normalizers:
                raise ConfigurationError(
                    f"Duplicate provider source: {provider.source}",
                    config_key="source",
                )
            normalizers[provider.source] = Normalizer(provider, registry)
        self._normalizers = MappingProxyType(normalizers)

    def get(self, source: str) -> Normalizer:
        """Return the normalizer for a provider.

        Raises:
            ProviderNotFoundError: If no provider is registered under that name.
        """
        if source not in self._normalizers:
            raise ProviderNotFoundError(source)
        return self._normalizers[source]

    def list_sources(self) -> list[str]:
        """List registered provider names."""
        return list(self._normalizers.keys())

    def by_domain(self, domain: str) -> list[Normalizer]:
        """List the normalizers serving a domain."""
        return [n for n in self._normalizers.values() if n.domain == domain]

    def domains(self) -> list[str]:
        """List domains in registration order, without duplicates."""
        return list(dict.fromkeys(n.domain for n in self._normalizers.values()))

    def __contains__(self, source: object) -> bool:
        return source in self._normalizers

    def __len__(self) -> int:
        return len(self._normalizers)


@lru_cache
def build_default_catalog() -> NormalizerCatalog:
    """Build (once) the catalog of every bundled provider."""
    from cataloghub.domains import ALL_PROVIDERS

    return NormalizerCatalog(ALL_PROVIDERS)
