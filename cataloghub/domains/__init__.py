"""
Provider normalizers grouped by catalog domain.

Each domain package exposes its ProviderNormalizer definitions and a
PROVIDERS tuple consumed by the normalizer catalog.
"""

from cataloghub.domains import anime_manga, books, construction_toys, music, sticker_albums

ALL_PROVIDERS = (
    *construction_toys.PROVIDERS,
    *books.PROVIDERS,
    *anime_manga.PROVIDERS,
    *music.PROVIDERS,
    *sticker_albums.PROVIDERS,
)

__all__ = ["ALL_PROVIDERS"]
