"""Anime and manga providers."""

from cataloghub.domains.anime_manga.jikan import JIKAN, JIKAN_MANGA

PROVIDERS = (JIKAN, JIKAN_MANGA)

__all__ = ["JIKAN", "JIKAN_MANGA", "PROVIDERS"]
