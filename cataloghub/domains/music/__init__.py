"""Music providers."""

from cataloghub.domains.music.deezer import DEEZER

PROVIDERS = (DEEZER,)

__all__ = ["DEEZER", "PROVIDERS"]
