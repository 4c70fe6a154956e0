"""Sticker album providers."""

from cataloghub.domains.sticker_albums.paninimania import PANINIMANIA

PROVIDERS = (PANINIMANIA,)

__all__ = ["PANINIMANIA", "PROVIDERS"]
