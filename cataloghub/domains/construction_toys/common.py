"""Helpers shared by construction-toy providers."""

import re
import unicodedata
from typing import Any, Optional

from cataloghub.normalization.coercion import clean_string, parse_int, parse_number

DOMAIN = "construction-toys"

_AGE_PLUS = re.compile(r"(\d+)\s*\+")
_AGE_RANGE = re.compile(r"(\d+)\s*[-–]\s*(\d+)")
_AGE_FRENCH = re.compile(r"(\d+)\s*ans?\s*et\s*\+", re.IGNORECASE)


def parse_age_range(value: Any) -> Optional[dict[str, Optional[int]]]:
    """Parse an age label ("18+", "6-12", "4 ans et +") into {min, max}."""
    text = clean_string(value)
    if text is None:
        return None

    match = _AGE_PLUS.search(text)
    if match:
        return {"min": int(match.group(1)), "max": None}

    match = _AGE_RANGE.search(text)
    if match:
        return {"min": int(match.group(1)), "max": int(match.group(2))}

    match = _AGE_FRENCH.search(text)
    if match:
        return {"min": int(match.group(1)), "max": None}

    return None


def min_max(minimum: Any, maximum: Any) -> Optional[dict[str, Optional[int]]]:
    """Build an age range from separate bounds, None when both are absent."""
    low, high = parse_int(minimum), parse_int(maximum)
    if low is None and high is None:
        return None
    return {"min": low, "max": high}


def money(amount: Any, currency: Optional[str] = None) -> Optional[dict[str, Any]]:
    """Build a {amount, currency} price, None when the amount is not numeric."""
    value = parse_number(amount)
    if value is None:
        return None
    return {"amount": value, "currency": clean_string(currency) or "EUR"}


def slugify(value: Any) -> Optional[str]:
    """Lowercase ASCII slug with dash separators."""
    text = clean_string(value)
    if text is None:
        return None
    ascii_text = unicodedata.normalize("NFD", text).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_text.lower()).strip("-")
    return slug or None


def prefixed_title(set_number: Optional[str], name: Optional[str]) -> Optional[str]:
    """Prefix a set name with its number ("75192 Millennium Falcon")."""
    name = clean_string(name)
    if not set_number:
        return name
    if name is None:
        return None
    return name if name.startswith(set_number) else f"{set_number} {name}"


def join_parts(*parts: Any) -> Optional[str]:
    """Join non-empty fragments with a bullet separator."""
    cleaned = [text for text in (clean_string(part) for part in parts) if text]
    return " • ".join(cleaned) if cleaned else None
