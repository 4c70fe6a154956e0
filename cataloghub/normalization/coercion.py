"""Field coercion utilities.

Pure, total functions that turn arbitrary upstream values into clean
scalars. Malformed input degrades to None (or an empty list) and never
raises; this is the only place in the pipeline allowed to fail soft.
"""

import math
import re
from typing import Any, Optional, Union
from urllib.parse import urlsplit

Number = Union[int, float]

YEAR_MIN = 1800
YEAR_MAX = 2100

_YEAR_PATTERN = re.compile(r"\b(?:18|19|20)\d{2}\b")
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_HOST_PORT_PATTERN = re.compile(r"^[A-Za-z0-9.\-]+:\d+(?:[/?#]|$)")
_MISSING = object()


def clean_string(value: Any) -> Optional[str]:
    """Trim a value to a string, returning None when empty or absent.

    Containers are never stringified: a dict or list yields None so callers
    can rely on the result being a single optional scalar. Booleans and
    non-finite floats (nan, inf) are not text either and also yield None.
    """
    if value is None or isinstance(value, (bool, dict, list, tuple, set)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    text = str(value).strip()
    return text or None


def parse_number(value: Any) -> Optional[Number]:
    """Parse an int or float, returning None for non-numeric input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_int(value: Any) -> Optional[int]:
    """Parse a number and floor it to an int."""
    number = parse_number(value)
    if number is None:
        return None
    return math.floor(number)


def parse_year(value: Any) -> Optional[int]:
    """Extract a year in [1800, 2100].

    Accepts an integer (or numeric string) in range, a date/datetime, or
    any string containing a standalone 4-digit year such as an ISO date or
    free text ("Published 2014-05").
    """
    if not value:
        return None

    if hasattr(value, "year") and isinstance(getattr(value, "year"), int):
        year = value.year
        return year if YEAR_MIN <= year <= YEAR_MAX else None

    number = parse_int(value)
    if number is not None and YEAR_MIN <= number <= YEAR_MAX:
        return number

    if isinstance(value, (dict, list, tuple, set)):
        return None
    match = _YEAR_PATTERN.search(str(value))
    if match:
        year = int(match.group(0))
        if YEAR_MIN <= year <= YEAR_MAX:
            return year
    return None


def _is_absolute_url(text: str) -> bool:
    if any(ch.isspace() for ch in text) or not _SCHEME_PATTERN.match(text):
        return False
    try:
        parts = urlsplit(text)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc and parts.hostname)


def parse_url(value: Any) -> Optional[str]:
    """Return a syntactically valid absolute URL or None.

    A value without a scheme is retried once with ``https://`` prepended
    (protocol-relative ``//host/path`` values get ``https:``). A value that
    already carries a non-hierarchical scheme (``mailto:``, ``javascript:``)
    is rejected. Valid URLs are returned unchanged, so parse_url is
    idempotent.
    """
    text = clean_string(value)
    if text is None:
        return None

    if _is_absolute_url(text):
        return text

    if text.lower().startswith("http"):
        return None
    # Only scheme-less values (bare host or host:port) are retried
    if _SCHEME_PATTERN.match(text) and not _HOST_PORT_PATTERN.match(text):
        return None

    candidate = f"https:{text}" if text.startswith("//") else f"https://{text}"
    return candidate if _is_absolute_url(candidate) else None


def to_array(value: Any) -> list:
    """Wrap a scalar in a list; None becomes an empty list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


def get_path(obj: Any, path: str, default: Any = None) -> Any:
    """Safely read a nested value using a dotted path ("a.b.0.c").

    Returns ``default`` as soon as a segment is missing or an intermediate
    value is not a mapping or sequence.
    """
    if not obj or not path:
        return default

    current = obj
    for key in path.split("."):
        if current is None:
            return default
        if isinstance(current, dict):
            current = current.get(key, _MISSING)
        elif isinstance(current, (list, tuple)) and key.lstrip("-").isdigit():
            index = int(key)
            current = current[index] if -len(current) <= index < len(current) else _MISSING
        else:
            return default
        if current is _MISSING:
            return default

    return current
