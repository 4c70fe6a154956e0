"""Google Books normalizer.

Maps volume resources from the Google Books v1 API (``/volumes`` and
``/volumes/{id}``) to CanonicalItem.
"""

import re
from typing import Any, Optional

from cataloghub.normalization.coercion import clean_string, parse_int, parse_number, to_array
from cataloghub.normalization.normalizer import ProviderNormalizer
from cataloghub.normalization.schema import ContentType

DOMAIN = "books"

# Largest first
IMAGE_SIZES = ("extraLarge", "large", "medium", "small", "thumbnail", "smallThumbnail")

_ZOOM_PARAM = re.compile(r"&edge=curl")


def volume_info(raw: dict) -> dict:
    info = raw.get("volumeInfo")
    return info if isinstance(info, dict) else {}


def identifiers(info: dict) -> dict[str, str]:
    """Map industryIdentifiers to {"ISBN_10": ..., "ISBN_13": ...}."""
    found = {}
    for entry in to_array(info.get("industryIdentifiers")):
        if isinstance(entry, dict) and entry.get("type") and entry.get("identifier"):
            found[entry["type"]] = str(entry["identifier"])
    return found


def book_format(raw: dict) -> str:
    """Only e-books are identifiable; printType does not carry the binding."""
    if (raw.get("saleInfo") or {}).get("isEbook"):
        return "ebook"
    return "unknown"


def cover_url(url: Any) -> Optional[str]:
    """Drop the page-curl effect Google adds to cover thumbnails."""
    text = clean_string(url)
    return _ZOOM_PARAM.sub("", text) if text else None


def extract_title(raw: dict) -> Optional[str]:
    info = volume_info(raw)
    title = clean_string(info.get("title"))
    subtitle = clean_string(info.get("subtitle"))
    if title and subtitle:
        return f"{title}: {subtitle}"
    return title


def extract_images(raw: dict) -> dict[str, Any]:
    links = volume_info(raw).get("imageLinks") or {}
    ordered = [cover_url(links.get(size)) for size in IMAGE_SIZES if links.get(size)]
    return {
        "primary": ordered[0] if ordered else None,
        "thumbnail": cover_url(links.get("thumbnail") or links.get("smallThumbnail")),
        "gallery": list(dict.fromkeys(ordered)),
    }


def extract_details(raw: dict) -> dict[str, Any]:
    info = volume_info(raw)
    ids = identifiers(info)
    average = parse_number(info.get("averageRating"))
    return {
        "authors": [a for a in to_array(info.get("authors")) if isinstance(a, str)],
        "publisher": clean_string(info.get("publisher")),
        "isbn10": ids.get("ISBN_10"),
        "isbn13": ids.get("ISBN_13"),
        "format": book_format(raw),
        "pageCount": parse_int(info.get("pageCount")),
        "language": clean_string(info.get("language")),
        "categories": [c for c in to_array(info.get("categories")) if isinstance(c, str)],
        "publicationDate": clean_string(info.get("publishedDate")),
        "rating": (
            {"average": average, "count": parse_int(info.get("ratingsCount")) or 0}
            if average is not None
            else None
        ),
        "subtitle": clean_string(info.get("subtitle")),
        "printType": info.get("printType"),
        "maturityRating": info.get("maturityRating"),
        "previewLink": info.get("previewLink"),
    }


GOOGLEBOOKS = ProviderNormalizer(
    source="googlebooks",
    type=ContentType.BOOK,
    domain=DOMAIN,
    extract_source_id=lambda raw: raw.get("id"),
    extract_title=extract_title,
    extract_details=extract_details,
    extract_title_original=lambda raw: volume_info(raw).get("title"),
    extract_description=lambda raw: volume_info(raw).get("description"),
    extract_year=lambda raw: volume_info(raw).get("publishedDate"),
    extract_images=extract_images,
    extract_source_url=lambda raw: (
        volume_info(raw).get("canonicalVolumeLink") or volume_info(raw).get("infoLink")
    ),
)
