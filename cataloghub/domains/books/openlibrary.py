"""Open Library normalizer.

Handles both search documents (``/search.json`` docs) and work records
(``/works/{id}.json``). Ids are the bare work key, e.g. ``OL45804W``.
"""

import re
from typing import Any, Optional

from cataloghub.normalization.coercion import clean_string, parse_int, to_array
from cataloghub.normalization.normalizer import ProviderNormalizer
from cataloghub.normalization.schema import ContentType

DOMAIN = "books"
BASE_URL = "https://openlibrary.org"
COVERS_URL = "https://covers.openlibrary.org"

MAX_SUBJECTS = 15

_ISBN_SEPARATORS = re.compile(r"[-\s]")


def work_id(raw: dict) -> Optional[str]:
    key = clean_string(raw.get("key"))
    if key is None:
        return None
    return key.rsplit("/", 1)[-1]


def cover_url(cover_id: Any, size: str = "L") -> str:
    return f"{COVERS_URL}/b/id/{cover_id}-{size}.jpg"


def pick_isbn(values: Any) -> Optional[str]:
    """Prefer the first ISBN-13, else the first ISBN-10."""
    isbn10 = None
    for value in to_array(values):
        cleaned = _ISBN_SEPARATORS.sub("", str(value))
        if len(cleaned) == 13:
            return cleaned
        if len(cleaned) == 10 and isbn10 is None:
            isbn10 = cleaned
    return isbn10


def text_value(value: Any) -> Optional[str]:
    """Work descriptions are either a string or {"type": ..., "value": ...}."""
    if isinstance(value, dict):
        return clean_string(value.get("value"))
    return clean_string(value)


def extract_images(raw: dict) -> dict[str, Any]:
    cover_id = raw.get("cover_i") or next(iter(to_array(raw.get("covers"))), None)
    if cover_id:
        return {
            "primary": cover_url(cover_id, "L"),
            "thumbnail": cover_url(cover_id, "M"),
            "gallery": [cover_url(c, "L") for c in to_array(raw.get("covers"))[:5]],
        }
    isbn = pick_isbn(raw.get("isbn"))
    if isbn:
        url = f"{COVERS_URL}/b/isbn/{isbn}-L.jpg"
        return {"primary": url, "thumbnail": url, "gallery": []}
    return {"primary": None, "thumbnail": None, "gallery": []}


def extract_year(raw: dict) -> Any:
    if raw.get("first_publish_year"):
        return raw["first_publish_year"]
    publish_years = to_array(raw.get("publish_year"))
    if publish_years:
        return min(publish_years)
    return raw.get("first_publish_date")


def extract_details(raw: dict) -> dict[str, Any]:
    isbn = pick_isbn(raw.get("isbn"))
    subjects = raw.get("subject") or raw.get("subjects") or []
    languages = to_array(raw.get("language"))
    publishers = [p for p in to_array(raw.get("publisher")) if isinstance(p, str)]
    return {
        "authors": [a for a in to_array(raw.get("author_name")) if isinstance(a, str)],
        "publisher": publishers[0] if publishers else None,
        "publishers": publishers,
        "isbn13": isbn if isbn and len(isbn) == 13 else None,
        "isbn10": isbn if isbn and len(isbn) == 10 else None,
        "pageCount": parse_int(raw.get("number_of_pages_median") or raw.get("number_of_pages")),
        "language": languages[0] if languages else None,
        "availableLanguages": languages if len(languages) > 1 else None,
        "categories": [s for s in to_array(subjects) if isinstance(s, str)][:MAX_SUBJECTS],
        "publicationDate": clean_string(raw.get("first_publish_year") or raw.get("first_publish_date")),
        "workId": work_id(raw),
        "editionCount": parse_int(raw.get("edition_count")),
    }


OPENLIBRARY = ProviderNormalizer(
    source="openlibrary",
    type=ContentType.BOOK,
    domain=DOMAIN,
    extract_source_id=work_id,
    extract_title=lambda raw: raw.get("title") or raw.get("title_suggest"),
    extract_details=extract_details,
    extract_description=lambda raw: text_value(raw.get("description")),
    extract_year=extract_year,
    extract_images=extract_images,
    extract_source_url=lambda raw: f"{BASE_URL}/works/{work_id(raw)}" if work_id(raw) else None,
)
