"""Paninimania normalizer for sticker albums.

``sticker_album`` has no registered details schema, so details pass
through unvalidated. Scraped text values are either plain strings or
translation objects of the form ``{"text": ..., "lang": ...}``.
"""

from typing import Any, Optional

from cataloghub.normalization.coercion import clean_string, parse_int, to_array
from cataloghub.normalization.normalizer import ProviderNormalizer

DOMAIN = "sticker-albums"
CONTENT_TYPE = "sticker_album"


def extract_text(value: Any) -> Optional[str]:
    """Read a plain or translated text value."""
    if isinstance(value, dict):
        return clean_string(value.get("text"))
    return clean_string(value)


def extract_checklist(raw: dict) -> Optional[dict[str, Any]]:
    checklist = raw.get("checklist")
    if not isinstance(checklist, dict):
        return None
    total = parse_int(checklist.get("total"))
    return {
        "raw": checklist.get("raw"),
        "total": total,
        "items": to_array(checklist.get("items")),
        "totalWithSpecials": parse_int(checklist.get("totalWithSpecials")) or total,
    }


def extract_special_stickers(raw: dict) -> Optional[list[dict[str, Any]]]:
    specials = raw.get("specialStickers")
    if not isinstance(specials, list):
        return None
    return [
        {
            "name": extract_text(special.get("name")),
            "raw": special.get("raw"),
            "total": parse_int(special.get("total")),
            "list": to_array(special.get("list")),
        }
        for special in specials
        if isinstance(special, dict)
    ]


def extract_images(raw: dict) -> dict[str, Any]:
    additional = [img.get("url") for img in to_array(raw.get("additionalImages")) if isinstance(img, dict)]
    return {
        "primary": raw.get("mainImage") or raw.get("image"),
        "thumbnail": raw.get("thumbnail"),
        "gallery": [url for url in additional if url],
    }


def extract_details(raw: dict) -> dict[str, Any]:
    additional = raw.get("additionalImages")
    return {
        "editor": extract_text(raw.get("editor")),
        "barcode": clean_string(raw.get("barcode")),
        "copyright": extract_text(raw.get("copyright")),
        "releaseDate": clean_string(raw.get("releaseDate")),
        "checklist": extract_checklist(raw),
        "specialStickers": extract_special_stickers(raw),
        "categories": [extract_text(c) for c in to_array(raw.get("categories"))] or None,
        "articles": [extract_text(a) for a in to_array(raw.get("articles"))] or None,
        "additionalImages": (
            [
                {"url": img.get("url"), "caption": extract_text(img.get("caption"))}
                for img in additional
                if isinstance(img, dict)
            ]
            if isinstance(additional, list)
            else None
        ),
    }


PANINIMANIA = ProviderNormalizer(
    source="paninimania",
    type=CONTENT_TYPE,
    domain=DOMAIN,
    extract_source_id=lambda raw: raw.get("id"),
    extract_title=lambda raw: extract_text(raw.get("title")),
    extract_details=extract_details,
    extract_description=lambda raw: extract_text(raw.get("description")),
    extract_year=lambda raw: raw.get("year") or raw.get("releaseDate") or extract_text(raw.get("copyright")),
    extract_images=extract_images,
    extract_source_url=lambda raw: raw.get("url"),
)
