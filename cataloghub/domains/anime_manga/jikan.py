"""Jikan (MyAnimeList) normalizers for anime and manga.

Both map records from the Jikan v4 API (``/anime`` and ``/manga``). Item
ids are MyAnimeList ids; free-text upstream enums (type, status, source)
are folded into the closed vocabularies of the details schemas.
"""

import re
from typing import Any, Optional

from cataloghub.normalization.coercion import clean_string, get_path, parse_int, parse_number, to_array
from cataloghub.normalization.normalizer import ProviderNormalizer
from cataloghub.normalization.schema import ContentType

DOMAIN = "anime-manga"

ANIME_TYPES = {
    "tv": "tv",
    "tv special": "special",
    "movie": "movie",
    "ova": "ova",
    "ona": "ona",
    "special": "special",
    "music": "music",
    "pv": "special",
    "cm": "special",
}

ANIME_STATUSES = {
    "currently airing": "airing",
    "finished airing": "finished",
    "not yet aired": "upcoming",
}

ANIME_SOURCES = {
    "manga": "manga",
    "light novel": "light_novel",
    "visual novel": "visual_novel",
    "game": "game",
    "video game": "game",
    "card game": "game",
    "original": "original",
    "web manga": "web_manga",
    "4-koma manga": "manga",
    "novel": "other",
    "web novel": "other",
    "book": "other",
    "picture book": "other",
    "music": "other",
    "radio": "other",
    "other": "other",
}

MANGA_TYPES = {
    "manga": "manga",
    "light novel": "light_novel",
    "novel": "light_novel",
    "manhwa": "manhwa",
    "manhua": "manhua",
    "one-shot": "one_shot",
    "doujinshi": "doujinshi",
}

MANGA_STATUSES = {
    "publishing": "publishing",
    "finished": "finished",
    "on hiatus": "hiatus",
    "discontinued": "discontinued",
    "not yet published": "upcoming",
}

AGE_RATINGS = {
    "G - All Ages": "G",
    "PG - Children": "PG",
    "PG-13 - Teens 13 or older": "PG-13",
    "R - 17+ (violence & profanity)": "R",
    "R+ - Mild Nudity": "R+",
    "Rx - Hentai": "Rx",
}

_HOURS = re.compile(r"(\d+)\s*hr")
_MINUTES = re.compile(r"(\d+)\s*min")


def map_enum(mapping: dict[str, str], value: Any) -> str:
    text = clean_string(value)
    if text is None:
        return "unknown"
    return mapping.get(text.lower(), "unknown")


def parse_duration(value: Any) -> Optional[int]:
    """Convert "1 hr 30 min" or "24 min per ep" to minutes."""
    text = clean_string(value)
    if text is None:
        return None
    hours = _HOURS.search(text)
    minutes = _MINUTES.search(text)
    if not hours and not minutes:
        return None
    return (int(hours.group(1)) * 60 if hours else 0) + (int(minutes.group(1)) if minutes else 0)


def names(entries: Any) -> list[str]:
    return [e["name"] for e in to_array(entries) if isinstance(e, dict) and clean_string(e.get("name"))]


def date_part(value: Any) -> Optional[str]:
    """Keep the YYYY-MM-DD part of a Jikan ISO timestamp."""
    text = clean_string(value)
    return text[:10] if text else None


def mal_rating(raw: dict) -> Optional[dict[str, Any]]:
    score = parse_number(raw.get("score"))
    if score is None:
        return None
    return {"mal": score, "count": parse_int(raw.get("scored_by"))}


def extract_images(raw: dict) -> dict[str, Any]:
    images = raw.get("images") or {}
    webp = images.get("webp") or {}
    jpg = images.get("jpg") or {}
    return {
        "primary": webp.get("large_image_url") or jpg.get("large_image_url") or jpg.get("image_url"),
        "thumbnail": jpg.get("small_image_url") or jpg.get("image_url"),
        "gallery": [
            url
            for url in (jpg.get("large_image_url"), jpg.get("image_url"), webp.get("large_image_url"))
            if url
        ],
    }


def title_original(raw: dict) -> Optional[str]:
    return raw.get("title_japanese") or raw.get("title")


def common_details(raw: dict) -> dict[str, Any]:
    return {
        "genres": names(raw.get("genres")),
        "themes": names(raw.get("themes")),
        "demographics": names(raw.get("demographics")),
        "rating": mal_rating(raw),
        "titleEnglish": raw.get("title_english"),
        "rank": parse_int(raw.get("rank")),
        "popularity": parse_int(raw.get("popularity")),
        "members": parse_int(raw.get("members")),
        "malId": raw.get("mal_id"),
    }


# =============================================================================
# Anime
# =============================================================================


def extract_anime_year(raw: dict) -> Any:
    return raw.get("year") or get_path(raw, "aired.from")


def extract_anime_details(raw: dict) -> dict[str, Any]:
    season = clean_string(raw.get("season"))
    year = parse_int(raw.get("year"))
    return {
        "mediaType": map_enum(ANIME_TYPES, raw.get("type")),
        "studios": names(raw.get("studios")),
        "episodeCount": parse_int(raw.get("episodes")),
        "episodeDuration": parse_duration(raw.get("duration")),
        "status": map_enum(ANIME_STATUSES, raw.get("status")),
        "airedFrom": date_part(get_path(raw, "aired.from")),
        "airedTo": date_part(get_path(raw, "aired.to")),
        "season": f"{season} {year}" if season and year else season,
        "source": map_enum(ANIME_SOURCES, raw.get("source")),
        "ageRating": AGE_RATINGS.get(raw.get("rating"), clean_string(raw.get("rating"))),
        "trailerUrl": get_path(raw, "trailer.url"),
        **common_details(raw),
    }


JIKAN = ProviderNormalizer(
    source="jikan",
    type=ContentType.ANIME,
    domain=DOMAIN,
    extract_source_id=lambda raw: raw.get("mal_id"),
    extract_title=lambda raw: raw.get("title"),
    extract_details=extract_anime_details,
    extract_title_original=title_original,
    extract_description=lambda raw: raw.get("synopsis"),
    extract_year=extract_anime_year,
    extract_images=extract_images,
    extract_source_url=lambda raw: raw.get("url"),
    build_detail_url=lambda source_id, prefix: f"{prefix}/{DOMAIN}/jikan/anime/{source_id}",
)


# =============================================================================
# Manga
# =============================================================================


def extract_manga_details(raw: dict) -> dict[str, Any]:
    serializations = names(raw.get("serializations"))
    return {
        "mediaType": map_enum(MANGA_TYPES, raw.get("type")),
        "authors": [{"name": name, "role": "both"} for name in names(raw.get("authors"))],
        "serialization": serializations[0] if serializations else None,
        "volumeCount": parse_int(raw.get("volumes")),
        "chapterCount": parse_int(raw.get("chapters")),
        "status": map_enum(MANGA_STATUSES, raw.get("status")),
        "publishedFrom": date_part(get_path(raw, "published.from")),
        "publishedTo": date_part(get_path(raw, "published.to")),
        **common_details(raw),
    }


JIKAN_MANGA = ProviderNormalizer(
    source="jikan_manga",
    type=ContentType.MANGA,
    domain=DOMAIN,
    extract_source_id=lambda raw: raw.get("mal_id"),
    extract_title=lambda raw: raw.get("title"),
    extract_details=extract_manga_details,
    extract_title_original=title_original,
    extract_description=lambda raw: raw.get("synopsis"),
    extract_year=lambda raw: get_path(raw, "published.from"),
    extract_images=extract_images,
    extract_source_url=lambda raw: raw.get("url"),
    build_detail_url=lambda source_id, prefix: f"{prefix}/{DOMAIN}/jikan/manga/{source_id}",
)
