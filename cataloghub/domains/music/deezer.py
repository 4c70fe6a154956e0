"""Deezer normalizer for albums.

Accepts both search hits (``/search/album``) and full album records
(``/album/{id}``); only the latter carry tracks, genres, label and UPC.
Durations are in seconds.
"""

from typing import Any, Optional

from cataloghub.normalization.coercion import clean_string, get_path, parse_int, to_array
from cataloghub.normalization.normalizer import ProviderNormalizer
from cataloghub.normalization.schema import ContentType

DOMAIN = "music"

RECORD_TYPES = {
    "album": "album",
    "single": "single",
    "ep": "ep",
    "compile": "compilation",
    "compilation": "compilation",
}


def format_duration(seconds: Optional[int]) -> Optional[str]:
    """Render seconds as m:ss."""
    if not seconds:
        return None
    return f"{seconds // 60}:{seconds % 60:02d}"


def extract_images(raw: dict) -> dict[str, Any]:
    sizes = [raw.get(key) for key in ("cover_xl", "cover_big", "cover_medium", "cover_small")]
    return {
        "primary": raw.get("cover_xl") or raw.get("cover_big") or raw.get("cover"),
        "thumbnail": raw.get("cover_medium") or raw.get("cover"),
        "gallery": [url for url in sizes if url],
    }


def extract_artists(raw: dict) -> list[dict[str, Any]]:
    contributors = [c for c in to_array(raw.get("contributors")) if isinstance(c, dict)]
    if contributors:
        return [
            {"name": c["name"], "role": c.get("role"), "id": c.get("id")}
            for c in contributors
            if clean_string(c.get("name"))
        ]
    name = clean_string(get_path(raw, "artist.name"))
    if name is None:
        return []
    return [{"name": name, "role": "Main", "id": get_path(raw, "artist.id")}]


def extract_tracks(raw: dict) -> Optional[list[dict[str, Any]]]:
    tracks = get_path(raw, "tracks.data")
    if not isinstance(tracks, list):
        return None
    return [
        {
            "position": index,
            "title": track.get("title"),
            "duration": parse_int(track.get("duration")),
            "durationFormatted": format_duration(parse_int(track.get("duration"))),
            "preview": track.get("preview"),
            "explicit": bool(track.get("explicit_lyrics")),
        }
        for index, track in enumerate(tracks, start=1)
        if isinstance(track, dict)
    ]


def extract_details(raw: dict) -> dict[str, Any]:
    tracks = extract_tracks(raw)
    duration = parse_int(raw.get("duration"))
    return {
        "mediaType": RECORD_TYPES.get(clean_string(raw.get("record_type")) or "album", "unknown"),
        "artists": extract_artists(raw),
        "label": clean_string(raw.get("label")),
        "genres": [
            g["name"] for g in to_array(get_path(raw, "genres.data")) if isinstance(g, dict) and g.get("name")
        ],
        "trackCount": parse_int(raw.get("nb_tracks")) or (len(tracks) if tracks else None),
        "totalDuration": duration,
        "durationFormatted": format_duration(duration),
        "tracks": tracks,
        "barcode": clean_string(raw.get("upc")),
        "releaseDate": clean_string(raw.get("release_date")),
        "explicit": bool(raw.get("explicit_lyrics")),
        "fans": parse_int(raw.get("fans")),
    }


DEEZER = ProviderNormalizer(
    source="deezer",
    type=ContentType.MUSIC,
    domain=DOMAIN,
    extract_source_id=lambda raw: raw.get("id"),
    extract_title=lambda raw: raw.get("title"),
    extract_details=extract_details,
    extract_year=lambda raw: raw.get("release_date"),
    extract_images=extract_images,
    extract_source_url=lambda raw: raw.get("link"),
)
