"""Rebrickable normalizer.

Maps set records from the Rebrickable v3 API to CanonicalItem. Records
may be enriched with ``parts`` and ``minifigs`` inventories fetched
separately; those are carried into ``details`` when present.
"""

import re
from typing import Any, Optional

from cataloghub.domains.construction_toys.common import DOMAIN, join_parts
from cataloghub.normalization.coercion import clean_string, get_path, parse_int, to_array
from cataloghub.normalization.normalizer import ProviderNormalizer
from cataloghub.normalization.schema import ContentType

# Rebrickable theme_id -> theme name
THEME_MAP = {
    1: "Technic",
    50: "Town",
    52: "City",
    67: "Duplo",
    111: "Monkie Kid",
    126: "Space",
    158: "Star Wars",
    171: "Super Heroes",
    186: "Super Heroes Marvel",
    206: "Racers",
    227: "Creator",
    233: "Seasonal",
    246: "City",
    252: "Trains",
    284: "Castle",
    324: "Classic",
    334: "Ideas",
    407: "Collectible Minifigures",
    425: "BrickHeadz",
    435: "Friends",
    494: "NINJAGO",
    501: "Jurassic World",
    535: "Harry Potter",
    540: "Overwatch",
    569: "Hidden Side",
    577: "Minecraft",
    599: "Disney",
    610: "Ideas",
    621: "DOTS",
    673: "Speed Champions",
    687: "Creator Expert",
    688: "Architecture",
    695: "Botanical Collection",
    696: "Art",
    697: "Icons",
    704: "VIDIYO",
    710: "Powered Up",
    725: "Bricktober",
    726: "DREAMZzz",
}

MAX_PART_ITEMS = 100

_VARIANT_SUFFIX = re.compile(r"-\d+$")


def theme_name(theme_id: Any) -> Optional[str]:
    return THEME_MAP.get(parse_int(theme_id))


def set_number(raw: dict) -> Optional[str]:
    set_num = clean_string(raw.get("set_num"))
    return _VARIANT_SUFFIX.sub("", set_num) if set_num else None


def minifig_count(raw: dict) -> Optional[int]:
    count = get_path(raw, "minifigs.count")
    if count is not None:
        return parse_int(count)
    return parse_int(raw.get("num_minifigs"))


def extract_title(raw: dict) -> Optional[str]:
    name = clean_string(raw.get("name")) or "Unknown Set"
    number = set_number(raw)
    return f"{number} {name}" if number else name


def extract_description(raw: dict) -> Optional[str]:
    parts = parse_int(raw.get("num_parts"))
    minifigs = minifig_count(raw)
    return join_parts(
        theme_name(raw.get("theme_id")),
        f"{parts} pieces" if parts else None,
        f"{minifigs} minifig{'s' if minifigs > 1 else ''}" if minifigs else None,
    )


def extract_parts(raw: dict) -> Optional[dict[str, Any]]:
    results = get_path(raw, "parts.results")
    if not isinstance(results, list):
        return None
    return {
        "totalCount": parse_int(raw.get("num_parts")),
        "uniqueCount": parse_int(get_path(raw, "parts.count")) or len(results),
        "spareCount": sum(1 for p in results if isinstance(p, dict) and p.get("is_spare")),
        "items": [
            {
                "partNum": get_path(p, "part.part_num"),
                "name": get_path(p, "part.name"),
                "category": get_path(p, "part.part_cat_id"),
                "color": get_path(p, "color.name"),
                "colorRgb": f"#{get_path(p, 'color.rgb')}" if get_path(p, "color.rgb") else None,
                "quantity": p.get("quantity"),
                "isSpare": bool(p.get("is_spare")),
                "imageUrl": get_path(p, "part.part_img_url"),
                "elementId": p.get("element_id"),
            }
            for p in results[:MAX_PART_ITEMS]
            if isinstance(p, dict)
        ],
    }


def extract_minifigs(raw: dict) -> Optional[dict[str, Any]]:
    results = get_path(raw, "minifigs.results")
    if not isinstance(results, list):
        return None
    return {
        "count": parse_int(get_path(raw, "minifigs.count")) or len(results),
        "items": [
            {
                "figNum": m.get("set_num"),
                "name": m.get("set_name"),
                "quantity": m.get("quantity"),
                "numParts": m.get("num_parts"),
                "imageUrl": m.get("set_img_url"),
            }
            for m in to_array(results)
            if isinstance(m, dict)
        ],
    }


def extract_details(raw: dict) -> dict[str, Any]:
    year = parse_int(raw.get("year"))
    return {
        "brand": "LEGO",
        "theme": theme_name(raw.get("theme_id")),
        "setNumber": set_number(raw),
        "pieceCount": parse_int(raw.get("num_parts")),
        "minifigCount": minifig_count(raw),
        "availability": "unknown",
        "releaseDate": f"{year}-01-01" if year else None,
        "parts": extract_parts(raw),
        "minifigs": extract_minifigs(raw),
        "rebrickable": {
            "setNum": raw.get("set_num"),
            "themeId": raw.get("theme_id"),
            "lastModified": raw.get("last_modified_dt"),
        },
    }


REBRICKABLE = ProviderNormalizer(
    source="rebrickable",
    type=ContentType.CONSTRUCT_TOY,
    domain=DOMAIN,
    extract_source_id=lambda raw: raw.get("set_num"),
    extract_title=extract_title,
    extract_details=extract_details,
    extract_description=extract_description,
    extract_year=lambda raw: raw.get("year"),
    extract_images=lambda raw: {
        "primary": raw.get("set_img_url"),
        "thumbnail": raw.get("set_img_url"),
        "gallery": [],
    },
    extract_source_url=lambda raw: raw.get("set_url"),
)
