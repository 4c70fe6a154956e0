"""Brickset normalizer.

Maps set records from the Brickset v3 API (getSets) to CanonicalItem.

Example payload:
    {
        "setID": 31754, "number": "75192", "numberVariant": 1,
        "name": "Millennium Falcon", "year": 2017, "theme": "Star Wars",
        "subtheme": "Ultimate Collector Series", "pieces": 7541, "minifigs": 8,
        "image": {"thumbnailURL": "...", "imageURL": "..."},
        "bricksetURL": "https://brickset.com/sets/75192-1",
        "LEGOCom": {"FR": {"retailPrice": 849.99}}
    }
"""

from typing import Any, Optional

from cataloghub.domains.construction_toys.common import DOMAIN, join_parts, min_max, money
from cataloghub.normalization.coercion import clean_string, get_path, parse_int, parse_number
from cataloghub.normalization.normalizer import ProviderNormalizer
from cataloghub.normalization.schema import ContentType

AVAILABILITY_MAP = {
    "Retail": "available",
    "Retired": "retired",
    "LEGO exclusive": "exclusive",
}


def extract_source_id(raw: dict) -> Optional[str]:
    if raw.get("setID"):
        return str(raw["setID"])
    number = clean_string(raw.get("number"))
    if number is None:
        return None
    return f"{number}-{raw.get('numberVariant') or 1}"


def extract_title(raw: dict) -> Optional[str]:
    number = clean_string(raw.get("number"))
    name = clean_string(raw.get("name")) or "Unknown Set"
    return f"{number} {name}" if number else name


def extract_description(raw: dict) -> Optional[str]:
    pieces = parse_int(raw.get("pieces"))
    minifigs = parse_int(raw.get("minifigs"))
    return join_parts(
        raw.get("theme"),
        raw.get("subtheme"),
        f"{pieces} pieces" if pieces else None,
        f"{minifigs} minifigs" if minifigs else None,
    )


def extract_images(raw: dict) -> dict[str, Any]:
    image = raw.get("image") or {}
    gallery = [
        img.get("imageURL") or img.get("thumbnailURL")
        for img in raw.get("additionalImages") or []
        if isinstance(img, dict)
    ]
    return {
        "primary": image.get("imageURL"),
        "thumbnail": image.get("thumbnailURL"),
        "gallery": gallery,
    }


def map_availability(raw: dict) -> str:
    if raw.get("released") is False:
        return "coming_soon"
    return AVAILABILITY_MAP.get(raw.get("availability"), "unknown")


def extract_details(raw: dict) -> dict[str, Any]:
    lego_com = raw.get("LEGOCom") or {}
    retail = lego_com.get("FR") or lego_com.get("US") or {}
    dimensions = raw.get("dimensions") or {}
    height, width, depth = (parse_number(dimensions.get(k)) for k in ("height", "width", "depth"))
    number = clean_string(raw.get("number"))

    if raw.get("dateFirstAvailable"):
        release_date = raw["dateFirstAvailable"]
    elif raw.get("year"):
        release_date = f"{raw['year']}-01-01"
    else:
        release_date = None

    rating = parse_number(raw.get("rating"))

    return {
        "brand": "LEGO",
        "theme": clean_string(raw.get("theme")),
        "subtheme": clean_string(raw.get("subtheme")),
        "category": clean_string(raw.get("category")),
        "setNumber": number,
        "pieceCount": parse_int(raw.get("pieces")),
        "minifigCount": parse_int(raw.get("minifigs")),
        "ageRange": min_max(get_path(raw, "ageRange.min"), get_path(raw, "ageRange.max")),
        "dimensions": (
            None
            if height is None and width is None and depth is None
            else {"height": height, "width": width, "depth": depth}
        ),
        "price": money(retail.get("retailPrice"), "EUR"),
        "availability": map_availability(raw),
        "releaseDate": release_date,
        "retirementDate": None,
        "instructionsUrl": (
            f"https://www.lego.com/service/buildinginstructions/{number}"
            if number and (parse_int(raw.get("instructionsCount")) or 0) > 0
            else None
        ),
        "barcodes": {
            "upc": clean_string(get_path(raw, "barcode.UPC")),
            "ean": clean_string(get_path(raw, "barcode.EAN")),
        },
        "rating": (
            {"average": rating, "count": parse_int(raw.get("reviewCount"))}
            if rating is not None
            else None
        ),
    }


BRICKSET = ProviderNormalizer(
    source="brickset",
    type=ContentType.CONSTRUCT_TOY,
    domain=DOMAIN,
    extract_source_id=extract_source_id,
    extract_title=extract_title,
    extract_details=extract_details,
    extract_description=extract_description,
    extract_year=lambda raw: raw.get("year"),
    extract_images=extract_images,
    extract_source_url=lambda raw: raw.get("bricksetURL"),
)
