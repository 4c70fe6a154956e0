"""LEGO.com normalizer.

Accepts both GraphQL product records (price and attributes nested under
``variant``) and scraped product pages (the same fields at the root).
Search results should go through ``filter_valid_products`` first to drop
tools, gift cards and other non-set listings.
"""

import re
from typing import Any, Optional

from cataloghub.domains.construction_toys.common import DOMAIN, parse_age_range
from cataloghub.normalization.coercion import clean_string, parse_int, parse_number
from cataloghub.normalization.normalizer import ProviderNormalizer
from cataloghub.normalization.schema import ContentType

AVAILABILITY_MAP = {
    # LEGO internal status codes
    "E_AVAILABLE": "available",
    "F_BACKORDER_FOR_DATE": "available",
    "C_OUT_OF_STOCK": "out_of_stock",
    "D_TEMPORARILY_SOLD_OUT": "out_of_stock",
    "AVAILABLE": "available",
    "OUT_OF_STOCK": "out_of_stock",
    "COMING_SOON": "coming_soon",
    "RETIRED": "retired",
    # Scraped French labels
    "Disponible": "available",
    "En stock": "available",
    "Rupture de stock": "out_of_stock",
    "Épuisé": "out_of_stock",
    "Temporairement en rupture": "out_of_stock",
    "Bientôt disponible": "coming_soon",
    "Prochainement": "coming_soon",
    "Retiré": "retired",
}

# Tools, services and promotional items returned by product search
EXCLUDED_PRODUCT_IDS = frozenset(
    {"40179", "40154", "40178", "40488", "501020", "5006290", "5006291"}
)
EXCLUDED_NAME_PATTERNS = (
    re.compile(r"mosaic maker", re.IGNORECASE),
    re.compile(r"gift card", re.IGNORECASE),
    re.compile(r"carte cadeau", re.IGNORECASE),
    re.compile(r"vip reward", re.IGNORECASE),
    re.compile(r"minifigure factory", re.IGNORECASE),
)

KNOWN_THEMES = (
    "Star Wars", "City", "Technic", "Creator", "Friends", "Ninjago", "Marvel", "DC",
    "Harry Potter", "Disney", "Architecture", "Speed Champions", "Ideas", "Icons",
    "Minecraft", "Jurassic", "Super Mario", "Sonic", "Botanical Collection", "Art",
)

_PRODUCT_ID = re.compile(r"(\d{4,6})")
_VALID_PRODUCT_ID = re.compile(r"^\d{4,6}$")
_TITLE_CLEANUPS = (
    re.compile(r"[®™]"),
    re.compile(
        r"\s*[-–]\s*(?:Jouet|Briques?)\s*de\s*construction\s*[-–]\s*\d+\s*ans?\s*et\s*\+",
        re.IGNORECASE,
    ),
    re.compile(r"\s*[-–]\s*\d+\s*ans?\s*et\s*\+", re.IGNORECASE),
    re.compile(r"\s*\(\d+\s*(?:Pieces?|Pcs?|pièces?)\)", re.IGNORECASE),
)
_PRICE_TEXT = re.compile(r"(\d+[.,]?\d*)")


# =============================================================================
# Product ids and titles
# =============================================================================


def clean_product_id(value: Any) -> Optional[str]:
    """Reduce a product code, slug or URL fragment to its 4-6 digit set number."""
    text = clean_string(value)
    if text is None:
        return None
    match = _PRODUCT_ID.search(text)
    return match.group(1) if match else text


def is_valid_product_id(value: Any) -> bool:
    text = clean_string(value)
    return bool(text and _VALID_PRODUCT_ID.match(text))


def clean_title(title: Any) -> str:
    """Strip trademark symbols, age suffixes and piece counts from a product name."""
    text = clean_string(title) or ""
    for pattern in _TITLE_CLEANUPS:
        text = pattern.sub("", text)
    return text.strip()


def is_excluded_product(product: dict) -> bool:
    if clean_product_id(product.get("productCode") or product.get("id")) in EXCLUDED_PRODUCT_IDS:
        return True
    name = product.get("name") or ""
    return any(pattern.search(name) for pattern in EXCLUDED_NAME_PATTERNS)


def filter_valid_products(products: list[Any]) -> list[dict]:
    """Keep products with a real set number that are not excluded listings."""
    return [
        product
        for product in products
        if isinstance(product, dict)
        and is_valid_product_id(clean_product_id(product.get("productCode") or product.get("id")))
        and not is_excluded_product(product)
    ]


# =============================================================================
# Extractors
# =============================================================================


def extract_source_id(raw: dict) -> Optional[str]:
    return clean_product_id(raw.get("productCode") or raw.get("id"))


def extract_title(raw: dict) -> Optional[str]:
    product_id = extract_source_id(raw)
    name = clean_title(raw.get("name") or raw.get("productName") or "Unknown Set")
    if product_id and not name.startswith(product_id):
        return f"{product_id} {name}"
    return name


def extract_images(raw: dict) -> dict[str, Any]:
    primary = raw.get("baseImgUrl") or raw.get("primaryImage") or raw.get("image")
    thumbnail = raw.get("primaryImage") or raw.get("thumb") or raw.get("image")
    gallery = []
    if isinstance(raw.get("images"), list):
        for img in raw["images"]:
            if isinstance(img, str):
                gallery.append(img)
            elif isinstance(img, dict) and img.get("url"):
                gallery.append(img["url"])
    if gallery:
        primary = primary or gallery[0]
        thumbnail = thumbnail or gallery[0]
    return {"primary": primary, "thumbnail": thumbnail, "gallery": gallery}


def extract_source_url(raw: dict) -> Optional[str]:
    if raw.get("url"):
        return raw["url"]
    slug = raw.get("slug") or extract_source_id(raw)
    return f"https://www.lego.com/fr-fr/product/{slug}" if slug else None


def extract_theme(raw: dict) -> Optional[str]:
    if raw.get("theme"):
        return raw["theme"]
    if raw.get("themes"):
        return raw["themes"][0]
    name = (raw.get("name") or "").lower()
    for theme in KNOWN_THEMES:
        if theme.lower() in name:
            return theme
    return None


def extract_price(price: Any) -> Optional[dict[str, Any]]:
    """Read a GraphQL price object (``centAmount`` or ``amount``)."""
    if not isinstance(price, dict):
        return None
    if price.get("centAmount") is not None:
        cents = parse_number(price["centAmount"])
        if cents is None:
            return None
        return {
            "amount": cents / 100,
            "currency": price.get("currencyCode") or "EUR",
            "formatted": price.get("formattedAmount"),
        }
    amount = parse_number(price.get("amount"))
    if amount is None:
        return None
    return {"amount": amount, "currency": price.get("currency") or "EUR", "formatted": None}


def extract_price_text(raw: dict) -> Optional[dict[str, Any]]:
    """Read a scraped price label such as "849,99 €"."""
    text = raw.get("price")
    if not isinstance(text, str):
        return None
    match = _PRICE_TEXT.search(text)
    if not match:
        return None
    return {
        "amount": float(match.group(1).replace(",", ".")),
        "currency": "EUR",
        "formatted": text.strip(),
    }


def map_availability(status: Any) -> str:
    text = clean_string(status)
    if text is None:
        return "unknown"
    return AVAILABILITY_MAP.get(text) or AVAILABILITY_MAP.get(text.upper()) or "unknown"


def extract_instructions(raw: dict) -> Optional[dict[str, Any]]:
    instructions = raw.get("instructions")
    if not isinstance(instructions, dict):
        return None
    manuals = [m for m in instructions.get("manuals") or [] if isinstance(m, dict)]
    return {
        "count": len(manuals),
        "manuals": [
            {
                "id": m.get("id"),
                "description": m.get("description"),
                "pdfUrl": m.get("pdfUrl"),
                "sequence": m.get("sequence"),
            }
            for m in manuals
        ],
        "url": instructions.get("url"),
    }


def extract_details(raw: dict) -> dict[str, Any]:
    variant = raw.get("variant") or {}
    attributes = variant.get("attributes") or {}
    product_id = extract_source_id(raw)
    rating = parse_number(raw.get("rating"))

    return {
        "brand": "LEGO",
        "theme": extract_theme(raw),
        "subtheme": raw.get("subtheme"),
        "category": raw.get("category"),
        "setNumber": product_id,
        "pieceCount": parse_int(attributes.get("pieceCount") or raw.get("pieceCount")),
        "minifigCount": parse_int(
            attributes.get("minifiguresCount") or raw.get("minifiguresCount") or raw.get("minifigCount")
        ),
        "ageRange": parse_age_range(attributes.get("ageRange") or raw.get("ageRange")),
        "price": extract_price(variant.get("price")) or extract_price_text(raw),
        "listPrice": extract_price(variant.get("listPrice")),
        "onSale": bool(attributes.get("onSale")),
        "salePercentage": parse_int(variant.get("salePercentage")),
        "availability": map_availability(attributes.get("availabilityStatus") or raw.get("availability")),
        "availabilityText": attributes.get("availabilityText") or raw.get("availabilityText"),
        "canAddToBag": attributes.get("canAddToBag"),
        "isNew": bool(attributes.get("isNew")),
        "releaseDate": raw.get("releaseDate"),
        "instructionsUrl": (
            f"https://www.lego.com/service/buildinginstructions/{product_id}" if product_id else None
        ),
        "instructions": extract_instructions(raw),
        "sku": variant.get("sku") or raw.get("sku"),
        "slug": raw.get("slug"),
        "rating": (
            {"average": rating, "count": parse_int(raw.get("reviewCount"))}
            if rating is not None
            else None
        ),
        "videos": raw.get("videos") if isinstance(raw.get("videos"), list) else [],
    }


LEGO = ProviderNormalizer(
    source="lego",
    type=ContentType.CONSTRUCT_TOY,
    domain=DOMAIN,
    extract_source_id=extract_source_id,
    extract_title=extract_title,
    extract_details=extract_details,
    extract_description=lambda raw: raw.get("description"),
    extract_year=lambda raw: raw.get("year"),
    extract_images=extract_images,
    extract_source_url=extract_source_url,
)
