"""Playmobil normalizer for products scraped from playmobil.com."""

from typing import Any, Optional

from cataloghub.domains.construction_toys.common import (
    DOMAIN,
    parse_age_range,
    prefixed_title,
    slugify,
)
from cataloghub.normalization.coercion import clean_string, parse_int, parse_number
from cataloghub.normalization.normalizer import ProviderNormalizer
from cataloghub.normalization.schema import ContentType


def normalize_price(price: Any, currency: Optional[str]) -> Optional[dict[str, Any]]:
    amount = parse_number(price)
    if amount is None:
        return None
    currency = clean_string(currency) or "EUR"
    return {"amount": amount, "currency": currency, "formatted": f"{amount:.2f} {currency}"}


def extract_source_id(raw: dict) -> Optional[str]:
    return clean_string(raw.get("id") or raw.get("productCode"))


def extract_title(raw: dict) -> Optional[str]:
    product_id = extract_source_id(raw)
    return prefixed_title(product_id, raw.get("name") or f"Playmobil {product_id}")


def extract_images(raw: dict) -> dict[str, Any]:
    gallery = [img for img in raw.get("images") or [] if isinstance(img, str)]
    primary = thumbnail = gallery[0] if gallery else None

    thumb = raw.get("thumb")
    if thumb:
        thumbnail = thumbnail or thumb
        primary = primary or thumb
        if thumb not in gallery:
            gallery.insert(0, thumb)

    for extra in (raw.get("baseImgUrl"), raw.get("src_image_url")):
        if not extra:
            continue
        primary = primary or extra
        if extra == raw.get("src_image_url"):
            thumbnail = thumbnail or extra
        if extra not in gallery:
            gallery.append(extra)

    return {"primary": primary, "thumbnail": thumbnail, "gallery": gallery}


def extract_details(raw: dict) -> dict[str, Any]:
    currency = raw.get("currency") or "EUR"
    price = parse_number(raw.get("price"))
    discount_price = parse_number(raw.get("discountPrice"))

    return {
        "brand": "Playmobil",
        "category": raw.get("category"),
        "theme": raw.get("theme"),
        "productCode": raw.get("productCode") or raw.get("id"),
        "slug": slugify(raw.get("name") or raw.get("id")),
        "price": normalize_price(price, currency),
        "listPrice": normalize_price(raw.get("listPrice"), currency),
        "discountPrice": normalize_price(discount_price, currency),
        "discount": raw.get("discount"),
        "onSale": bool(discount_price is not None and price is not None and discount_price < price),
        "pieceCount": parse_int(raw.get("pieceCount")),
        "ageRange": parse_age_range(raw.get("ageRange")),
        "availability": raw.get("availability") or "unknown",
        "canAddToBag": bool(raw.get("canAddToBag", True)),
        "inStock": bool(raw.get("inStock", True)),
        "instructions": raw.get("instructions"),
        "instructionsUrl": raw.get("instructionsUrl"),
        "attributes": raw.get("attributes"),
        "position": raw.get("position"),
    }


PLAYMOBIL = ProviderNormalizer(
    source="playmobil",
    type=ContentType.CONSTRUCT_TOY,
    domain=DOMAIN,
    extract_source_id=extract_source_id,
    extract_title=extract_title,
    extract_details=extract_details,
    extract_title_original=lambda raw: raw.get("name"),
    extract_description=lambda raw: raw.get("description"),
    extract_year=lambda raw: raw.get("year"),
    extract_images=extract_images,
    extract_source_url=lambda raw: raw.get("url") or raw.get("src_url"),
)
