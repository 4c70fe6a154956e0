"""
Pytest Configuration and Shared Fixtures.

This module provides common fixtures for all tests:

- log_events: structlog events captured during the test
- settings: Settings isolated from the environment and .env
- scenario_provider: minimal ProviderNormalizer reading flat payloads
- <provider>_payload: sample raw records shaped like each upstream API
"""

import pytest
import structlog
from structlog.testing import capture_logs

from cataloghub.config.settings import Settings, get_settings
from cataloghub.normalization import ContentType, Normalizer, ProviderNormalizer


@pytest.fixture
def log_events():
    """Capture structlog events emitted during the test."""
    with capture_logs() as events:
        yield events


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Default settings, ignoring the process environment."""
    for name in ("APP_ENV", "DEBUG", "LOG_LEVEL", "LOG_FORMAT", "RAW_LOG_LIMIT", "DEFAULT_LANG", "API_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()


# =============================================================================
# Generic provider
# =============================================================================


@pytest.fixture
def scenario_provider() -> ProviderNormalizer:
    """Provider reading ``sourceId``/``title``/``year`` straight from the payload."""
    return ProviderNormalizer(
        source="testsrc",
        type=ContentType.CONSTRUCT_TOY,
        domain="construction-toys",
        extract_source_id=lambda raw: raw.get("sourceId"),
        extract_title=lambda raw: raw.get("title"),
        extract_details=lambda raw: raw.get("details", {"brand": "LEGO"}),
        extract_description=lambda raw: raw.get("description"),
        extract_year=lambda raw: raw.get("year"),
        extract_images=lambda raw: raw.get("images"),
        extract_source_url=lambda raw: raw.get("url"),
    )


@pytest.fixture
def scenario_normalizer(scenario_provider) -> Normalizer:
    return Normalizer(scenario_provider)


# =============================================================================
# Construction toys
# =============================================================================


@pytest.fixture
def brickset_payload() -> dict:
    """Brickset getSets record."""
    return {
        "setID": 31754,
        "number": "75192",
        "numberVariant": 1,
        "name": "Millennium Falcon",
        "year": 2017,
        "theme": "Star Wars",
        "themeGroup": "Licensed",
        "subtheme": "Ultimate Collector Series",
        "category": "Normal",
        "released": True,
        "availability": "Retired",
        "pieces": 7541,
        "minifigs": 8,
        "image": {
            "thumbnailURL": "https://images.brickset.com/sets/small/75192-1.jpg",
            "imageURL": "https://images.brickset.com/sets/images/75192-1.jpg",
        },
        "bricksetURL": "https://brickset.com/sets/75192-1",
        "LEGOCom": {"FR": {"retailPrice": 849.99}},
        "ageRange": {"min": 16},
        "dimensions": {"height": 48.0, "width": 58.0, "depth": 19.0},
        "barcode": {"EAN": "5702015869935"},
        "instructionsCount": 2,
        "rating": 4.4,
        "reviewCount": 12,
    }


@pytest.fixture
def rebrickable_payload() -> dict:
    """Rebrickable set enriched with parts and minifigs inventories."""
    return {
        "set_num": "75192-1",
        "name": "Millennium Falcon",
        "year": 2017,
        "theme_id": 158,
        "num_parts": 7541,
        "set_img_url": "https://cdn.rebrickable.com/media/sets/75192-1/12345.jpg",
        "set_url": "https://rebrickable.com/sets/75192-1/millennium-falcon/",
        "last_modified_dt": "2024-01-15T12:00:00Z",
        "parts": {
            "count": 2,
            "results": [
                {
                    "part": {"part_num": "3001", "name": "Brick 2 x 4", "part_cat_id": 11},
                    "color": {"name": "Light Bluish Gray", "rgb": "A0A5A9"},
                    "quantity": 12,
                    "is_spare": False,
                    "element_id": "4211387",
                },
                {
                    "part": {"part_num": "3023", "name": "Plate 1 x 2"},
                    "color": {"name": "Black", "rgb": "05131D"},
                    "quantity": 1,
                    "is_spare": True,
                },
            ],
        },
        "minifigs": {
            "count": 2,
            "results": [
                {"set_num": "fig-000001", "set_name": "Han Solo", "quantity": 1, "num_parts": 4},
                {"set_num": "fig-000002", "set_name": "Chewbacca", "quantity": 1, "num_parts": 3},
            ],
        },
    }


@pytest.fixture
def lego_payload() -> dict:
    """LEGO.com GraphQL product."""
    return {
        "id": "75192-product",
        "productCode": "75192",
        "name": "Millennium Falcon™",
        "slug": "millennium-falcon-75192",
        "primaryImage": "https://www.lego.com/cdn/cs/set/assets/75192.png",
        "variant": {
            "sku": "6175771",
            "price": {"centAmount": 84999, "currencyCode": "EUR", "formattedAmount": "849,99 €"},
            "attributes": {
                "pieceCount": 7541,
                "ageRange": "18+",
                "availabilityStatus": "E_AVAILABLE",
                "onSale": False,
            },
        },
    }


@pytest.fixture
def playmobil_payload() -> dict:
    """Product scraped from playmobil.com."""
    return {
        "id": "71148",
        "name": "Château des Chevaliers",
        "price": "149.99",
        "discountPrice": "119.99",
        "currency": "EUR",
        "ageRange": "4-10",
        "pieceCount": "474",
        "images": [
            "https://media.playmobil.com/i/playmobil/71148_product_detail",
            "https://media.playmobil.com/i/playmobil/71148_product_box_front",
        ],
        "url": "https://www.playmobil.fr/chateau-des-chevaliers/71148.html",
        "availability": "available",
    }


# =============================================================================
# Books
# =============================================================================


@pytest.fixture
def googlebooks_payload() -> dict:
    """Google Books volume resource."""
    return {
        "kind": "books#volume",
        "id": "zyTCAlFPjgYC",
        "volumeInfo": {
            "title": "The Google Story",
            "subtitle": "Inside the Hottest Business",
            "authors": ["David A. Vise", "Mark Malseed"],
            "publisher": "Random House Publishing Group",
            "publishedDate": "2005-11-15",
            "description": "Here is the story behind one of the most remarkable companies.",
            "industryIdentifiers": [
                {"type": "ISBN_10", "identifier": "055380457X"},
                {"type": "ISBN_13", "identifier": "9780553804577"},
            ],
            "pageCount": 207,
            "printType": "BOOK",
            "categories": ["Business & Economics"],
            "averageRating": 3.5,
            "ratingsCount": 136,
            "language": "en",
            "imageLinks": {
                "smallThumbnail": "http://books.google.com/books/content?id=zyTCAlFPjgYC&zoom=5&edge=curl",
                "thumbnail": "http://books.google.com/books/content?id=zyTCAlFPjgYC&zoom=1&edge=curl",
            },
            "infoLink": "https://books.google.com/books?id=zyTCAlFPjgYC",
            "canonicalVolumeLink": "https://books.google.com/books/about/The_Google_Story.html?id=zyTCAlFPjgYC",
        },
        "saleInfo": {"isEbook": False},
    }


@pytest.fixture
def openlibrary_payload() -> dict:
    """Open Library search document."""
    return {
        "key": "/works/OL27448W",
        "title": "The Lord of the Rings",
        "author_name": ["J.R.R. Tolkien"],
        "first_publish_year": 1954,
        "cover_i": 9255566,
        "isbn": ["0-618-64561-5", "9780618645619"],
        "publisher": ["Houghton Mifflin", "Allen & Unwin"],
        "language": ["eng", "fre"],
        "subject": ["Fantasy fiction", "Middle Earth (Imaginary place)"],
        "number_of_pages_median": 1193,
        "edition_count": 120,
    }


# =============================================================================
# Anime / manga
# =============================================================================


@pytest.fixture
def jikan_anime_payload() -> dict:
    """Jikan v4 anime record."""
    return {
        "mal_id": 5114,
        "url": "https://myanimelist.net/anime/5114/Fullmetal_Alchemist__Brotherhood",
        "images": {
            "jpg": {
                "image_url": "https://cdn.myanimelist.net/images/anime/1223/96541.jpg",
                "small_image_url": "https://cdn.myanimelist.net/images/anime/1223/96541t.jpg",
                "large_image_url": "https://cdn.myanimelist.net/images/anime/1223/96541l.jpg",
            },
        },
        "trailer": {"url": "https://www.youtube.com/watch?v=--IcmZkvL0Q"},
        "title": "Fullmetal Alchemist: Brotherhood",
        "title_english": "Fullmetal Alchemist: Brotherhood",
        "title_japanese": "鋼の錬金術師 FULLMETAL ALCHEMIST",
        "type": "TV",
        "source": "Manga",
        "episodes": 64,
        "status": "Finished Airing",
        "aired": {"from": "2009-04-05T00:00:00+00:00", "to": "2010-07-04T00:00:00+00:00"},
        "duration": "24 min per ep",
        "rating": "R - 17+ (violence & profanity)",
        "score": 9.1,
        "scored_by": 2000000,
        "rank": 1,
        "popularity": 3,
        "season": "spring",
        "year": 2009,
        "studios": [{"mal_id": 4, "name": "Bones"}],
        "genres": [{"mal_id": 1, "name": "Action"}, {"mal_id": 2, "name": "Adventure"}],
        "themes": [{"mal_id": 38, "name": "Military"}],
        "demographics": [{"mal_id": 27, "name": "Shounen"}],
        "synopsis": "After a horrific alchemy experiment goes wrong...",
    }


@pytest.fixture
def jikan_manga_payload() -> dict:
    """Jikan v4 manga record."""
    return {
        "mal_id": 2,
        "url": "https://myanimelist.net/manga/2/Berserk",
        "images": {"jpg": {"image_url": "https://cdn.myanimelist.net/images/manga/1/157897.jpg"}},
        "title": "Berserk",
        "title_japanese": "ベルセルク",
        "type": "Manga",
        "chapters": None,
        "volumes": None,
        "status": "Publishing",
        "published": {"from": "1989-08-25T00:00:00+00:00", "to": None},
        "score": 9.47,
        "scored_by": 350000,
        "authors": [{"mal_id": 1868, "name": "Miura, Kentarou"}],
        "serializations": [{"mal_id": 2, "name": "Young Animal"}],
        "genres": [{"mal_id": 1, "name": "Action"}],
        "demographics": [{"mal_id": 41, "name": "Seinen"}],
        "synopsis": "Guts, a former mercenary now known as the Black Swordsman...",
    }


# =============================================================================
# Music
# =============================================================================


@pytest.fixture
def deezer_payload() -> dict:
    """Deezer /album/{id} record."""
    return {
        "id": 302127,
        "title": "Discovery",
        "upc": "724384960650",
        "link": "https://www.deezer.com/album/302127",
        "cover": "https://api.deezer.com/album/302127/image",
        "cover_medium": "https://e-cdns-images.dzcdn.net/images/cover/2e018122cb56986277102d2041a592c8/250x250-000000-80-0-0.jpg",
        "cover_xl": "https://e-cdns-images.dzcdn.net/images/cover/2e018122cb56986277102d2041a592c8/1000x1000-000000-80-0-0.jpg",
        "genres": {"data": [{"id": 113, "name": "Dance"}]},
        "label": "Parlophone (France)",
        "nb_tracks": 2,
        "duration": 608,
        "release_date": "2001-03-07",
        "record_type": "album",
        "explicit_lyrics": False,
        "artist": {"id": 27, "name": "Daft Punk"},
        "tracks": {
            "data": [
                {"id": 3135553, "title": "One More Time", "duration": 320},
                {"id": 3135554, "title": "Aerodynamic", "duration": 288},
            ]
        },
    }


# =============================================================================
# Sticker albums
# =============================================================================


@pytest.fixture
def paninimania_payload() -> dict:
    """Album detail scraped from paninimania.com."""
    return {
        "id": "7523",
        "title": {"text": "Coupe du Monde 2022", "lang": "fr"},
        "url": "https://www.paninimania.com/?pag=cid508_alb&idf=15&idm=7523",
        "description": "Album officiel de la Coupe du Monde FIFA Qatar 2022",
        "mainImage": "https://www.paninimania.com/files/15/7523/album.jpg",
        "editor": "Panini",
        "copyright": "2022",
        "releaseDate": "2022-10-20",
        "checklist": {"raw": "1 à 670", "total": 670, "items": [1, 2, 3]},
        "specialStickers": [
            {"name": {"text": "Stickers extra"}, "raw": "80 stickers", "total": 80, "list": ["E1", "E2"]}
        ],
        "categories": [{"text": "Football"}, "Sport"],
    }
