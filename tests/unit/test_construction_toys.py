"""Unit tests for construction toy normalizers."""

import pytest

from cataloghub.domains.construction_toys import BRICKSET, LEGO, PLAYMOBIL, REBRICKABLE
from cataloghub.domains.construction_toys.common import (
    join_parts,
    min_max,
    money,
    parse_age_range,
    prefixed_title,
    slugify,
)
from cataloghub.domains.construction_toys.lego import (
    clean_product_id,
    clean_title,
    extract_price,
    extract_price_text,
    filter_valid_products,
    map_availability,
)
from cataloghub.normalization.normalizer import Normalizer


def events_named(log_events, name):
    return [event for event in log_events if event["event"] == name]


class TestCommonHelpers:
    """Test helpers shared by toy providers."""

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("18+", {"min": 18, "max": None}),
            ("6-12", {"min": 6, "max": 12}),
            ("4 ans et +", {"min": 4, "max": None}),
            ("all ages", None),
            (None, None),
        ],
    )
    def test_parse_age_range(self, label, expected):
        assert parse_age_range(label) == expected

    def test_min_max(self):
        assert min_max(16, None) == {"min": 16, "max": None}
        assert min_max(None, None) is None

    def test_money(self):
        assert money("849.99") == {"amount": 849.99, "currency": "EUR"}
        assert money(10, "USD") == {"amount": 10, "currency": "USD"}
        assert money("n/a") is None

    def test_slugify(self):
        assert slugify("Château des Chevaliers") == "chateau-des-chevaliers"
        assert slugify("  ") is None

    def test_prefixed_title(self):
        assert prefixed_title("71148", "Castle") == "71148 Castle"
        assert prefixed_title("71148", "71148 Castle") == "71148 Castle"
        assert prefixed_title(None, "Castle") == "Castle"

    def test_join_parts(self):
        assert join_parts("Star Wars", None, " ", "7541 pieces") == "Star Wars • 7541 pieces"
        assert join_parts(None) is None


class TestBrickset:
    """Test the Brickset normalizer."""

    def test_envelope(self, brickset_payload):
        item = Normalizer(BRICKSET).normalize(brickset_payload)

        assert item.id == "brickset:31754"
        assert item.title == "75192 Millennium Falcon"
        assert item.year == 2017
        assert item.description == "Star Wars • Ultimate Collector Series • 7541 pieces • 8 minifigs"
        assert item.images.primary == "https://images.brickset.com/sets/images/75192-1.jpg"
        assert item.images.thumbnail == "https://images.brickset.com/sets/small/75192-1.jpg"
        assert item.urls.source == "https://brickset.com/sets/75192-1"
        assert item.urls.detail == "/api/construction-toys/brickset/31754"

    def test_details(self, brickset_payload, log_events):
        details = Normalizer(BRICKSET).normalize(brickset_payload).details

        assert details["brand"] == "LEGO"
        assert details["setNumber"] == "75192"
        assert details["pieceCount"] == 7541
        assert details["ageRange"] == {"min": 16, "max": None}
        assert details["price"] == {"amount": 849.99, "currency": "EUR"}
        assert details["availability"] == "retired"
        assert details["releaseDate"] == "2017-01-01"
        assert details["instructionsUrl"] == "https://www.lego.com/service/buildinginstructions/75192"
        assert details["barcodes"] == {"upc": None, "ean": "5702015869935"}
        assert details["rating"] == {"average": 4.4, "count": 12}
        assert details["dimensions"] == {"height": 48.0, "width": 58.0, "depth": 19.0}
        assert not events_named(log_events, "details_validation_failed")

    def test_fallback_id_and_title(self):
        item = Normalizer(BRICKSET).normalize({"number": "10497", "numberVariant": 2})

        assert item.source_id == "10497-2"
        assert item.title == "10497 Unknown Set"

    def test_unreleased_is_coming_soon(self, brickset_payload):
        brickset_payload["released"] = False

        details = Normalizer(BRICKSET).normalize(brickset_payload).details

        assert details["availability"] == "coming_soon"


class TestRebrickable:
    """Test the Rebrickable normalizer."""

    def test_envelope(self, rebrickable_payload):
        item = Normalizer(REBRICKABLE).normalize(rebrickable_payload)

        assert item.id == "rebrickable:75192-1"
        assert item.title == "75192 Millennium Falcon"
        assert item.description == "Star Wars • 7541 pieces • 2 minifigs"
        assert item.images.primary == item.images.thumbnail

    def test_inventories(self, rebrickable_payload):
        details = Normalizer(REBRICKABLE).normalize(rebrickable_payload).details

        assert details["theme"] == "Star Wars"
        assert details["setNumber"] == "75192"
        assert details["minifigCount"] == 2
        assert details["parts"]["uniqueCount"] == 2
        assert details["parts"]["spareCount"] == 1
        assert details["parts"]["items"][0]["colorRgb"] == "#A0A5A9"
        assert details["minifigs"]["items"][1]["name"] == "Chewbacca"
        assert details["rebrickable"]["themeId"] == 158

    def test_without_inventories(self):
        item = Normalizer(REBRICKABLE).normalize(
            {"set_num": "60000-1", "name": "Fire Motorcycle", "theme_id": 999, "num_minifigs": 1}
        )

        assert item.details["parts"] is None
        assert item.details["theme"] is None
        assert item.description == "1 minifig"


class TestLego:
    """Test the LEGO.com normalizer."""

    def test_envelope(self, lego_payload):
        item = Normalizer(LEGO).normalize(lego_payload)

        assert item.id == "lego:75192"
        assert item.title == "75192 Millennium Falcon"
        assert item.urls.source == "https://www.lego.com/fr-fr/product/millennium-falcon-75192"

    def test_details(self, lego_payload):
        details = Normalizer(LEGO).normalize(lego_payload).details

        assert details["price"] == {"amount": 849.99, "currency": "EUR", "formatted": "849,99 €"}
        assert details["ageRange"] == {"min": 18, "max": None}
        assert details["availability"] == "available"
        assert details["theme"] is None
        assert details["sku"] == "6175771"
        assert details["pieceCount"] == 7541

    def test_scraped_page(self):
        raw = {
            "id": "lego-42115",
            "name": "Lamborghini Sián FKP 37 - Jouet de construction - 18 ans et +",
            "price": "449,99 €",
            "availability": "Rupture de stock",
            "images": [{"url": "https://www.lego.com/cdn/42115.png"}],
        }

        item = Normalizer(LEGO).normalize(raw)

        assert item.source_id == "42115"
        assert item.title == "42115 Lamborghini Sián FKP 37"
        assert item.images.primary == "https://www.lego.com/cdn/42115.png"
        assert item.details["price"]["amount"] == 449.99
        assert item.details["availability"] == "out_of_stock"

    def test_helpers(self):
        assert clean_product_id("millennium-falcon-75192") == "75192"
        assert clean_title("Millennium Falcon™ (7541 pièces)") == "Millennium Falcon"
        assert extract_price({"amount": "12.5"}) == {"amount": 12.5, "currency": "EUR", "formatted": None}
        assert extract_price("12") is None
        assert extract_price_text({"price": "free"}) is None
        assert map_availability("e_available") == "available"
        assert map_availability("whatever") == "unknown"

    def test_filter_valid_products(self):
        products = [
            {"productCode": "75192", "name": "Millennium Falcon"},
            {"productCode": "40179", "name": "Mosaic Maker"},
            {"productCode": "5007000", "name": "Gift Card"},
            {"productCode": "75300", "name": "LEGO Gift Card"},
            {"productCode": "abc", "name": "Bag"},
            "not a product",
        ]

        assert [p["productCode"] for p in filter_valid_products(products)] == ["75192"]


class TestPlaymobil:
    """Test the Playmobil normalizer."""

    def test_envelope(self, playmobil_payload):
        item = Normalizer(PLAYMOBIL).normalize(playmobil_payload)

        assert item.id == "playmobil:71148"
        assert item.title == "71148 Château des Chevaliers"
        assert item.title_original == "Château des Chevaliers"
        assert item.images.primary == "https://media.playmobil.com/i/playmobil/71148_product_detail"
        assert len(item.images.gallery) == 2

    def test_details(self, playmobil_payload):
        details = Normalizer(PLAYMOBIL).normalize(playmobil_payload).details

        assert details["brand"] == "Playmobil"
        assert details["slug"] == "chateau-des-chevaliers"
        assert details["price"] == {"amount": 149.99, "currency": "EUR", "formatted": "149.99 EUR"}
        assert details["discountPrice"]["amount"] == 119.99
        assert details["onSale"] is True
        assert details["pieceCount"] == 474
        assert details["ageRange"] == {"min": 4, "max": 10}
        assert details["availability"] == "available"

    def test_thumbnail_only(self):
        item = Normalizer(PLAYMOBIL).normalize(
            {"id": "70000", "thumb": "https://media.playmobil.com/70000.jpg"}
        )

        assert item.title == "70000 Playmobil 70000"
        assert item.images.primary == "https://media.playmobil.com/70000.jpg"
        assert item.images.gallery == ["https://media.playmobil.com/70000.jpg"]
