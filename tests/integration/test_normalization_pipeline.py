"""Integration tests for the normalization pipeline.

Tests the flow: raw provider payload -> catalog lookup -> Normalizer ->
details validation -> response envelope, for every bundled provider.
"""

import json

import pytest

from cataloghub.core.exceptions import MissingFieldError, ProviderNotFoundError
from cataloghub.normalization import (
    NormalizeOptions,
    build_default_catalog,
    build_error_response,
    normalize_detail_response,
    normalize_search_response,
)
from cataloghub.domains.construction_toys import filter_valid_products

ENVELOPE_KEYS = {
    "id", "type", "source", "sourceId", "title", "titleOriginal",
    "description", "year", "images", "urls", "details",
}

PROVIDER_PAYLOADS = [
    ("brickset", "brickset_payload", "construct_toy"),
    ("rebrickable", "rebrickable_payload", "construct_toy"),
    ("lego", "lego_payload", "construct_toy"),
    ("playmobil", "playmobil_payload", "construct_toy"),
    ("googlebooks", "googlebooks_payload", "book"),
    ("openlibrary", "openlibrary_payload", "book"),
    ("jikan", "jikan_anime_payload", "anime"),
    ("jikan_manga", "jikan_manga_payload", "manga"),
    ("deezer", "deezer_payload", "music"),
    ("paninimania", "paninimania_payload", "sticker_album"),
]


class TestEveryProvider:
    """Run each provider's sample payload through the full pipeline."""

    @pytest.mark.parametrize("source, fixture, content_type", PROVIDER_PAYLOADS)
    def test_detail_envelope(self, request, log_events, source, fixture, content_type):
        raw = request.getfixturevalue(fixture)
        normalizer = build_default_catalog().get(source)

        response = normalize_detail_response(normalizer, raw, {"lang": "fr"})

        assert response["success"] is True
        assert response["provider"] == source
        assert response["id"].startswith(f"{source}:")
        data = response["data"]
        assert set(data) == ENVELOPE_KEYS
        assert data["type"] == content_type
        assert data["title"]
        assert data["urls"]["detail"].startswith("/api/")
        assert response["meta"]["lang"] == "fr"
        assert not [e for e in log_events if e["event"] == "details_validation_failed"]

    @pytest.mark.parametrize("source, fixture, content_type", PROVIDER_PAYLOADS)
    def test_envelope_is_json_serializable(self, request, source, fixture, content_type):
        raw = request.getfixturevalue(fixture)
        normalizer = build_default_catalog().get(source)

        response = normalize_search_response(normalizer, [raw], {"query": "q"})

        assert json.loads(json.dumps(response)) == response
        assert response["count"] == 1

    @pytest.mark.parametrize("source, fixture, content_type", PROVIDER_PAYLOADS)
    def test_normalization_is_deterministic(self, request, source, fixture, content_type):
        raw = request.getfixturevalue(fixture)
        normalizer = build_default_catalog().get(source)

        assert normalizer.normalize(raw).to_dict() == normalizer.normalize(raw).to_dict()


class TestSearchWorkflow:
    """Test a realistic search flow with partial failures."""

    def test_mixed_batch(self, brickset_payload, log_events):
        normalizer = build_default_catalog().get("brickset")
        raw_items = [brickset_payload, {"name": "no id"}, {**brickset_payload, "setID": 1}]

        response = normalize_search_response(
            normalizer,
            raw_items,
            {"query": "falcon", "total": 57, "pagination": {"page": 1, "pageSize": 3, "totalResults": 57}},
        )

        assert response["count"] == 2
        assert response["total"] == 57
        assert response["meta"]["errors"] == 1
        assert response["pagination"]["totalResults"] == 57
        assert [e["event"] for e in log_events].count("batch_normalization_partial") == 1

    def test_lego_search_filters_listings_first(self, lego_payload):
        normalizer = build_default_catalog().get("lego")
        products = [lego_payload, {"productCode": "40179", "name": "Mosaic Maker"}]

        response = normalize_search_response(normalizer, filter_valid_products(products))

        assert [item["sourceId"] for item in response["data"]] == ["75192"]

    def test_debug_payloads(self, deezer_payload):
        normalizer = build_default_catalog().get("deezer")

        response = normalize_search_response(
            normalizer, [deezer_payload], options=NormalizeOptions(include_raw=True)
        )

        assert response["data"][0]["_raw"] == deezer_payload


class TestFailureWorkflow:
    """Test failures rendered through the shared error body."""

    def test_unknown_provider(self):
        with pytest.raises(ProviderNotFoundError) as exc_info:
            build_default_catalog().get("discogs")

        body = build_error_response(exc_info.value)
        assert body["code"] == "NOT_FOUND"

    def test_detail_without_title(self):
        normalizer = build_default_catalog().get("deezer")

        with pytest.raises(MissingFieldError) as exc_info:
            normalize_detail_response(normalizer, {"id": 1})

        body = build_error_response(exc_info.value)
        assert body["error"] == "MissingFieldError"
        assert body["details"] == {"field": "title"}
