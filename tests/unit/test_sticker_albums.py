"""Unit tests for the Paninimania normalizer."""

from cataloghub.domains.sticker_albums import PANINIMANIA
from cataloghub.domains.sticker_albums.paninimania import extract_text
from cataloghub.normalization.normalizer import Normalizer


class TestPaninimania:
    """Test sticker album normalization."""

    def test_envelope(self, paninimania_payload):
        item = Normalizer(PANINIMANIA).normalize(paninimania_payload)

        assert item.id == "paninimania:7523"
        assert item.type == "sticker_album"
        assert item.title == "Coupe du Monde 2022"
        assert item.year == 2022
        assert item.images.primary == "https://www.paninimania.com/files/15/7523/album.jpg"
        assert item.images.thumbnail == item.images.primary
        assert item.urls.detail == "/api/sticker-albums/paninimania/7523"

    def test_details_pass_through(self, paninimania_payload):
        details = Normalizer(PANINIMANIA).normalize(paninimania_payload).details

        assert details["editor"] == "Panini"
        assert details["checklist"] == {
            "raw": "1 à 670",
            "total": 670,
            "items": [1, 2, 3],
            "totalWithSpecials": 670,
        }
        assert details["specialStickers"] == [
            {"name": "Stickers extra", "raw": "80 stickers", "total": 80, "list": ["E1", "E2"]}
        ]
        assert details["categories"] == ["Football", "Sport"]
        assert details["articles"] is None
        assert details["additionalImages"] is None

    def test_unregistered_type_is_logged(self, paninimania_payload, log_events):
        normalizer = Normalizer(PANINIMANIA)
        normalizer.normalize(paninimania_payload)

        assert normalizer.details_schema is None
        missing = [e for e in log_events if e["event"] == "details_schema_missing"]
        assert missing[0]["type"] == "sticker_album"

    def test_extract_text(self):
        assert extract_text({"text": " Album ", "lang": "fr"}) == "Album"
        assert extract_text("Album") == "Album"
        assert extract_text({"lang": "fr"}) is None
