"""Tests for placeholder masking and positional restoration."""

from translation_sync.providers.placeholders import PlaceholderManager


class TestPlaceholderManager:
    def test_extract_keeps_order_and_duplicates(self):
        text = "Hi :name, you have :count messages from :name"
        assert PlaceholderManager.extract_placeholders(text) == [
            ":name",
            ":count",
            ":name",
        ]

    def test_mask_uses_single_marker(self):
        masked, placeholders = PlaceholderManager.mask("Welcome :name to :site")
        assert masked == "Welcome [PH] to [PH]"
        assert placeholders == [":name", ":site"]

    def test_mask_without_placeholders_is_identity(self):
        assert PlaceholderManager.mask("Plain text") == ("Plain text", [])

    def test_restore_is_positional(self):
        # The backend moved the markers; the i-th marker gets the i-th placeholder.
        restored = PlaceholderManager.restore("[PH] bienvenido a [PH]", [":name", ":site"])
        assert restored == ":name bienvenido a :site"

    def test_restore_with_fewer_markers_drops_the_rest(self):
        restored = PlaceholderManager.restore("Hola [PH]", [":name", ":site"])
        assert restored == "Hola :name"

    def test_restore_with_extra_markers_leaves_them(self):
        restored = PlaceholderManager.restore("[PH] y [PH]", [":name"])
        assert restored == ":name y [PH]"

    def test_time_like_text_is_not_a_placeholder(self):
        assert PlaceholderManager.extract_placeholders("Opens at 10:30") == []

    def test_validate_placeholder_preservation(self):
        assert PlaceholderManager.validate_placeholder_preservation(
            "Hi :name", "Hola :name"
        )
        assert not PlaceholderManager.validate_placeholder_preservation(
            "Hi :name :site", "Hola :site :name"
        )
