"""Tests for player options."""

import pytest
from pydantic import ValidationError

from media_carousel.core.config import PlayerOptions
from media_carousel.core.errors import ConfigurationError


class TestPlayerOptions:
    def test_defaults(self):
        options = PlayerOptions()
        assert options.main_wrapper_class == "main-wrapper"
        assert options.image_wrapper_class == "image-wrapper"
        assert options.scroll_buttons_width == 50
        assert options.scroll_buttons_padding == 10
        assert options.image_stop_class == "no-image"
        assert options.style_file_path == "player.css"
        assert options.animation_duration_ms == 400

    def test_accepts_camel_case_names(self):
        options = PlayerOptions.from_mapping(
            {"mainWrapperClass": "viewer", "scrollButtonsWidth": 30}
        )
        assert options.main_wrapper_class == "viewer"
        assert options.scroll_buttons_width == 30

    def test_accepts_field_names(self):
        options = PlayerOptions.from_mapping({"image_stop_class": "skip"})
        assert options.image_stop_class == "skip"

    def test_falsy_values_fall_back_to_defaults(self):
        """An empty string or zero means "not given"."""
        options = PlayerOptions.from_mapping({"mainWrapperClass": "", "scrollButtonsWidth": 0})
        assert options.main_wrapper_class == "main-wrapper"
        assert options.scroll_buttons_width == 50

    def test_none_mapping_gives_defaults(self):
        assert PlayerOptions.from_mapping(None) == PlayerOptions()

    def test_unknown_keys_ignored(self):
        options = PlayerOptions.from_mapping({"colour": "red"})
        assert options == PlayerOptions()

    def test_invalid_value_raises_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            PlayerOptions.from_mapping({"scrollButtonsWidth": -5})
        assert isinstance(exc_info.value.original_error, ValidationError)

    def test_options_are_frozen(self):
        options = PlayerOptions()
        with pytest.raises(ValidationError):
            options.scroll_buttons_width = 10

    def test_edge_zone_width_follows_scroll_buttons_width(self):
        assert PlayerOptions(scroll_buttons_width=70).edge_zone_width == 70
