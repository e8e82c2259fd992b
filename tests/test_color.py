"""
Unit tests for the color model: hex parsing, display mapping and validation.
"""

import pytest

from pixel_editor.models.color import (
    SENTINEL,
    TRANSPARENT,
    finish_pixel,
    parse_hex,
    to_color,
    to_display,
    to_hex,
)


class TestParseHex:
    """Tests for parse_hex function."""

    def test_parses_valid_hex(self):
        """Should decode each byte pair and set alpha to 100."""
        assert parse_hex("#336699") == (51, 102, 153, 100)

    def test_accepts_lowercase_digits(self):
        assert parse_hex("#ff00aa") == (255, 0, 170, 100)

    @pytest.mark.parametrize("text", ["bad", "#12345", "#1234567", "336699", "", "1336699"])
    def test_wrong_shape_falls_back_to_transparent(self, text):
        """Wrong length or missing '#' should yield (0, 0, 0, 0)."""
        assert parse_hex(text) == TRANSPARENT

    def test_non_hex_digits_fall_back_to_transparent(self):
        assert parse_hex("#GGHHII") == TRANSPARENT


class TestDisplayHelpers:
    """Tests for to_display and to_hex."""

    def test_alpha_becomes_fractional_opacity(self):
        assert to_display((10, 20, 30, 50)) == (10, 20, 30, 0.5)
        assert to_display(TRANSPARENT)[3] == 0.0

    def test_to_hex_ignores_alpha(self):
        assert to_hex((51, 102, 153, 7)) == "#336699"


class TestToColor:
    """Tests for to_color validation."""

    def test_accepts_list(self):
        assert to_color([1, 2, 3, 4]) == (1, 2, 3, 4)

    @pytest.mark.parametrize(
        "value",
        [[1, 2, 3], [1, 2, 3, 4, 5], [256, 0, 0, 100], [0, 0, 0, 101], [0, 0, -1, 0], [0.5, 0, 0, 0], [True, 0, 0, 0], "abcd", 7],
    )
    def test_rejects_invalid_values(self, value):
        with pytest.raises(ValueError):
            to_color(value)


class TestFinishPixel:
    """Tests for finish_pixel transform."""

    def test_sentinel_becomes_transparent(self):
        assert finish_pixel(SENTINEL) == TRANSPARENT

    def test_other_colors_unchanged(self):
        assert finish_pixel((100, 100, 100, 99)) == (100, 100, 100, 99)
        assert finish_pixel((0, 0, 0, 100)) == (0, 0, 0, 100)
