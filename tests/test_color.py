"""Tests for the color parser."""

import pytest

from process_flow.color.parser import ColorParser, format_triplet, parse_color


class TestFunctionalNotation:
    def test_rgb_comma_separated(self):
        assert parse_color("rgb(0,122,255)") == (0, 122, 255)
        assert parse_color("rgb(0, 122, 255)") == (0, 122, 255)

    def test_rgba_space_separated_with_slash_alpha(self):
        assert parse_color("rgba(0 122 255 / 80%)") == (0, 122, 255)

    def test_rgba_comma_alpha_is_ignored(self):
        assert parse_color("rgba(0, 255, 255, 0.5)") == (0, 255, 255)
        assert parse_color("rgba(255, 99, 71, 1)") == (255, 99, 71)

    def test_black(self):
        assert parse_color("rgb(0, 0, 0)") == (0, 0, 0)

    def test_no_range_clamping(self):
        assert parse_color("rgb(999,999,999)") == (999, 999, 999)

    def test_leading_zeros_parse_as_decimal(self):
        assert parse_color("rgb(010, 08, 009)") == (10, 8, 9)

    @pytest.mark.parametrize("value", [
        "rgb(0, 122)",
        "rgb(, 122, 255)",
        "rgb(-1, 0, 0)",
        "rgb(0.5, 1, 2)",
        "rgb(0, 122, 255",
        " rgb(0, 122, 255)",
        "rgb(0, 122, 255) ",
        "RGB(0, 122, 255)",
        "rgb(0, 122, 255, 0.5, 1)",
    ])
    def test_rejects_malformed(self, value):
        assert parse_color(value) is None


class TestHexNotation:
    def test_short_form_doubles_each_digit(self):
        assert parse_color("#f0f") == (255, 0, 255)
        assert parse_color("#0f0") == (0, 255, 0)
        assert parse_color("#123") == (0x11, 0x22, 0x33)

    def test_long_form(self):
        assert parse_color("#ff00ff") == (255, 0, 255)
        assert parse_color("#007aff") == (0, 122, 255)

    def test_case_insensitive(self):
        assert parse_color("#FFFFFF") == (255, 255, 255)
        assert parse_color("#F0f") == (255, 0, 255)

    def test_black_short_form(self):
        assert parse_color("#000") == (0, 0, 0)

    @pytest.mark.parametrize("value", [
        "#ff",
        "#ffff",
        "#fffff",
        "#fffffff",
        "#ggg",
        "ff00ff",
        "#ff00ff\n",
    ])
    def test_rejects_wrong_digit_counts(self, value):
        assert parse_color(value) is None


class TestUnparseable:
    def test_unknown_format(self):
        assert parse_color("not-a-color") is None

    def test_named_colors_not_supported(self):
        assert parse_color("red") is None

    def test_empty_and_non_string(self):
        assert parse_color("") is None
        assert parse_color(None) is None
        assert parse_color(123) is None


class TestColorParserRegistry:
    def test_custom_format_tried_after_builtins(self):
        parser = ColorParser()
        parser.register_format(lambda v: (255, 0, 0) if v == "red" else None)

        assert parser.parse("red") == (255, 0, 0)
        assert parser.parse("#0f0") == (0, 255, 0)
        assert parser.parse("blue") is None

    def test_registry_is_per_instance(self):
        parser = ColorParser()
        parser.register_format(lambda v: (1, 2, 3))
        assert parser.parse("anything") == (1, 2, 3)
        assert ColorParser().parse("anything") is None


class TestFormatTriplet:
    def test_default_separator(self):
        assert format_triplet((0, 122, 255)) == "0, 122, 255"

    def test_custom_separator(self):
        assert format_triplet((0, 122, 255), ",") == "0,122,255"
