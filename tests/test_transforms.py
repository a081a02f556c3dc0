"""Tests for value transforms, color re-encoding and name resolution."""

import pytest

from conftest import make_token
from design_tokens.transforms.color import parse_channels, to_rgb_triple
from design_tokens.transforms.name import apply_name, resolve_name
from design_tokens.transforms.value import (
    COLOR_RGB,
    SIZE_PERCENT,
    SIZE_PX,
    apply_value_transforms,
    format_number,
)


# ===== Pixel / percent suffixing =====


class TestSizePx:
    @pytest.mark.parametrize("value,expected", [(4, "4px"), (1.5, "1.5px"), (-2, "-2px"), (8.0, "8px")])
    def test_suffixes_pixel_values(self, value, expected):
        token = make_token(["spacing", "x"], value, type="number", unit="pixel")

        assert SIZE_PX.matches(token)
        assert SIZE_PX.apply(token).value == expected

    def test_matches_dimension_type_without_unit(self):
        token = make_token(["size", "icon"], 24, type="dimension")

        assert SIZE_PX.matches(token)
        assert SIZE_PX.apply(token).value == "24px"

    def test_zero_is_left_bare(self, zero_spacing_token):
        assert not SIZE_PX.matches(zero_spacing_token)
        assert apply_value_transforms(zero_spacing_token, [SIZE_PX]).value == 0

    def test_ignores_unitless_numbers(self):
        token = make_token(["font", "weight"], 700, type="number")

        assert not SIZE_PX.matches(token)

    def test_does_not_mutate_source_token(self, spacing_token):
        transformed = SIZE_PX.apply(spacing_token)

        assert spacing_token.value == 16
        assert transformed.value == "16px"
        assert transformed.path == spacing_token.path
        assert transformed.original_value == 16


class TestSizePercent:
    def test_suffixes_percent_values(self, opacity_token):
        assert SIZE_PERCENT.matches(opacity_token)
        assert SIZE_PERCENT.apply(opacity_token).value == "40%"

    def test_zero_is_left_bare(self):
        token = make_token(["opacity", "none"], 0, type="number", unit="percent")

        assert not SIZE_PERCENT.matches(token)

    def test_ignores_pixel_units(self, spacing_token):
        assert not SIZE_PERCENT.matches(spacing_token)


class TestApplyValueTransforms:
    def test_first_match_wins(self):
        # A percent-unit dimension matches both; only the first listed applies.
        token = make_token(["size", "half"], 50, type="dimension", unit="percent")

        assert apply_value_transforms(token, [SIZE_PX, SIZE_PERCENT]).value == "50px"
        assert apply_value_transforms(token, [SIZE_PERCENT, SIZE_PX]).value == "50%"

    def test_unmatched_token_is_returned_unchanged(self):
        token = make_token(["font", "family"], "Inter", type="string")

        assert apply_value_transforms(token, [SIZE_PX, SIZE_PERCENT]) is token


class TestFormatNumber:
    def test_integral_float_drops_fraction(self):
        assert format_number(4.0) == "4"

    def test_other_values_render_as_is(self):
        assert format_number(1.25) == "1.25"
        assert format_number("#fff") == "#fff"

    def test_booleans_render_lowercase(self):
        assert format_number(True) == "true"


# ===== Color re-encoding =====


class TestColorRgb:
    def test_hex_decomposition(self):
        assert to_rgb_triple("#1a2b3c") == "26, 43, 60"

    def test_hex_is_case_insensitive(self):
        assert to_rgb_triple("#FFFFFF") == "255, 255, 255"

    def test_functional_rgb(self):
        assert to_rgb_triple("rgb(10, 20, 30)") == "10, 20, 30"

    @pytest.mark.parametrize("value", ["hsl(0,0%,0%)", "red", "rgba(1, 2, 3, 0.5)", "", None, 42])
    def test_unrecognized_input_falls_back_to_black(self, value):
        assert to_rgb_triple(value) == "0, 0, 0"

    def test_short_hex_is_not_validated(self):
        assert parse_channels("#12") == (0, 0, 18)

    def test_hex_with_alpha_shifts_channels(self):
        assert parse_channels("#1a2b3cff") == (43, 60, 255)

    def test_hex_without_digits_falls_back(self):
        assert parse_channels("#zzz") == (0, 0, 0)

    def test_transform_matches_color_tokens_only(self, primitive_color, spacing_token):
        assert COLOR_RGB.matches(primitive_color)
        assert not COLOR_RGB.matches(spacing_token)
        assert COLOR_RGB.apply(primitive_color).value == "26, 43, 60"


# ===== Name resolution =====


class TestResolveName:
    def test_strips_category_prefix(self, primitive_color):
        assert resolve_name(primitive_color) == "brand-primary"

    def test_strips_category_anywhere_in_path(self):
        token = make_token(["color", "brand", "Color", "primary"], "#fff", category="color")

        assert resolve_name(token) == "brand-primary"

    def test_category_match_is_case_insensitive(self):
        token = make_token(["Spacing", "Large"], 24, category="SPACING")

        assert resolve_name(token) == "large"

    def test_lowercases_and_joins_with_hyphens(self):
        token = make_token(["Typography", "Heading", "XL"], "32", category="font")

        assert resolve_name(token) == "typography-heading-xl"

    def test_falls_back_to_legacy_slash_name(self):
        token = make_token([], "#fff", category="color").with_name("color/Brand/accent")

        assert resolve_name(token) == "brand-accent"

    def test_no_category_keeps_every_segment(self):
        token = make_token(["color", "brand", "primary"], "#fff")

        assert resolve_name(token) == "color-brand-primary"

    def test_only_category_left_yields_empty_name(self):
        token = make_token(["color"], "#fff", category="color")

        assert resolve_name(token) == ""

    def test_malformed_token_yields_empty_name(self):
        token = make_token([], None)

        assert resolve_name(token) == ""

    def test_apply_name_keeps_path(self, primitive_color):
        named = apply_name(primitive_color)

        assert named.name == "brand-primary"
        assert named.path == ("color", "brand", "primary")
        assert primitive_color.name == "color/brand/primary"
