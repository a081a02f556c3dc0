"""Tests for the capability registry."""

import pytest

from conftest import make_token
from design_tokens.exceptions import (
    UnknownFilterError,
    UnknownFormatError,
    UnknownTransformError,
    UnknownTransformGroupError,
)
from design_tokens.filters import is_valid_token
from design_tokens.registry import Registry, default_registry
from design_tokens.transforms.name import resolve_name
from design_tokens.transforms.value import SIZE_PERCENT, SIZE_PX


class TestDefaultRegistry:
    def test_registers_stable_keys(self):
        registry = default_registry()

        assert set(registry.value_transforms) == {"size/px", "size/percent", "color/rgb"}
        assert set(registry.name_transforms) == {"name/cti/kebab"}
        assert set(registry.filters) == {"validToken"}
        assert set(registry.formats) == {
            "scss/variables",
            "less/variables",
            "css/variables",
            "json/flat",
        }

    def test_instances_are_independent(self):
        first = default_registry()
        second = default_registry()

        first.register_format("ios/colors.h", lambda tokens: "")

        assert "ios/colors.h" in first.formats
        assert "ios/colors.h" not in second.formats

    def test_custom_css_group(self):
        registry = default_registry()

        transforms = registry.resolve_transforms(registry.get_transform_group("custom/css"))

        assert transforms.name_transform is resolve_name
        assert transforms.value_transforms == (SIZE_PX, SIZE_PERCENT)


class TestLookups:
    def test_unknown_format(self):
        with pytest.raises(UnknownFormatError, match="android/resources"):
            default_registry().get_format("android/resources")

    def test_unknown_filter(self):
        with pytest.raises(UnknownFilterError):
            default_registry().get_filter("isColor")

    def test_unknown_transform_group(self):
        with pytest.raises(UnknownTransformGroupError):
            default_registry().get_transform_group("ios-swift")

    def test_unknown_transform(self):
        with pytest.raises(UnknownTransformError) as exc_info:
            default_registry().resolve_transforms(["size/px", "size/rem"])

        assert exc_info.value.context == {"transform": "size/rem"}

    def test_filter_by_key(self):
        assert default_registry().get_filter("validToken") is is_valid_token

    def test_filter_from_mapping(self, primitive_color, spacing_token):
        token_filter = default_registry().get_filter({"type": "color"})

        assert token_filter(primitive_color)
        assert not token_filter(spacing_token)

    def test_no_filter(self):
        assert default_registry().get_filter(None) is None

    def test_format_is_callable(self):
        css = default_registry().get_format("css/variables")

        token = make_token(["space"], "4px").with_name("space")

        assert css([token]) == ":root {\n  --space: 4px;\n}"


class TestEmptyRegistry:
    def test_starts_empty(self):
        registry = Registry()

        assert registry.formats == {}
        assert registry.transform_groups == {}
