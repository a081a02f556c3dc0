"""Name and value transforms applied to tokens before formatting."""

from design_tokens.transforms.color import parse_channels, to_rgb_triple
from design_tokens.transforms.name import apply_name, name_segments, resolve_name
from design_tokens.transforms.value import (
    COLOR_RGB,
    SIZE_PERCENT,
    SIZE_PX,
    ValueTransform,
    apply_value_transforms,
    format_number,
)

__all__ = [
    "COLOR_RGB",
    "SIZE_PERCENT",
    "SIZE_PX",
    "ValueTransform",
    "apply_name",
    "apply_value_transforms",
    "format_number",
    "name_segments",
    "parse_channels",
    "resolve_name",
    "to_rgb_triple",
]
