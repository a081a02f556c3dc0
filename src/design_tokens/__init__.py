from design_tokens.domain import Token, TokenType, Unit
from design_tokens.filters import is_valid_token
from design_tokens.formats import css_variables, json_flat, less_variables, scss_variables
from design_tokens.registry import Registry, default_registry
from design_tokens.transforms import (
    COLOR_RGB,
    SIZE_PERCENT,
    SIZE_PX,
    resolve_name,
    to_rgb_triple,
)

__all__ = [
    "COLOR_RGB",
    "Registry",
    "SIZE_PERCENT",
    "SIZE_PX",
    "Token",
    "TokenType",
    "Unit",
    "css_variables",
    "default_registry",
    "is_valid_token",
    "json_flat",
    "less_variables",
    "resolve_name",
    "scss_variables",
    "to_rgb_triple",
]

__version__ = "0.1.0"
