"""Value transforms: rewrite a token's raw value into an output literal.

Each transform pairs a matcher with a transformer. For a given token only
the first matching transform in a platform's list is applied; unmatched
tokens keep their value.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from design_tokens.domain.tokens import Token
from design_tokens.domain.value_objects import TokenType, Unit
from design_tokens.transforms.color import to_rgb_triple

Matcher = Callable[[Token], bool]
Transformer = Callable[[Token], Any]


@dataclass(frozen=True)
class ValueTransform:
    name: str
    matcher: Matcher
    transformer: Transformer

    def matches(self, token: Token) -> bool:
        return self.matcher(token)

    def apply(self, token: Token) -> Token:
        return token.with_value(self.transformer(token))


def format_number(value: Any) -> str:
    """Render a value the way it is written into stylesheets.

    Integral floats lose their trailing ``.0`` so ``4.0`` renders as ``4``.
    Booleans render lowercase.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_zero(value: Any) -> bool:
    return (
        isinstance(value, int | float)
        and not isinstance(value, bool)
        and value == 0
    )


def _is_pixel_size(token: Token) -> bool:
    is_sized = token.unit == Unit.PIXEL.value or token.type == TokenType.DIMENSION.value
    return is_sized and not _is_zero(token.value)


def _is_percent_size(token: Token) -> bool:
    return token.unit == Unit.PERCENT.value and not _is_zero(token.value)


SIZE_PX = ValueTransform(
    name="size/px",
    matcher=_is_pixel_size,
    transformer=lambda token: f"{format_number(token.value)}px",
)

SIZE_PERCENT = ValueTransform(
    name="size/percent",
    matcher=_is_percent_size,
    transformer=lambda token: f"{format_number(token.value)}%",
)

COLOR_RGB = ValueTransform(
    name="color/rgb",
    matcher=lambda token: token.is_color,
    transformer=lambda token: to_rgb_triple(token.value),
)


def apply_value_transforms(token: Token, transforms: Iterable[ValueTransform]) -> Token:
    """Apply the first transform whose matcher accepts the token."""
    for transform in transforms:
        if transform.matches(token):
            return transform.apply(token)
    return token
