"""Stylesheet formats: SCSS, Less and CSS custom properties.

Every format receives tokens that were already filtered, named and
transformed, and renders them in input order without sorting.
"""

from collections.abc import Sequence

from design_tokens.domain.tokens import Token
from design_tokens.transforms.color import to_rgb_triple
from design_tokens.transforms.value import format_number

CSS_INDENT = "  "
RGB_SUFFIX = "-rgb"


def scss_variables(tokens: Sequence[Token]) -> str:
    """``$name: value;`` per token."""
    return "\n".join(f"${token.name}: {format_number(token.value)};" for token in tokens)


def less_variables(tokens: Sequence[Token]) -> str:
    """``@name: value;`` per token."""
    return "\n".join(f"@{token.name}: {format_number(token.value)};" for token in tokens)


def _css_declarations(token: Token) -> list[str]:
    declarations = []
    if token.is_color and token.is_primitive:
        declarations.append(f"--{token.name}{RGB_SUFFIX}: {to_rgb_triple(token.value)};")
    declarations.append(f"--{token.name}: {format_number(token.value)};")
    return declarations


def css_variables(tokens: Sequence[Token]) -> str:
    """A ``:root`` block of custom properties.

    Colors from the Primitives collection are preceded by a companion
    ``--<name>-rgb`` property holding their channel triple.
    """
    lines = [":root {"]
    for token in tokens:
        lines.extend(f"{CSS_INDENT}{line}" for line in _css_declarations(token))
    lines.append("}")
    return "\n".join(lines)
