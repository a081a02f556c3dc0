"""Token filters deciding which tokens reach an output file."""

from collections.abc import Callable, Mapping
from typing import Any

from design_tokens.domain.tokens import Token
from design_tokens.domain.value_objects import MODES_CATEGORY, TokenType

TokenFilter = Callable[[Token], bool]

VALID_TOKEN_TYPES = TokenType.values()


def is_mode_token(token: Token) -> bool:
    """Whether the token holds a per-mode alternate (category ``modes``, any case)."""
    category = token.category
    return category is not None and category.lower() == MODES_CATEGORY


def is_valid_token(token: Token) -> bool:
    """Eligibility for the web outputs.

    Tokens in the ``modes`` category hold per-mode alternates and are always
    rejected; everything else is accepted when its type is a web type.
    """
    if is_mode_token(token):
        return False
    return token.type in VALID_TOKEN_TYPES


def _token_field(token: Token, key: str) -> Any:
    if hasattr(token, key):
        return getattr(token, key)
    return token.attributes.get(key)


def attribute_filter(criteria: Mapping[str, Any]) -> TokenFilter:
    """Build a filter from a mapping such as ``{"type": "color"}``.

    A token passes when every key equals the token field of that name, or
    the attribute of that name when the token has no such field.
    """
    expected = dict(criteria)

    def matcher(token: Token) -> bool:
        return all(_token_field(token, key) == value for key, value in expected.items())

    return matcher
