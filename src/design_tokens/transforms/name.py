"""Flat token naming.

A token declared at ``color/brand/color/primary`` in category ``color``
becomes ``brand-primary``: the category is grouping metadata, so every
path segment equal to it is dropped, wherever it appears.
"""

from design_tokens.domain.tokens import Token

LEGACY_NAME_SEPARATOR = "/"
NAME_SEPARATOR = "-"


def name_segments(token: Token) -> list[str]:
    """Return the path segments the flat name is built from."""
    if token.path:
        parts = list(token.path)
    elif token.name:
        parts = token.name.split(LEGACY_NAME_SEPARATOR)
    else:
        parts = []

    category = token.category
    if category:
        category = category.lower()
        parts = [part for part in parts if part.lower() != category]
    return parts


def resolve_name(token: Token) -> str:
    """Resolve a token's kebab-case output name with its category removed.

    Returns an empty string when nothing but the category is left; the
    build service refuses to emit such tokens.
    """
    return NAME_SEPARATOR.join(name_segments(token)).lower()


def apply_name(token: Token) -> Token:
    return token.with_name(resolve_name(token))
