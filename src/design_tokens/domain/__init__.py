from design_tokens.domain.tokens import Token
from design_tokens.domain.value_objects import (
    FIGMA_EXTENSION_KEY,
    MODES_CATEGORY,
    PRIMITIVES_COLLECTION,
    TokenType,
    Unit,
)

__all__ = [
    "FIGMA_EXTENSION_KEY",
    "MODES_CATEGORY",
    "PRIMITIVES_COLLECTION",
    "Token",
    "TokenType",
    "Unit",
]
