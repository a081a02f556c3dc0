from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from design_tokens.domain.value_objects import (
    FIGMA_EXTENSION_KEY,
    PRIMITIVES_COLLECTION,
    TokenType,
)


def _empty_mapping() -> Mapping[str, Any]:
    return {}


@dataclass(frozen=True)
class Token:
    """A single design token.

    ``path`` is the hierarchy as declared in the source and never changes.
    ``name`` starts as whatever the source provided (possibly a legacy
    slash-delimited name) and is replaced by the resolved flat identifier.
    Transforms return new instances; a Token is never modified in place.
    """

    path: tuple[str, ...] = ()
    value: Any = None
    type: str | None = None
    name: str = ""
    unit: str | None = None
    description: str | None = None
    attributes: Mapping[str, Any] = field(default_factory=_empty_mapping)
    extensions: Mapping[str, Any] = field(default_factory=_empty_mapping)
    original_value: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(str(part) for part in self.path))
        if self.original_value is None:
            object.__setattr__(self, "original_value", self.value)

    @property
    def category(self) -> str | None:
        category = self.attributes.get("category")
        return str(category) if category else None

    @property
    def is_color(self) -> bool:
        return self.type == TokenType.COLOR.value

    @property
    def is_primitive(self) -> bool:
        """Whether the token was exported from the Figma "Primitives" collection."""
        figma = self.extensions.get(FIGMA_EXTENSION_KEY)
        if not isinstance(figma, Mapping):
            return False
        return figma.get("collection") == PRIMITIVES_COLLECTION

    def with_name(self, name: str) -> "Token":
        return replace(self, name=name)

    def with_value(self, value: Any) -> "Token":
        return replace(self, value=value)
