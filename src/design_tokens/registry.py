"""Explicit registry of the transforms, filters and formats a build can name.

Platform configuration refers to capabilities by key (``size/px``,
``validToken``, ``css/variables``...). A Registry maps those keys to
callables. Each build owns its registry; ``default_registry()`` returns a
fresh instance so additional formats, such as native mobile writers, can be
registered on one build without affecting another.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from design_tokens.domain.tokens import Token
from design_tokens.exceptions import (
    UnknownFilterError,
    UnknownFormatError,
    UnknownTransformError,
    UnknownTransformGroupError,
)
from design_tokens.filters import TokenFilter, attribute_filter, is_valid_token
from design_tokens.formats import (
    Formatter,
    css_variables,
    json_flat,
    less_variables,
    scss_variables,
)
from design_tokens.formats.headers import CommentStyle
from design_tokens.transforms.name import resolve_name
from design_tokens.transforms.value import (
    COLOR_RGB,
    SIZE_PERCENT,
    SIZE_PX,
    ValueTransform,
)

NameTransform = Callable[[Token], str]

NAME_CTI_KEBAB = "name/cti/kebab"
VALID_TOKEN = "validToken"


@dataclass(frozen=True)
class OutputFormat:
    name: str
    formatter: Formatter
    comment_style: CommentStyle | None = None

    def __call__(self, tokens: Sequence[Token]) -> str:
        return self.formatter(tokens)


@dataclass(frozen=True)
class PlatformTransforms:
    """Transforms resolved for one platform: at most one name transform plus
    value transforms in the order they are tried."""

    name_transform: NameTransform | None
    value_transforms: tuple[ValueTransform, ...]


@dataclass
class Registry:
    value_transforms: dict[str, ValueTransform] = field(default_factory=dict)
    name_transforms: dict[str, NameTransform] = field(default_factory=dict)
    filters: dict[str, TokenFilter] = field(default_factory=dict)
    formats: dict[str, OutputFormat] = field(default_factory=dict)
    transform_groups: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def register_value_transform(self, transform: ValueTransform) -> None:
        self.value_transforms[transform.name] = transform

    def register_name_transform(self, name: str, transform: NameTransform) -> None:
        self.name_transforms[name] = transform

    def register_filter(self, name: str, token_filter: TokenFilter) -> None:
        self.filters[name] = token_filter

    def register_format(
        self,
        name: str,
        formatter: Formatter,
        comment_style: CommentStyle | None = None,
    ) -> None:
        self.formats[name] = OutputFormat(name, formatter, comment_style)

    def register_transform_group(self, name: str, transforms: Iterable[str]) -> None:
        self.transform_groups[name] = tuple(transforms)

    def get_format(self, name: str) -> OutputFormat:
        try:
            return self.formats[name]
        except KeyError:
            raise UnknownFormatError(name) from None

    def get_filter(self, spec: str | Mapping[str, Any] | None) -> TokenFilter | None:
        """Resolve a file's filter: a registered key, an attribute mapping, or none."""
        if spec is None:
            return None
        if isinstance(spec, Mapping):
            return attribute_filter(spec)
        try:
            return self.filters[spec]
        except KeyError:
            raise UnknownFilterError(spec) from None

    def get_transform_group(self, name: str) -> tuple[str, ...]:
        try:
            return self.transform_groups[name]
        except KeyError:
            raise UnknownTransformGroupError(name) from None

    def resolve_transforms(self, names: Iterable[str]) -> PlatformTransforms:
        """Split transform keys into the platform's name and value transforms.

        When several name transforms are listed the last one wins.
        """
        name_transform: NameTransform | None = None
        value_transforms: list[ValueTransform] = []
        for name in names:
            if name in self.name_transforms:
                name_transform = self.name_transforms[name]
            elif name in self.value_transforms:
                value_transforms.append(self.value_transforms[name])
            else:
                raise UnknownTransformError(name)
        return PlatformTransforms(name_transform, tuple(value_transforms))


def default_registry() -> Registry:
    """Build a registry with every built-in capability under its stable key."""
    registry = Registry()

    for transform in (SIZE_PX, SIZE_PERCENT, COLOR_RGB):
        registry.register_value_transform(transform)
    registry.register_name_transform(NAME_CTI_KEBAB, resolve_name)

    registry.register_filter(VALID_TOKEN, is_valid_token)

    registry.register_format("scss/variables", scss_variables, CommentStyle.LINE)
    registry.register_format("less/variables", less_variables, CommentStyle.LINE)
    registry.register_format("css/variables", css_variables, CommentStyle.BLOCK)
    registry.register_format("json/flat", json_flat)

    registry.register_transform_group("custom/css", (NAME_CTI_KEBAB, SIZE_PX.name, SIZE_PERCENT.name))
    registry.register_transform_group("js", (NAME_CTI_KEBAB,))

    return registry
