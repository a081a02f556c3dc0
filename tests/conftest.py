import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from design_tokens.domain.tokens import Token
from design_tokens.domain.value_objects import FIGMA_EXTENSION_KEY

GENERATED_AT = datetime(2026, 10, 17, 9, 30, 0, tzinfo=UTC)


def make_token(path, value, type=None, category=None, **kwargs) -> Token:
    path = tuple(path)
    attributes = kwargs.pop("attributes", {})
    if category is not None:
        attributes = {**attributes, "category": category}
    return Token(
        path=path,
        name="/".join(path),
        value=value,
        type=type,
        attributes=attributes,
        **kwargs,
    )


def primitives_extension(collection: str = "Primitives") -> dict:
    return {FIGMA_EXTENSION_KEY: {"collection": collection, "mode": "Default"}}


@pytest.fixture
def primitive_color() -> Token:
    return make_token(
        ["color", "brand", "primary"],
        "#1a2b3c",
        type="color",
        category="color",
        extensions=primitives_extension(),
    )


@pytest.fixture
def semantic_color() -> Token:
    return make_token(
        ["color", "text", "default"],
        "rgb(10, 20, 30)",
        type="color",
        category="color",
        extensions=primitives_extension("Semantic"),
    )


@pytest.fixture
def spacing_token() -> Token:
    return make_token(
        ["spacing", "md"], 16, type="dimension", category="spacing", unit="pixel"
    )


@pytest.fixture
def zero_spacing_token() -> Token:
    return make_token(
        ["spacing", "none"], 0, type="dimension", category="spacing", unit="pixel"
    )


@pytest.fixture
def opacity_token() -> Token:
    return make_token(
        ["opacity", "disabled"], 40, type="number", category="opacity", unit="percent"
    )


@pytest.fixture
def mode_token() -> Token:
    return make_token(
        ["Modes", "dark", "background"], "#000000", type="color", category="Modes"
    )


@pytest.fixture
def sample_tokens(
    primitive_color: Token,
    semantic_color: Token,
    spacing_token: Token,
    zero_spacing_token: Token,
    opacity_token: Token,
    mode_token: Token,
) -> list[Token]:
    return [
        primitive_color,
        semantic_color,
        spacing_token,
        zero_spacing_token,
        opacity_token,
        mode_token,
        make_token(["flags", "beta"], True, type="boolean", category="flags"),
    ]


@pytest.fixture
def token_document() -> dict:
    return {
        "color": {
            "brand": {
                "primary": {
                    "type": "color",
                    "value": "#1a2b3c",
                    "description": "Brand primary",
                    "extensions": primitives_extension(),
                },
            },
        },
        "spacing": {
            "$description": "Spacing scale",
            "md": {"type": "dimension", "value": 16, "unit": "pixel"},
            "none": {"type": "dimension", "value": 0, "unit": "pixel"},
        },
        "Modes": {
            "dark": {"background": {"type": "color", "value": "#000000"}},
        },
    }


@pytest.fixture
def token_file(tmp_path: Path, token_document: dict) -> Path:
    tokens_dir = tmp_path / "tokens"
    tokens_dir.mkdir()
    path = tokens_dir / "core.json"
    path.write_text(json.dumps(token_document))
    return path
