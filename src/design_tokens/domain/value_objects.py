from enum import Enum


class TokenType(str, Enum):
    """Token types eligible for the web outputs (CSS, SCSS, Less, flat JSON)."""

    DIMENSION = "dimension"
    STRING = "string"
    NUMBER = "number"
    COLOR = "color"
    CUSTOM_SPACING = "custom-spacing"
    CUSTOM_GRADIENT = "custom-gradient"
    CUSTOM_FONT_STYLE = "custom-fontStyle"
    CUSTOM_RADIUS = "custom-radius"
    CUSTOM_SHADOW = "custom-shadow"

    @classmethod
    def values(cls) -> frozenset[str]:
        return frozenset(member.value for member in cls)


class Unit(str, Enum):
    PIXEL = "pixel"
    PERCENT = "percent"


# Category holding alternate (per-mode) value sets; never emitted on its own.
MODES_CATEGORY = "modes"

# Extension namespace written by the Figma "Design Tokens" export plugin.
FIGMA_EXTENSION_KEY = "org.lukasoppermann.figmaDesignTokens"
PRIMITIVES_COLLECTION = "Primitives"
