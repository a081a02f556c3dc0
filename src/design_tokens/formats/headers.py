"""Generated-file banners prepended when a file's showFileHeader option is on."""

from datetime import UTC, datetime
from enum import Enum

HEADER_LINES = ("Do not edit directly",)


class CommentStyle(str, Enum):
    BLOCK = "block"
    LINE = "line"


def _banner_lines(generated_at: datetime) -> list[str]:
    # naive datetimes are taken as local time
    stamp = generated_at.astimezone(UTC).strftime("%a, %d %b %Y %H:%M:%S GMT")
    return [*HEADER_LINES, f"Generated on {stamp}"]


def file_header(style: CommentStyle, generated_at: datetime | None = None) -> str:
    """Render the banner in the comment syntax of the target format.

    Block style::

        /**
         * Do not edit directly
         * Generated on Sat, 17 Oct 2026 10:00:00 GMT
         */

    Line style uses ``//`` comments preceded by a blank line.
    """
    lines = _banner_lines(generated_at or datetime.now(UTC))
    if style == CommentStyle.BLOCK:
        body = "\n".join(f" * {line}" for line in lines)
        return f"/**\n{body}\n */\n\n"
    body = "\n".join(f"// {line}" for line in lines)
    return f"\n{body}\n\n"
