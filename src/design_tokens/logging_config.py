"""Build event logging with structlog.

Modules log snake_case events (``platform_built``, ``file_written``,
``color_unparseable``) with key/value context. Inside ``build_context``
every event also carries the platform and destination being built, and
token paths passed as tuples are rendered as ``color/brand/primary``.
"""

import logging
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from design_tokens.config import LogLevel, Settings, get_settings

TOKEN_PATH_KEYS = ("path", "paths")


def _is_token_path(value: Any) -> bool:
    return isinstance(value, tuple) and all(isinstance(part, str) for part in value)


def join_token_paths(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Render token path tuples under ``path``/``paths`` as slash-joined strings."""
    for key in TOKEN_PATH_KEYS:
        value = event_dict.get(key)
        if _is_token_path(value):
            event_dict[key] = "/".join(value)
        elif isinstance(value, list | tuple) and value and all(_is_token_path(v) for v in value):
            event_dict[key] = ["/".join(v) for v in value]
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        join_token_paths,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def get_processors(log_format: str) -> list[Processor]:
    """Processor chain for ``console`` (human) or ``json`` (CI) output."""
    if log_format == "json":
        return [
            *_shared_processors(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [
        *_shared_processors(),
        structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def configure_logging(settings: Settings | None = None, *, verbose: bool = False) -> None:
    """Route build events through the standard library to stderr.

    Args:
        settings: Build settings. If None, loads from environment.
        verbose: Log at DEBUG regardless of settings.log_level, which shows
            per-file and per-token events (``file_rendered``,
            ``color_unparseable``, ``token_overridden``).
    """
    if settings is None:
        settings = get_settings()

    level_name = LogLevel.DEBUG.value if verbose else settings.log_level.value
    log_level = getattr(logging, level_name)

    structlog.configure(
        processors=get_processors(settings.log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    logging.getLogger("design_tokens").setLevel(log_level)

    if settings.log_file:
        _add_file_handler(settings.log_file, log_level)


def _add_file_handler(log_file: Path, level: int) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter("%(message)s"))
    logging.getLogger("design_tokens").addHandler(file_handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, e.g. ``logger = get_logger(__name__)``."""
    return structlog.stdlib.get_logger(name)


@contextmanager
def build_context(
    platform: str, destination: str | None = None, **extra: Any
) -> Iterator[None]:
    """Attach the platform (and output file) being built to every event logged inside.

    Example:
        with build_context("css", "_variables.css"):
            logger.info("file_rendered", tokens=12)
        # -> file_rendered platform=css destination=_variables.css tokens=12
    """
    bindings: dict[str, Any] = {"platform": platform, **extra}
    if destination is not None:
        bindings["destination"] = destination
    with structlog.contextvars.bound_contextvars(**bindings):
        yield


def token_paths(tokens: Sequence[Any]) -> list[tuple[str, ...]]:
    """Paths of the given tokens, for logging under ``paths``."""
    return [token.path for token in tokens]
