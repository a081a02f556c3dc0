"""JSON token file parser for design token exports."""

import json
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from design_tokens.domain.tokens import Token
from design_tokens.exceptions import TokenSourceError
from design_tokens.logging_config import get_logger

logger = get_logger(__name__)


class TokenFileParser:
    """Parser for nested JSON token documents.

    Any object carrying a ``value`` (or ``$value``) key is a token; the chain
    of keys leading to it is its path. Other objects are groups. Keys starting
    with ``$`` inside groups (``$schema``, ``$description``) are metadata and
    skipped.

    Handles both the Style Dictionary layout (``value``/``type``) and the
    W3C draft layout (``$value``/``$type``). When a token does not declare
    ``attributes.category`` its first path segment is used, following the
    category/type/item convention.
    """

    VALUE_KEYS = ("value", "$value")
    TYPE_KEYS = ("type", "$type")
    DESCRIPTION_KEYS = ("description", "$description")

    def parse(self, file_path: str | Path) -> list[Token]:
        """Parse a token file.

        Args:
            file_path: Path to the JSON token file.

        Returns:
            Tokens in document order.

        Raises:
            TokenSourceError: If the file is missing, unreadable, not UTF-8
                or not a JSON object.
        """
        path = Path(file_path)
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise TokenSourceError(str(path), "file not found") from None
        except IsADirectoryError:
            raise TokenSourceError(str(path), "is a directory") from None
        except OSError as e:
            raise TokenSourceError(str(path), e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise TokenSourceError(str(path), f"not UTF-8 encoded: {e.reason} at byte {e.start}") from e
        except json.JSONDecodeError as e:
            raise TokenSourceError(str(path), f"invalid JSON: {e}") from e

        return self.parse_document(document, source=str(path))

    def parse_document(self, document: Any, source: str = "<memory>") -> list[Token]:
        if not isinstance(document, Mapping):
            raise TokenSourceError(source, "top level must be a JSON object")
        tokens = list(self._walk(document, ()))
        logger.debug("token_file_parsed", source=source, tokens=len(tokens))
        return tokens

    def _walk(self, node: Mapping[str, Any], path: tuple[str, ...]) -> Iterator[Token]:
        for key, child in node.items():
            if key.startswith("$") or not isinstance(child, Mapping):
                continue
            child_path = (*path, key)
            if self._is_token(child):
                yield self._build_token(child, child_path)
            else:
                yield from self._walk(child, child_path)

    def _is_token(self, node: Mapping[str, Any]) -> bool:
        return any(key in node for key in self.VALUE_KEYS)

    @staticmethod
    def _first(node: Mapping[str, Any], keys: Iterable[str]) -> Any:
        for key in keys:
            if key in node:
                return node[key]
        return None

    def _build_token(self, node: Mapping[str, Any], path: tuple[str, ...]) -> Token:
        attributes = dict(node.get("attributes") or {})
        if not attributes.get("category"):
            attributes["category"] = path[0]

        extensions = node.get("extensions") or node.get("$extensions") or {}

        return Token(
            path=path,
            name="/".join(path),
            value=self._first(node, self.VALUE_KEYS),
            type=self._first(node, self.TYPE_KEYS),
            unit=node.get("unit"),
            description=self._first(node, self.DESCRIPTION_KEYS),
            attributes=attributes,
            extensions=dict(extensions),
        )


def load_tokens(file_paths: Iterable[str | Path], parser: TokenFileParser | None = None) -> list[Token]:
    """Load and merge several token files.

    Files are read in sorted order. A token redefined at the same path by a
    later file replaces the earlier definition but keeps its position.
    """
    parser = parser or TokenFileParser()
    merged: dict[tuple[str, ...], Token] = {}
    for file_path in sorted(Path(p) for p in file_paths):
        for token in parser.parse(file_path):
            if token.path in merged:
                logger.debug("token_overridden", path=token.path, source=str(file_path))
            merged[token.path] = token
    return list(merged.values())
