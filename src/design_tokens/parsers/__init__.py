"""Parsers for loading design token source files."""

from design_tokens.parsers.token_parser import TokenFileParser, load_tokens

__all__ = [
    "TokenFileParser",
    "load_tokens",
]
