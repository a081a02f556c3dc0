"""Output formats rendering a token list into a file body."""

from collections.abc import Callable, Sequence

from design_tokens.domain.tokens import Token
from design_tokens.formats.json_flat import json_flat
from design_tokens.formats.web import css_variables, less_variables, scss_variables

Formatter = Callable[[Sequence[Token]], str]

__all__ = [
    "Formatter",
    "css_variables",
    "json_flat",
    "less_variables",
    "scss_variables",
]
