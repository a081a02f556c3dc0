import json
from collections.abc import Sequence

from design_tokens.domain.tokens import Token


def json_flat(tokens: Sequence[Token]) -> str:
    """A single JSON object mapping each token name to its value, in input order."""
    flat = {token.name: token.value for token in tokens}
    return json.dumps(flat, indent=2, ensure_ascii=False)
