"""Token normalization utilities for alignment."""
from __future__ import annotations

import re
import unicodedata

# Leading/trailing punctuation and symbols; apostrophes and hyphens inside
# a word ("don't", "well-known") survive because only the edges are stripped.
_EDGE_PUNCTUATION = re.compile(r"^[^\w]+|[^\w]+$", re.UNICODE)


def normalize_token(token: str) -> str:
    """Normalize a token for comparison.

    Example: "Hello," -> "hello", "¿Qué" -> "qué"

    Args:
        token: The raw token string

    Returns:
        NFC-normalized, lower-cased token without edge punctuation
        (empty string if nothing is left)
    """
    token = unicodedata.normalize("NFC", token).lower().strip()
    return _EDGE_PUNCTUATION.sub("", token)
