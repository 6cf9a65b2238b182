"""Normalized string similarity between a reference and a recognized word."""
from __future__ import annotations

from ..alignment.edit_distance import levenshtein_distance


def similarity(a: str, b: str) -> float:
    """Edit-distance similarity in [0, 1], case-insensitive.

    ``1 - distance / max(len(a), len(b))``; two empty strings are a vacuous
    match (1.0). Callers scoring a *missing* recognized word must not rely
    on that: see :func:`word_similarity`.
    """
    a, b = a.lower(), b.lower()
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def exact_match(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def word_similarity(reference_word: str, recognized_word: str) -> float:
    """Similarity for an aligned pair; a missing recognized word earns nothing."""
    if not recognized_word:
        return 0.0
    return similarity(reference_word, recognized_word)
