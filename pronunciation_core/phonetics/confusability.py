"""Partial-credit similarity between two phoneme symbols."""
from __future__ import annotations

from typing import FrozenSet, Mapping

from ..config import (
    CONFUSABLE_PHONEME_SIMILARITY,
    EXACT_PHONEME_SIMILARITY,
    SINGLE_CHAR_PHONEME_SIMILARITY,
)
from ..languages import DEFAULT_CONFUSABLES


def phoneme_similarity(
    expected: str,
    transcribed: str,
    confusables: Mapping[str, FrozenSet[str]] = DEFAULT_CONFUSABLES,
) -> float:
    """Similarity between the expected and the heard symbol.

    DIRECTIONAL: the confusability table is keyed by the expected symbol,
    so ("θ" heard as "s") earns credit while ("s" heard as "θ") does not.

    Scale:
        1.0 identical symbols
        0.7 single-character symbols listed as confusable
        0.3 any other pair of single-character symbols
        0.0 otherwise (multi-character symbols, or a missing position)

    Args:
        expected: Symbol from the reference word ("" past its end)
        transcribed: Symbol from the recognized word ("" past its end)
        confusables: Expected symbol -> symbols accepted in its place

    Returns:
        Similarity score (0.0-1.0)
    """
    if expected == transcribed:
        return EXACT_PHONEME_SIMILARITY
    if len(expected) == 1 and len(transcribed) == 1:
        if transcribed in confusables.get(expected, ()):
            return CONFUSABLE_PHONEME_SIMILARITY
        return SINGLE_CHAR_PHONEME_SIMILARITY
    return 0.0

