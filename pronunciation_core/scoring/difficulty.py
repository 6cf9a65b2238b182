"""Inherent difficulty of a reference word for a learner."""
from __future__ import annotations

from ..config import (
    BASE_DIFFICULTY,
    CHALLENGE_CLUSTER_BONUS,
    LONG_WORD_BONUS,
    LONG_WORD_LENGTH,
    MEDIUM_WORD_BONUS,
    MEDIUM_WORD_LENGTH,
)
from ..languages import LanguageProfile


def word_difficulty(word: str, profile: LanguageProfile) -> float:
    """Difficulty in [0, 1] from word length and hard letter clusters.

    Starts at 0.3, adds 0.2 for words longer than 8 characters (0.1 for
    6-8 characters), and 0.2 for every challenging cluster of the language
    found in the word. Clusters are checked independently, so they stack.
    """
    difficulty = BASE_DIFFICULTY

    if len(word) > LONG_WORD_LENGTH:
        difficulty += LONG_WORD_BONUS
    elif len(word) > MEDIUM_WORD_LENGTH:
        difficulty += MEDIUM_WORD_BONUS

    for cluster in profile.challenge_clusters:
        if cluster in word:
            difficulty += CHALLENGE_CLUSTER_BONUS

    return max(0.0, min(1.0, difficulty))
