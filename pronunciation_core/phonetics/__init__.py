"""Approximate, spelling-based phoneme analysis."""
from .analyzer import analyze_phonemes, compare_phonemes, identify_issues, phoneme_accuracy
from .confusability import phoneme_similarity
from .grapheme_map import word_to_phonemes

__all__ = [
    "analyze_phonemes",
    "compare_phonemes",
    "identify_issues",
    "phoneme_accuracy",
    "phoneme_similarity",
    "word_to_phonemes",
]
