"""Alignment utilities for matching reference text to ASR output."""
from .aligner import align_by_edit_distance, align_positional, align_words
from .edit_distance import align_sequences, levenshtein_distance
from .normalizer import normalize_token
from .tokenizer import tokenize

__all__ = [
    "align_by_edit_distance",
    "align_positional",
    "align_sequences",
    "align_words",
    "levenshtein_distance",
    "normalize_token",
    "tokenize",
]
