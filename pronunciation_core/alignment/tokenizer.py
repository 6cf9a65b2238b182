"""Whitespace tokenization for reference and recognized text."""
from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple, TypeVar

from .normalizer import normalize_token

T = TypeVar("T")


def split_words(text: Optional[str]) -> List[str]:
    """Split text on whitespace without normalizing."""
    if not text:
        return []
    return [w for w in re.split(r"\s+", text.strip()) if w]


def tokenize(text: Optional[str]) -> List[str]:
    """Tokenize text into normalized words.

    Example: "Hello, how are you?" -> ["hello", "how", "are", "you"]

    Tokens that are pure punctuation (e.g. a lone "-") are dropped.
    """
    tokens = []
    for raw in split_words(text):
        normalized = normalize_token(raw)
        if normalized:
            tokens.append(normalized)
    return tokens


def tokenize_with_values(
    text: Optional[str], values: Sequence[T], default: T
) -> Tuple[List[str], List[T]]:
    """Tokenize text and keep a parallel per-word value list in step.

    ``values[i]`` belongs to the i-th whitespace-separated raw word. When a
    raw word is dropped during normalization its value is dropped with it;
    raw words without a value get ``default``.

    Returns:
        (tokens, values) of equal length
    """
    tokens: List[str] = []
    kept: List[T] = []
    for idx, raw in enumerate(split_words(text)):
        normalized = normalize_token(raw)
        if not normalized:
            continue
        tokens.append(normalized)
        kept.append(values[idx] if idx < len(values) else default)
    return tokens, kept
