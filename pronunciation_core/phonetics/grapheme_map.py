"""Spelling-based approximation of a word's sound units."""
from __future__ import annotations

from typing import List

from ..languages import LanguageProfile
from ..models.phoneme import PhonemeSequence


def word_to_phonemes(word: str, profile: LanguageProfile) -> PhonemeSequence:
    """Approximate ``word`` as a sequence of phoneme symbols.

    Every cluster of the language's grapheme map that occurs anywhere in the
    word contributes its symbols, in table order (containment, not
    left-to-right consumption). When no cluster occurs, each character
    becomes its own symbol. This is a word-level summary, not a phonemic
    transcription.

    Example (en-US): "think" -> ("θ", "ð"), "cat" -> ("c", "a", "t")

    Args:
        word: Normalized word (may be empty)
        profile: Language tables; an empty profile always takes the
            per-character fallback

    Returns:
        PhonemeSequence for the word ("" gives an empty sequence)
    """
    symbols: List[str] = []
    for grapheme, phonemes in profile.grapheme_map:
        if grapheme in word:
            symbols.extend(phonemes)
    if not symbols:
        symbols = list(word)
    return PhonemeSequence(source_word=word, symbols=tuple(symbols))
