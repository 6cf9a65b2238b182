"""Data model for a reference word paired with what the ASR heard."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AlignedWord:
    """One reference word and its recognized counterpart.

    Attributes:
        ref_word: The normalized reference word
        hyp_word: The recognized word, or "" when nothing was recognized here
        position: Index of the reference word in the reference utterance
        confidence: ASR confidence for hyp_word (0.0 when hyp_word is missing)
        op: "match", "sub" or "del" (a missing recognized word)
        hyp_index: Index into the recognized words (None for "del")
    """
    ref_word: str
    hyp_word: str
    position: int
    confidence: float
    op: str  # "match" | "sub" | "del"
    hyp_index: Optional[int] = None

    @property
    def is_missing(self) -> bool:
        return self.op == "del"
