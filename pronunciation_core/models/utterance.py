"""Reference and recognized utterances."""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from statistics import mean
from typing import Any, Mapping, Optional, Sequence, Tuple

from ..alignment.tokenizer import tokenize, tokenize_with_values
from ..config import DEFAULT_CONFIDENCE
from ..errors import InvalidInputError


def coerce_confidence(value: Any, default: float = DEFAULT_CONFIDENCE) -> float:
    """Turn one ASR confidence entry into a float in [0, 1].

    Accepts a bare number or a mapping such as ``{"word": "hello",
    "confidence": 0.92}``. Missing, non-numeric or NaN values give
    ``default``; out-of-range numbers are clamped.
    """
    if isinstance(value, Mapping):
        value = value.get("confidence")
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        return default
    value = float(value)
    if math.isnan(value):
        return default
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class ReferenceUtterance:
    """The phrase the learner was asked to say."""

    text: str
    language_code: str
    words: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.words:
            raise InvalidInputError("Reference text must contain at least one word")

    @classmethod
    def from_text(cls, text: Optional[str], language_code: Optional[str]) -> "ReferenceUtterance":
        """Tokenize ``text``; raises InvalidInputError when it has no words."""
        if text is None or not text.strip():
            raise InvalidInputError("Reference text is empty")
        return cls(text=text, language_code=language_code or "", words=tuple(tokenize(text)))


@dataclass(frozen=True)
class RecognizedUtterance:
    """What the ASR collaborator heard, with per-word confidence."""

    text: str
    words: Tuple[str, ...]
    word_confidence: Tuple[float, ...]
    overall_confidence: float

    @property
    def is_empty(self) -> bool:
        return not self.words

    @classmethod
    def from_asr(
        cls,
        text: Optional[str],
        word_confidence: Optional[Sequence[Any]] = None,
        overall_confidence: Optional[float] = None,
        default_confidence: float = DEFAULT_CONFIDENCE,
    ) -> "RecognizedUtterance":
        """Build from a transcript and its (optional) confidence list.

        Args:
            text: Transcript text ("" or None when nothing was recognized)
            word_confidence: One entry per whitespace-separated word, as
                floats or ``{"confidence": ...}`` mappings
            overall_confidence: Utterance confidence reported by the ASR;
                mean of the word confidences when omitted
            default_confidence: Used for words without a usable confidence

        Returns:
            RecognizedUtterance with words and confidences of equal length
        """
        raw_conf = list(word_confidence or [])
        words, confs = tokenize_with_values(text, raw_conf, None)
        confidences = tuple(coerce_confidence(c, default_confidence) for c in confs)

        if overall_confidence is None:
            overall = mean(confidences) if confidences else 0.0
        else:
            overall = coerce_confidence(overall_confidence, default_confidence)

        return cls(
            text=text or "",
            words=tuple(words),
            word_confidence=confidences,
            overall_confidence=overall,
        )
