"""Utterance-level score aggregation.

All scores are on a 0-1 scale. No timing data is modeled, so fluency and
pace are coarse heuristics over word counts.
"""
from __future__ import annotations

from dataclasses import dataclass
from statistics import mean
from typing import List, Sequence, Tuple

import jiwer

from ..config import (
    FAST_PACE_RATIO,
    FAST_PACE_SCORE,
    GOOD_PACE_SCORE,
    HIGH_CONFIDENCE_WORD,
    LOW_CONFIDENCE_WORD,
    RHYTHM_BASELINE,
    SLOW_PACE_RATIO,
    SLOW_PACE_SCORE,
    WORD_COUNT_PENALTY,
)
from ..models.assessment import DetailedAnalysis, WordAssessment


@dataclass(frozen=True)
class UtteranceScores:
    overall: float
    clarity: float
    fluency: float
    pace: float
    pace_label: str
    overall_confidence: float


def composite_word_score(exact: bool, similarity: float, confidence: float) -> float:
    """1.0 for an exact match, otherwise the mean of similarity and confidence."""
    if exact:
        return 1.0
    return (similarity + confidence) / 2


def accuracy_ratio(words: Sequence[WordAssessment]) -> float:
    """Share of reference words recognized exactly."""
    if not words:
        return 0.0
    return sum(1 for w in words if w.exact_match) / len(words)


def clarity_score(words: Sequence[WordAssessment]) -> float:
    """Mean composite word score."""
    if not words:
        return 0.0
    return mean(w.score for w in words)


def fluency_score(
    reference_count: int,
    recognized_count: int,
    *,
    rhythm_baseline: float = RHYTHM_BASELINE,
    word_count_penalty: float = WORD_COUNT_PENALTY,
) -> float:
    """Average of a word-count pause component and a fixed rhythm baseline.

    Every word of difference between the recognized and the reference
    count (a skipped, added or split word) costs 0.05 of the pause
    component, floored at 0.
    """
    pause_component = max(0.0, 1.0 - word_count_penalty * abs(recognized_count - reference_count))
    return (pause_component + rhythm_baseline) / 2


def pace_score(reference_count: int, recognized_count: int) -> Tuple[float, str]:
    """Three fixed bands on the recognized/reference word-count ratio.

    Returns:
        (score, label) with label "too fast", "too slow" or "good pace"
    """
    ratio = recognized_count / reference_count if reference_count else 0.0
    if ratio > FAST_PACE_RATIO:
        return FAST_PACE_SCORE, "too fast"
    if ratio < SLOW_PACE_RATIO:
        return SLOW_PACE_SCORE, "too slow"
    return GOOD_PACE_SCORE, "good pace"


def average_confidence(words: Sequence[WordAssessment]) -> float:
    if not words:
        return 0.0
    return mean(w.confidence for w in words)


def word_error_rate(reference_words: Sequence[str], recognized_words: Sequence[str]) -> float:
    """Utterance WER, clamped to [0, 1]; 1.0 when nothing was recognized."""
    if not reference_words:
        return 1.0 if recognized_words else 0.0
    if not recognized_words:
        return 1.0
    v = jiwer.wer(" ".join(reference_words), " ".join(recognized_words))
    return max(0.0, min(1.0, v))


def aggregate_scores(
    words: Sequence[WordAssessment],
    recognized_count: int,
    *,
    rhythm_baseline: float = RHYTHM_BASELINE,
    word_count_penalty: float = WORD_COUNT_PENALTY,
) -> UtteranceScores:
    """Combine per-word assessments into utterance-level scores."""
    reference_count = len(words)
    pace, label = pace_score(reference_count, recognized_count)
    return UtteranceScores(
        overall=accuracy_ratio(words),
        clarity=clarity_score(words),
        fluency=fluency_score(
            reference_count,
            recognized_count,
            rhythm_baseline=rhythm_baseline,
            word_count_penalty=word_count_penalty,
        ),
        pace=pace,
        pace_label=label,
        overall_confidence=average_confidence(words),
    )


def detailed_analysis(
    words: Sequence[WordAssessment],
    reference_words: Sequence[str],
    recognized_words: Sequence[str],
) -> DetailedAnalysis:
    """Counts and diagnostics reported alongside the scores."""
    correct = sum(1 for w in words if w.exact_match)
    confidences: List[float] = [w.confidence for w in words]
    return DetailedAnalysis(
        total_words=len(words),
        correct_words=correct,
        incorrect_words=len(words) - correct,
        high_confidence_words=sum(1 for c in confidences if c > HIGH_CONFIDENCE_WORD),
        low_confidence_words=sum(1 for c in confidences if c < LOW_CONFIDENCE_WORD),
        recognized_word_count=len(recognized_words),
        average_confidence=average_confidence(words),
        word_error_rate=word_error_rate(reference_words, recognized_words),
    )
