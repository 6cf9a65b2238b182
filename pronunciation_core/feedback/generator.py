"""Suggestions, strengths and prioritized improvement areas."""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..config import (
    CONFIDENCE_THRESHOLD,
    EXCELLENT_CONFIDENCE,
    HIGH_PRIORITY_CONFIDENCE,
    MAX_COMMON_ISSUES,
    MAX_IMPROVEMENT_AREAS,
    PRIORITY_ORDER,
)
from ..languages import LanguageProfile
from ..models.assessment import (
    CommonIssue,
    ImprovementArea,
    PhonemeFeedback,
    Strength,
    Suggestion,
    WordAssessment,
)
from ..models.phoneme import PhonemeAnalysis
from .exercises import phoneme_tip, practice_exercises

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Feedback:
    suggestions: Tuple[Suggestion, ...] = ()
    strengths: Tuple[Strength, ...] = ()
    areas_for_improvement: Tuple[ImprovementArea, ...] = ()
    common_issues: Tuple[CommonIssue, ...] = ()
    phoneme_feedback: Tuple[PhonemeFeedback, ...] = ()


def needs_attention(word: WordAssessment, confidence_threshold: float = CONFIDENCE_THRESHOLD) -> bool:
    """A word gets a suggestion when it was misheard or heard with low confidence."""
    return not word.exact_match or word.confidence < confidence_threshold


def identify_common_issues(
    analyses: Sequence[PhonemeAnalysis], limit: int = MAX_COMMON_ISSUES
) -> List[CommonIssue]:
    """Histogram of expected->heard phoneme pairs, most frequent first.

    Ties keep the order in which the pairs were first seen.
    """
    counts: Counter = Counter()
    for analysis in analyses:
        for issue in analysis.issues:
            counts[issue.pair] += 1
    return [CommonIssue(issue=pair, count=n) for pair, n in counts.most_common(limit)]


def prioritize_improvement_areas(
    areas: Sequence[ImprovementArea], limit: int = MAX_IMPROVEMENT_AREAS
) -> List[ImprovementArea]:
    """Highest priority first (stable within a priority), truncated."""
    ranked = sorted(areas, key=lambda a: PRIORITY_ORDER.get(a.priority, 0), reverse=True)
    return ranked[:limit]


def generate_feedback(
    words: Sequence[WordAssessment],
    analyses: Sequence[PhonemeAnalysis],
    profile: LanguageProfile,
    *,
    fallback_profile: Optional[LanguageProfile] = None,
    confidence_threshold: float = CONFIDENCE_THRESHOLD,
    high_priority_confidence: float = HIGH_PRIORITY_CONFIDENCE,
    excellent_confidence: float = EXCELLENT_CONFIDENCE,
    max_common_issues: int = MAX_COMMON_ISSUES,
    max_improvement_areas: int = MAX_IMPROVEMENT_AREAS,
) -> Feedback:
    """Derive learner feedback from per-word results.

    Each word lands in exactly one bucket:
      - misheard or low-confidence words -> suggestion + improvement area
        + phoneme breakdown
      - everything else -> strength ("excellent" above 0.9 confidence,
        else "good")

    Args:
        words: Per-word assessments, in reference order
        analyses: Phoneme analysis for each word, same order as ``words``
        profile: Language tables for drills
        fallback_profile: Drills for languages without their own
        confidence_threshold: Below this a correct word still gets a suggestion
        high_priority_confidence: Below this an improvement area is "high"
        excellent_confidence: Above this a strength is "excellent"
        max_common_issues: Length cap for common issues
        max_improvement_areas: Length cap for improvement areas

    Returns:
        Feedback with (possibly empty) tuples, never None
    """
    suggestions: List[Suggestion] = []
    strengths: List[Strength] = []
    areas: List[ImprovementArea] = []
    phoneme_feedback: List[PhonemeFeedback] = []
    flagged: List[PhonemeAnalysis] = []

    for word, analysis in zip(words, analyses):
        if needs_attention(word, confidence_threshold):
            low_confidence_only = word.exact_match and word.confidence < confidence_threshold
            suggestions.append(
                Suggestion(
                    word=word.reference_word,
                    issue="Low confidence" if low_confidence_only else "Incorrect pronunciation",
                    tip=phoneme_tip(word.reference_word, analysis),
                    practice_exercises=practice_exercises(word.reference_word, profile, fallback_profile),
                )
            )
            areas.append(
                ImprovementArea(
                    word=word.reference_word,
                    difficulty=word.difficulty,
                    priority="high" if word.confidence < high_priority_confidence else "medium",
                )
            )
            phoneme_feedback.append(
                PhonemeFeedback(
                    word=word.reference_word,
                    expected_phonemes=analysis.expected.symbols,
                    transcribed_phonemes=analysis.transcribed.symbols,
                    accuracy=analysis.accuracy,
                    issues=analysis.issues,
                )
            )
            flagged.append(analysis)
        else:
            strengths.append(
                Strength(
                    word=word.reference_word,
                    label="excellent" if word.confidence > excellent_confidence else "good",
                    confidence=word.confidence,
                )
            )

    logger.debug("Feedback: %d suggestions, %d strengths", len(suggestions), len(strengths))

    return Feedback(
        suggestions=tuple(suggestions),
        strengths=tuple(strengths),
        areas_for_improvement=tuple(prioritize_improvement_areas(areas, max_improvement_areas)),
        common_issues=tuple(identify_common_issues(flagged, max_common_issues)),
        phoneme_feedback=tuple(phoneme_feedback),
    )
