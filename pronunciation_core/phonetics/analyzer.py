"""Positional comparison of expected and heard phoneme sequences."""
from __future__ import annotations

from statistics import mean
from typing import List

from ..config import HIGH_SEVERITY_THRESHOLD, PHONEME_ISSUE_THRESHOLD
from ..languages import LanguageProfile
from ..models.assessment import PhonemeIssue
from ..models.phoneme import PhonemeAnalysis, PhonemeMatch, PhonemeSequence
from .confusability import phoneme_similarity
from .grapheme_map import word_to_phonemes


def compare_phonemes(
    expected: PhonemeSequence,
    transcribed: PhonemeSequence,
    profile: LanguageProfile,
) -> List[PhonemeMatch]:
    """Compare two symbol sequences position by position.

    Runs to the longer of the two; the shorter side is padded with "".
    """
    matches: List[PhonemeMatch] = []
    for i in range(max(len(expected), len(transcribed))):
        exp = expected.symbols[i] if i < len(expected) else ""
        got = transcribed.symbols[i] if i < len(transcribed) else ""
        matches.append(
            PhonemeMatch(
                position=i,
                expected=exp,
                transcribed=got,
                similarity=phoneme_similarity(exp, got, profile.confusables),
            )
        )
    return matches


def phoneme_accuracy(matches: List[PhonemeMatch]) -> float:
    """Mean per-position similarity (1.0 for two empty sequences)."""
    if not matches:
        return 1.0
    return mean(m.similarity for m in matches)


def identify_issues(matches: List[PhonemeMatch]) -> List[PhonemeIssue]:
    """Positions heard clearly wrong (similarity below the issue threshold)."""
    issues: List[PhonemeIssue] = []
    for m in matches:
        if m.similarity >= PHONEME_ISSUE_THRESHOLD:
            continue
        issues.append(
            PhonemeIssue(
                position=m.position,
                expected=m.expected,
                transcribed=m.transcribed,
                severity="high" if m.similarity < HIGH_SEVERITY_THRESHOLD else "medium",
                description=f"Expected '{m.expected}' but heard '{m.transcribed}'",
            )
        )
    return issues


def analyze_phonemes(expected_word: str, transcribed_word: str, profile: LanguageProfile) -> PhonemeAnalysis:
    """Full phoneme comparison of one aligned word pair.

    Recomputed on every call; nothing is cached between words or calls.
    """
    expected = word_to_phonemes(expected_word, profile)
    transcribed = word_to_phonemes(transcribed_word, profile)
    matches = compare_phonemes(expected, transcribed, profile)
    return PhonemeAnalysis(
        expected=expected,
        transcribed=transcribed,
        matches=tuple(matches),
        accuracy=phoneme_accuracy(matches),
        issues=tuple(identify_issues(matches)),
    )
