"""Configuration constants and the engine configuration record."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .languages import DEFAULT_LANGUAGE, LANGUAGE_PROFILES, LanguageProfile, resolve_profile

# Words below this ASR confidence get a suggestion even when spelled right
CONFIDENCE_THRESHOLD = 0.7

# Confidence assumed for a recognized word when the ASR gave none
DEFAULT_CONFIDENCE = 0.5

# Suggestions for words below this confidence are "high" priority
HIGH_PRIORITY_CONFIDENCE = 0.5

# Strength label cut-off: above this confidence a word is "excellent"
EXCELLENT_CONFIDENCE = 0.9

# Counting thresholds for the detailed analysis
HIGH_CONFIDENCE_WORD = 0.8
LOW_CONFIDENCE_WORD = 0.6

# Fluency: fixed rhythm baseline (no timing data is modeled)
RHYTHM_BASELINE = 0.85
# Fluency: penalty per word of difference between recognized and reference counts
WORD_COUNT_PENALTY = 0.05

# Pace bands: (ratio bound, score, label)
FAST_PACE_RATIO = 1.2
SLOW_PACE_RATIO = 0.8
FAST_PACE_SCORE = 0.6
SLOW_PACE_SCORE = 0.7
GOOD_PACE_SCORE = 0.9

# Phoneme positions below this similarity are reported as issues
PHONEME_ISSUE_THRESHOLD = 0.5
# ... and below this one the issue is "high" severity
HIGH_SEVERITY_THRESHOLD = 0.3

# Phoneme similarity values
EXACT_PHONEME_SIMILARITY = 1.0
CONFUSABLE_PHONEME_SIMILARITY = 0.7
SINGLE_CHAR_PHONEME_SIMILARITY = 0.3

# Word difficulty
BASE_DIFFICULTY = 0.3
LONG_WORD_LENGTH = 8  # strictly longer adds LONG_WORD_BONUS
MEDIUM_WORD_LENGTH = 5  # strictly longer (and not long) adds MEDIUM_WORD_BONUS
LONG_WORD_BONUS = 0.2
MEDIUM_WORD_BONUS = 0.1
CHALLENGE_CLUSTER_BONUS = 0.2

# Truncation of utterance-level feedback lists
MAX_COMMON_ISSUES = 5
MAX_IMPROVEMENT_AREAS = 10

PRIORITY_ORDER = {"high": 3, "medium": 2, "low": 1}

ALIGNMENT_MODES = ("positional", "sequence")


@dataclass(frozen=True)
class EngineConfig:
    """Immutable settings for one :class:`PronunciationEngine`.

    Built once and passed explicitly; nothing here is mutated after
    construction, so one instance may be shared across threads.
    """

    confidence_threshold: float = CONFIDENCE_THRESHOLD
    default_confidence: float = DEFAULT_CONFIDENCE
    high_priority_confidence: float = HIGH_PRIORITY_CONFIDENCE
    excellent_confidence: float = EXCELLENT_CONFIDENCE
    rhythm_baseline: float = RHYTHM_BASELINE
    word_count_penalty: float = WORD_COUNT_PENALTY
    max_common_issues: int = MAX_COMMON_ISSUES
    max_improvement_areas: int = MAX_IMPROVEMENT_AREAS
    alignment_mode: str = "positional"
    default_language: str = DEFAULT_LANGUAGE
    languages: Mapping[str, LanguageProfile] = field(default_factory=lambda: LANGUAGE_PROFILES)

    def __post_init__(self) -> None:
        if self.alignment_mode not in ALIGNMENT_MODES:
            raise ValueError(
                f"Unknown alignment mode {self.alignment_mode!r}, expected one of {ALIGNMENT_MODES}"
            )
        if not 0.0 <= self.default_confidence <= 1.0:
            raise ValueError(f"default_confidence must be in [0, 1], got {self.default_confidence}")

    def profile_for(self, language_code: str) -> LanguageProfile:
        return resolve_profile(language_code, self.languages)
