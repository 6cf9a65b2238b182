"""Pronunciation assessment for language learners.

Compares the transcript an ASR produced for a learner's utterance with the
phrase they were asked to say, and returns word- and sound-level scores
plus feedback.
"""
from .config import EngineConfig
from .engine import PronunciationEngine, assess_pronunciation
from .errors import InvalidInputError
from .languages import LANGUAGE_PROFILES, LanguageProfile, resolve_profile
from .models import (
    CommonIssue,
    DetailedAnalysis,
    ImprovementArea,
    PhonemeFeedback,
    PhonemeIssue,
    RecognizedUtterance,
    ReferenceUtterance,
    Strength,
    Suggestion,
    UtteranceAssessment,
    WordAssessment,
)

__all__ = [
    "CommonIssue",
    "DetailedAnalysis",
    "EngineConfig",
    "ImprovementArea",
    "InvalidInputError",
    "LANGUAGE_PROFILES",
    "LanguageProfile",
    "PhonemeFeedback",
    "PhonemeIssue",
    "PronunciationEngine",
    "RecognizedUtterance",
    "ReferenceUtterance",
    "Strength",
    "Suggestion",
    "UtteranceAssessment",
    "WordAssessment",
    "assess_pronunciation",
    "resolve_profile",
]
