"""Value objects produced and consumed by the assessment pipeline."""
from .aligned_word import AlignedWord
from .assessment import (
    CommonIssue,
    DetailedAnalysis,
    ImprovementArea,
    PhonemeFeedback,
    PhonemeIssue,
    Strength,
    Suggestion,
    UtteranceAssessment,
    WordAssessment,
)
from .phoneme import PhonemeAnalysis, PhonemeMatch, PhonemeSequence
from .utterance import RecognizedUtterance, ReferenceUtterance, coerce_confidence

__all__ = [
    "AlignedWord",
    "CommonIssue",
    "DetailedAnalysis",
    "ImprovementArea",
    "PhonemeAnalysis",
    "PhonemeFeedback",
    "PhonemeIssue",
    "PhonemeMatch",
    "PhonemeSequence",
    "RecognizedUtterance",
    "ReferenceUtterance",
    "Strength",
    "Suggestion",
    "UtteranceAssessment",
    "WordAssessment",
    "coerce_confidence",
]
