"""Serializable assessment records returned to callers.

These cross a process boundary as JSON, so they are pydantic models with
camelCase aliases (``overallScore``, ``wordAssessments``...). In Python
they are built and read by field name. All records are frozen and hold
tuples, so a finished assessment cannot be changed.
"""
from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PhonemeIssue(_Record):
    """A phoneme position that was heard clearly wrong."""

    position: int
    expected: str
    transcribed: str
    severity: str  # "high" | "medium"
    description: str

    @property
    def pair(self) -> str:
        return f"{self.expected}->{self.transcribed}"


class WordAssessment(_Record):
    reference_word: str
    recognized_word: str = ""
    position_index: int
    exact_match: bool
    similarity: float = Field(ge=0.0, le=1.0)
    confidence: float = Field(ge=0.0, le=1.0)
    phoneme_accuracy: float = Field(ge=0.0, le=1.0)
    difficulty: float = Field(ge=0.0, le=1.0)
    score: float = Field(ge=0.0, le=1.0)


class Suggestion(_Record):
    word: str
    issue: str
    tip: str
    practice_exercises: Tuple[str, ...] = ()


class Strength(_Record):
    word: str
    label: str  # "excellent" | "good"
    confidence: float


class ImprovementArea(_Record):
    word: str
    difficulty: float
    priority: str  # "high" | "medium" | "low"


class CommonIssue(_Record):
    issue: str  # "expected->heard"
    count: int


class PhonemeFeedback(_Record):
    """Phoneme breakdown for a word that needed a suggestion."""

    word: str
    expected_phonemes: Tuple[str, ...]
    transcribed_phonemes: Tuple[str, ...]
    accuracy: float
    issues: Tuple[PhonemeIssue, ...] = ()


class DetailedAnalysis(_Record):
    total_words: int
    correct_words: int
    incorrect_words: int
    high_confidence_words: int
    low_confidence_words: int
    recognized_word_count: int
    average_confidence: float
    word_error_rate: float


class UtteranceAssessment(_Record):
    """Final result of one assessment call."""

    reference_text: str
    recognized_text: str
    language_code: str
    overall_score: float = Field(ge=0.0, le=1.0)
    fluency_score: float = Field(ge=0.0, le=1.0)
    pace_score: float = Field(ge=0.0, le=1.0)
    pace_label: str
    clarity_score: float = Field(ge=0.0, le=1.0)
    overall_confidence: float = Field(ge=0.0, le=1.0)
    # Utterance confidence as reported by the ASR (mean word confidence when
    # it reported none)
    asr_confidence: float = Field(ge=0.0, le=1.0)
    word_assessments: Tuple[WordAssessment, ...]
    suggestions: Tuple[Suggestion, ...] = ()
    strengths: Tuple[Strength, ...] = ()
    areas_for_improvement: Tuple[ImprovementArea, ...] = ()
    common_issues: Tuple[CommonIssue, ...] = ()
    phoneme_feedback: Tuple[PhonemeFeedback, ...] = ()
    detailed_analysis: Optional[DetailedAnalysis] = None
    insufficient_data: bool = False

    def to_json(self, **kwargs) -> str:
        """JSON with camelCase keys."""
        return self.model_dump_json(by_alias=True, **kwargs)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_json(cls, data: str) -> "UtteranceAssessment":
        return cls.model_validate_json(data)
