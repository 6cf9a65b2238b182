"""Pronunciation assessment pipeline.

Pipeline flow (single forward pass):
1. Tokenize the reference and the recognized transcript
2. Align reference words to recognized words
3. Per word: similarity, phoneme comparison, difficulty
4. Aggregate utterance scores (overall, clarity, fluency, pace)
5. Generate suggestions, strengths and improvement areas

The engine holds only its immutable configuration, so one instance can
serve concurrent calls without locking.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from .alignment.aligner import align_words
from .config import EngineConfig
from .feedback.generator import generate_feedback
from .languages import LanguageProfile
from .models.aligned_word import AlignedWord
from .models.assessment import UtteranceAssessment, WordAssessment
from .models.phoneme import PhonemeAnalysis
from .models.utterance import RecognizedUtterance, ReferenceUtterance
from .phonetics.analyzer import analyze_phonemes
from .scoring.aggregator import aggregate_scores, composite_word_score, detailed_analysis
from .scoring.difficulty import word_difficulty
from .scoring.similarity import exact_match, word_similarity

logger = logging.getLogger(__name__)


class PronunciationEngine:
    """Scores a recognized utterance against the expected reference."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def assess(
        self,
        reference_text: str,
        language_code: Optional[str],
        recognized_text: Optional[str],
        word_confidence: Optional[Sequence[Any]] = None,
        overall_confidence: Optional[float] = None,
    ) -> UtteranceAssessment:
        """Assess one utterance.

        Args:
            reference_text: The phrase the learner was asked to say
            language_code: Language of the phrase, e.g. "en-US"
            recognized_text: Transcript from the ASR ("" or None if nothing
                was recognized)
            word_confidence: Optional per-word ASR confidences (floats or
                ``{"confidence": ...}`` mappings); missing entries count as 0.5
            overall_confidence: Optional utterance confidence from the ASR,
                reported back as ``asr_confidence`` (mean of the word
                confidences when omitted)

        Returns:
            A new UtteranceAssessment

        Raises:
            InvalidInputError: reference_text is empty or has no words
        """
        reference = ReferenceUtterance.from_text(reference_text, language_code)
        recognized = RecognizedUtterance.from_asr(
            recognized_text,
            word_confidence,
            overall_confidence=overall_confidence,
            default_confidence=self.config.default_confidence,
        )
        return self.assess_utterances(reference, recognized)

    def assess_utterances(
        self, reference: ReferenceUtterance, recognized: RecognizedUtterance
    ) -> UtteranceAssessment:
        """Assess already-tokenized utterances."""
        cfg = self.config
        profile = cfg.profile_for(reference.language_code)
        if not profile.is_known:
            logger.debug("No phoneme tables for %r, using per-letter fallback", reference.language_code)

        aligned = align_words(reference, recognized, cfg.alignment_mode)

        words: List[WordAssessment] = []
        analyses: List[PhonemeAnalysis] = []
        for pair in aligned:
            analysis = analyze_phonemes(pair.ref_word, pair.hyp_word, profile)
            words.append(self._assess_word(pair, analysis, profile))
            analyses.append(analysis)

        scores = aggregate_scores(
            words,
            len(recognized.words),
            rhythm_baseline=cfg.rhythm_baseline,
            word_count_penalty=cfg.word_count_penalty,
        )
        feedback = generate_feedback(
            words,
            analyses,
            profile,
            fallback_profile=cfg.profile_for(cfg.default_language),
            confidence_threshold=cfg.confidence_threshold,
            high_priority_confidence=cfg.high_priority_confidence,
            excellent_confidence=cfg.excellent_confidence,
            max_common_issues=cfg.max_common_issues,
            max_improvement_areas=cfg.max_improvement_areas,
        )

        logger.debug(
            "Assessed %d words (%s): overall=%.2f clarity=%.2f",
            len(words), reference.language_code, scores.overall, scores.clarity,
        )

        return UtteranceAssessment(
            reference_text=reference.text,
            recognized_text=recognized.text,
            language_code=reference.language_code,
            overall_score=scores.overall,
            fluency_score=scores.fluency,
            pace_score=scores.pace,
            pace_label=scores.pace_label,
            clarity_score=scores.clarity,
            overall_confidence=scores.overall_confidence,
            asr_confidence=recognized.overall_confidence,
            word_assessments=tuple(words),
            suggestions=feedback.suggestions,
            strengths=feedback.strengths,
            areas_for_improvement=feedback.areas_for_improvement,
            common_issues=feedback.common_issues,
            phoneme_feedback=feedback.phoneme_feedback,
            detailed_analysis=detailed_analysis(words, reference.words, recognized.words),
            insufficient_data=recognized.is_empty,
        )

    @staticmethod
    def _assess_word(pair: AlignedWord, analysis: PhonemeAnalysis, profile: LanguageProfile) -> WordAssessment:
        exact = exact_match(pair.ref_word, pair.hyp_word)
        sim = word_similarity(pair.ref_word, pair.hyp_word)
        return WordAssessment(
            reference_word=pair.ref_word,
            recognized_word=pair.hyp_word,
            position_index=pair.position,
            exact_match=exact,
            similarity=sim,
            confidence=pair.confidence,
            phoneme_accuracy=analysis.accuracy,
            difficulty=word_difficulty(pair.ref_word, profile),
            score=composite_word_score(exact, sim, pair.confidence),
        )


def assess_pronunciation(
    reference_text: str,
    language_code: Optional[str],
    recognized_text: Optional[str],
    word_confidence: Optional[Sequence[Any]] = None,
    overall_confidence: Optional[float] = None,
    *,
    config: Optional[EngineConfig] = None,
) -> UtteranceAssessment:
    """Assess a learner's utterance against the reference phrase.

    Convenience wrapper around :class:`PronunciationEngine` for one-off
    calls; the default configuration is used when ``config`` is omitted.

    Raises:
        InvalidInputError: reference_text is empty or has no words
    """
    engine = PronunciationEngine(config)
    return engine.assess(
        reference_text, language_code, recognized_text, word_confidence, overall_confidence
    )
