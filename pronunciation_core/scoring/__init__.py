"""Word similarity, difficulty and utterance score aggregation."""
from .aggregator import (
    UtteranceScores,
    aggregate_scores,
    composite_word_score,
    detailed_analysis,
    fluency_score,
    pace_score,
    word_error_rate,
)
from .difficulty import word_difficulty
from .similarity import exact_match, similarity, word_similarity

__all__ = [
    "UtteranceScores",
    "aggregate_scores",
    "composite_word_score",
    "detailed_analysis",
    "exact_match",
    "fluency_score",
    "pace_score",
    "similarity",
    "word_difficulty",
    "word_error_rate",
    "word_similarity",
]
