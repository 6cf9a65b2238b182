import pytest

from pronunciation_core.models import WordAssessment
from pronunciation_core.scoring import (
    aggregate_scores,
    composite_word_score,
    detailed_analysis,
    fluency_score,
    pace_score,
    word_error_rate,
)


def _word(ref, rec, confidence, exact=None, similarity=None):
    exact = ref == rec if exact is None else exact
    similarity = (1.0 if exact else 0.0) if similarity is None else similarity
    return WordAssessment(
        reference_word=ref,
        recognized_word=rec,
        position_index=0,
        exact_match=exact,
        similarity=similarity,
        confidence=confidence,
        phoneme_accuracy=similarity,
        difficulty=0.3,
        score=composite_word_score(exact, similarity, confidence),
    )


def test_composite_score():
    assert composite_word_score(True, 1.0, 0.1) == 1.0
    assert composite_word_score(False, 2 / 3, 0.9) == pytest.approx(0.783333, abs=1e-6)
    assert composite_word_score(False, 0.0, 0.0) == 0.0


@pytest.mark.parametrize(
    "reference, recognized, expected",
    [
        (3, 3, 0.925),
        (2, 0, 0.875),
        (3, 5, 0.875),
        (1, 100, 0.425),  # pause component floored at 0
    ],
)
def test_fluency(reference, recognized, expected):
    assert fluency_score(reference, recognized) == pytest.approx(expected)


@pytest.mark.parametrize(
    "reference, recognized, expected",
    [
        (5, 5, (0.9, "good pace")),
        (5, 6, (0.9, "good pace")),  # ratio 1.2 is inside the band
        (5, 4, (0.9, "good pace")),  # ratio 0.8 is inside the band
        (3, 5, (0.6, "too fast")),
        (2, 0, (0.7, "too slow")),
    ],
)
def test_pace_bands(reference, recognized, expected):
    assert pace_score(reference, recognized) == expected


def test_word_error_rate():
    assert word_error_rate(["a", "b"], ["a", "b"]) == 0.0
    assert word_error_rate(["a", "b"], ["a", "c"]) == pytest.approx(0.5)
    assert word_error_rate(["a"], ["b", "c", "d"]) == 1.0
    assert word_error_rate(["a", "b"], []) == 1.0


def test_aggregate_mixed_utterance():
    words = [
        _word("the", "the", 0.95),
        _word("cat", "bat", 0.9, similarity=2 / 3),
        _word("sat", "sat", 0.8),
    ]
    scores = aggregate_scores(words, recognized_count=3)
    assert scores.overall == pytest.approx(2 / 3)
    assert scores.clarity == pytest.approx((1.0 + (2 / 3 + 0.9) / 2 + 1.0) / 3)
    assert scores.fluency == pytest.approx(0.925)
    assert (scores.pace, scores.pace_label) == (0.9, "good pace")
    assert scores.overall_confidence == pytest.approx((0.95 + 0.9 + 0.8) / 3)


def test_aggregate_nothing_recognized():
    words = [_word("good", "", 0.0), _word("morning", "", 0.0)]
    scores = aggregate_scores(words, recognized_count=0)
    assert scores.overall == 0.0
    assert scores.clarity == 0.0
    assert scores.pace_label == "too slow"
    assert scores.overall_confidence == 0.0


def test_detailed_analysis_counts():
    words = [
        _word("the", "the", 0.95),
        _word("cat", "bat", 0.7, similarity=2 / 3),
        _word("sat", "sat", 0.4),
    ]
    analysis = detailed_analysis(words, ["the", "cat", "sat"], ["the", "bat", "sat", "down"])
    assert analysis.total_words == 3
    assert analysis.correct_words == 2
    assert analysis.incorrect_words == 1
    assert analysis.high_confidence_words == 1
    assert analysis.low_confidence_words == 1
    assert analysis.recognized_word_count == 4
    assert analysis.word_error_rate == pytest.approx(2 / 3)
