import math

import pytest

from pronunciation_core.alignment.normalizer import normalize_token
from pronunciation_core.alignment.tokenizer import split_words, tokenize, tokenize_with_values
from pronunciation_core.models.utterance import RecognizedUtterance, ReferenceUtterance, coerce_confidence
from pronunciation_core.errors import InvalidInputError


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Hello,", "hello"),
        ("\"Quoted\"", "quoted"),
        ("don't", "don't"),
        ("well-known", "well-known"),
        ("¿Qué", "qué"),
        ("NIÑO", "niño"),
        ("-", ""),
        ("...", ""),
    ],
)
def test_normalize_token(raw, expected):
    assert normalize_token(raw) == expected


def test_normalize_token_composes_accents():
    decomposed = "nin\u0303o"  # n + combining tilde
    assert normalize_token(decomposed) == "niño"


def test_tokenize_splits_on_whitespace_and_strips_punctuation():
    assert tokenize("Hello, how are   you?") == ["hello", "how", "are", "you"]


def test_tokenize_drops_punctuation_only_tokens():
    assert tokenize("well - done") == ["well", "done"]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize(None) == []
    assert split_words("   ") == []


def test_tokenize_with_values_keeps_values_in_step():
    tokens, values = tokenize_with_values("hello - world", [0.9, 0.1, 0.8], 0.5)
    assert tokens == ["hello", "world"]
    assert values == [0.9, 0.8]


def test_tokenize_with_values_pads_missing_values():
    tokens, values = tokenize_with_values("a b c", [0.9], None)
    assert tokens == ["a", "b", "c"]
    assert values == [0.9, None, None]


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.42, 0.42),
        (1, 1.0),
        (1.5, 1.0),
        (-0.2, 0.0),
        (None, 0.5),
        ("high", 0.5),
        (True, 0.5),
        (math.nan, 0.5),
        ({"word": "hello", "confidence": 0.3}, 0.3),
        ({"word": "hello"}, 0.5),
    ],
)
def test_coerce_confidence(value, expected):
    assert coerce_confidence(value) == pytest.approx(expected)


def test_reference_utterance_from_text():
    ref = ReferenceUtterance.from_text("Good morning!", "en-US")
    assert ref.words == ("good", "morning")
    assert ref.language_code == "en-US"


@pytest.mark.parametrize("text", [None, "", "   ", "?! ..."])
def test_reference_utterance_rejects_empty_text(text):
    with pytest.raises(InvalidInputError):
        ReferenceUtterance.from_text(text, "en-US")


def test_recognized_utterance_defaults_missing_confidence():
    rec = RecognizedUtterance.from_asr("hello world", [0.8])
    assert rec.words == ("hello", "world")
    assert rec.word_confidence == (0.8, 0.5)
    assert rec.overall_confidence == pytest.approx(0.65)


def test_recognized_utterance_uses_reported_overall_confidence():
    rec = RecognizedUtterance.from_asr("hello", [0.8], overall_confidence=0.9)
    assert rec.overall_confidence == pytest.approx(0.9)


def test_recognized_utterance_empty_text():
    rec = RecognizedUtterance.from_asr("", None)
    assert rec.is_empty
    assert rec.word_confidence == ()
    assert rec.overall_confidence == 0.0
