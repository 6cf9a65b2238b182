import pytest

from pronunciation_core.feedback import (
    generate_feedback,
    identify_common_issues,
    needs_attention,
    phoneme_tip,
    practice_exercises,
    prioritize_improvement_areas,
)
from pronunciation_core.models import ImprovementArea, WordAssessment
from pronunciation_core.phonetics import analyze_phonemes
from pronunciation_core.scoring import composite_word_score, word_similarity


def _assess(ref, rec, confidence, difficulty=0.3):
    exact = ref == rec
    sim = word_similarity(ref, rec)
    return WordAssessment(
        reference_word=ref,
        recognized_word=rec,
        position_index=0,
        exact_match=exact,
        similarity=sim,
        confidence=confidence,
        phoneme_accuracy=1.0,
        difficulty=difficulty,
        score=composite_word_score(exact, sim, confidence),
    )


@pytest.mark.parametrize(
    "ref, rec, confidence, flagged",
    [
        ("hello", "hello", 0.95, False),
        ("hello", "hello", 0.7, False),  # threshold itself is fine
        ("hello", "hello", 0.69, True),
        ("hello", "hallo", 0.99, True),
    ],
)
def test_needs_attention(ref, rec, confidence, flagged):
    assert needs_attention(_assess(ref, rec, confidence)) is flagged


def test_tip_targets_main_issue(en_us):
    analysis = analyze_phonemes("cat", "bat", en_us)
    assert phoneme_tip("cat", analysis) == (
        "Focus on the 'c' sound in \"cat\". Try practicing: \"c...c...cat\""
    )


def test_tip_without_issues(en_us):
    analysis = analyze_phonemes("hello", "hello", en_us)
    assert phoneme_tip("hello", analysis) == 'Try to pronounce "hello" more clearly'
    assert phoneme_tip("hello", None) == 'Try to pronounce "hello" more clearly'


def test_tip_when_only_extra_sounds_were_heard(en_us):
    # "ab" heard as "abcd": the only issues are at positions past the reference end
    analysis = analyze_phonemes("ab", "abcd", en_us)
    assert len(analysis.issues) == 2
    assert analysis.main_issue is None
    assert phoneme_tip("ab", analysis) == 'Try to pronounce "ab" more clearly'


def test_tip_skips_issues_past_the_reference_end(en_us):
    # issues: ('ð', 'i', medium), ('', 'n', high), ('', 'k', high)
    analysis = analyze_phonemes("think", "sink", en_us)
    assert [i.severity for i in analysis.issues] == ["medium", "high", "high"]
    assert analysis.main_issue.expected == "ð"
    assert phoneme_tip("think", analysis) == (
        "Focus on the 'ð' sound in \"think\". Try practicing: \"ð...ð...think\""
    )


def test_tip_prefers_high_severity_named_sound(en_us):
    # "cat" heard as "b": c->b medium, a->'' high, t->'' high
    analysis = analyze_phonemes("cat", "b", en_us)
    assert analysis.main_issue.expected == "a"
    assert phoneme_tip("cat", analysis).startswith("Focus on the 'a' sound")


def test_practice_exercises_per_language(en_us, es_es, fr_fr):
    assert practice_exercises("cat", en_us) == (
        'Repeat "cat" slowly: c...a...t',
        "Practice with similar words containing the same sounds",
        'Record yourself saying "cat" and compare with native speakers',
    )
    assert practice_exercises("perro", es_es)[0] == "Roll your 'r' in \"perro\": rrr...perro"
    assert practice_exercises("bonjour", fr_fr)[0] == 'Practice nasal sounds in "bonjour"'


def test_practice_exercises_fallback(unknown_language, en_us):
    assert practice_exercises("cat", unknown_language) == ()
    assert practice_exercises("cat", unknown_language, en_us)[0] == 'Repeat "cat" slowly: c...a...t'


def test_common_issues_ranked_and_truncated(en_us):
    analyses = [analyze_phonemes("good", "", en_us), analyze_phonemes("morning", "", en_us)]
    issues = identify_common_issues(analyses, limit=5)
    assert [(i.issue, i.count) for i in issues] == [
        ("o->", 2),
        ("g->", 1),
        ("d->", 1),
        ("ŋ->", 1),
        ("ɹ->", 1),
    ]


def test_improvement_areas_sorted_by_priority():
    areas = [
        ImprovementArea(word="a", difficulty=0.3, priority="medium"),
        ImprovementArea(word="b", difficulty=0.3, priority="high"),
        ImprovementArea(word="c", difficulty=0.3, priority="low"),
        ImprovementArea(word="d", difficulty=0.3, priority="high"),
    ]
    ranked = prioritize_improvement_areas(areas, limit=3)
    assert [a.word for a in ranked] == ["b", "d", "a"]


def test_each_word_is_suggestion_or_strength(en_us):
    pairs = [("the", "the", 0.95), ("cat", "bat", 0.9), ("sat", "sat", 0.8), ("down", "down", 0.3)]
    words = [_assess(*p) for p in pairs]
    analyses = [analyze_phonemes(ref, rec, en_us) for ref, rec, _ in pairs]
    feedback = generate_feedback(words, analyses, en_us)

    assert [s.word for s in feedback.suggestions] == ["cat", "down"]
    assert [(s.word, s.label) for s in feedback.strengths] == [("the", "excellent"), ("sat", "good")]
    assert [s.issue for s in feedback.suggestions] == ["Incorrect pronunciation", "Low confidence"]
    assert [(a.word, a.priority) for a in feedback.areas_for_improvement] == [
        ("down", "high"),
        ("cat", "medium"),
    ]
    assert [p.word for p in feedback.phoneme_feedback] == ["cat", "down"]
    assert [(c.issue, c.count) for c in feedback.common_issues] == [("c->b", 1)]


def test_all_correct_words_give_no_suggestions(en_us):
    words = [_assess("hello", "hello", 1.0), _assess("world", "world", 0.92)]
    analyses = [analyze_phonemes(w.reference_word, w.recognized_word, en_us) for w in words]
    feedback = generate_feedback(words, analyses, en_us)
    assert feedback.suggestions == ()
    assert feedback.areas_for_improvement == ()
    assert feedback.common_issues == ()
    assert len(feedback.strengths) == 2
