"""Learner-facing tips and practice drills."""
from __future__ import annotations

from typing import Optional, Tuple

from ..languages import LanguageProfile
from ..models.phoneme import PhonemeAnalysis


def practice_exercises(
    word: str,
    profile: LanguageProfile,
    fallback: Optional[LanguageProfile] = None,
) -> Tuple[str, ...]:
    """Short drill list for ``word`` in the profile's language.

    Languages without drills of their own use the fallback profile's
    drills (English by default).
    """
    templates = profile.practice_templates
    if not templates and fallback is not None:
        templates = fallback.practice_templates
    spelled = "...".join(word)
    return tuple(t.format(word=word, spelled=spelled) for t in templates)


def phoneme_tip(word: str, analysis: Optional[PhonemeAnalysis]) -> str:
    """Tip aimed at the worst phoneme issue, or a general clarity tip."""
    main = analysis.main_issue if analysis is not None else None
    if main is None:
        return f'Try to pronounce "{word}" more clearly'
    sound = main.expected
    return f"Focus on the '{sound}' sound in \"{word}\". Try practicing: \"{sound}...{sound}...{word}\""
