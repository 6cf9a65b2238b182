"""Per-language tables for approximate phoneme analysis.

Each supported language carries four read-only tables:

* ``grapheme_map``: letter clusters and the approximate sound symbols they
  stand for. Clusters are looked up by substring containment, in table
  order, so the order of entries matters.
* ``confusables``: sounds a learner commonly produces instead of the
  expected one. DIRECTIONAL (expected -> heard).
* ``challenge_clusters``: spellings that make a word harder for learners.
* ``practice_templates``: drill strings, formatted with ``{word}`` and
  ``{spelled}`` (the word letter by letter).

The registry is built once at import time and wrapped in read-only
mappings; engines receive it through ``EngineConfig``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

DEFAULT_LANGUAGE = "en-US"

# Expected sound -> sounds heard in its place that still earn partial credit
DEFAULT_CONFUSABLES: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "θ": frozenset({"s", "f"}),  # "think" -> "sink" / "fink"
    "ð": frozenset({"d", "z"}),  # "this" -> "dis" / "zis"
    "ʃ": frozenset({"s", "ch"}),  # "ship" -> "sip"
    "tʃ": frozenset({"ch", "ts"}),
})


@dataclass(frozen=True)
class LanguageProfile:
    """Read-only phoneme and drill tables for one language code."""

    code: str
    grapheme_map: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()
    confusables: Mapping[str, FrozenSet[str]] = field(default_factory=lambda: DEFAULT_CONFUSABLES)
    challenge_clusters: Tuple[str, ...] = ()
    practice_templates: Tuple[str, ...] = ()

    @property
    def is_known(self) -> bool:
        return bool(self.grapheme_map or self.challenge_clusters or self.practice_templates)

    @property
    def primary_subtag(self) -> str:
        return self.code.split("-", 1)[0].lower()


def _profile(
    code: str,
    grapheme_map: Dict[str, Iterable[str]],
    challenge_clusters: Iterable[str],
    practice_templates: Iterable[str],
) -> LanguageProfile:
    return LanguageProfile(
        code=code,
        grapheme_map=tuple((g, tuple(symbols)) for g, symbols in grapheme_map.items()),
        challenge_clusters=tuple(challenge_clusters),
        practice_templates=tuple(practice_templates),
    )


ENGLISH_US = _profile(
    "en-US",
    {
        "th": ("θ", "ð"),
        "sh": ("ʃ",),
        "ch": ("tʃ",),
        "ng": ("ŋ",),
        "r": ("ɹ", "r"),
    },
    challenge_clusters=("th", "sh", "ch", "ng"),
    practice_templates=(
        'Repeat "{word}" slowly: {spelled}',
        "Practice with similar words containing the same sounds",
        'Record yourself saying "{word}" and compare with native speakers',
    ),
)

SPANISH_ES = _profile(
    "es-ES",
    {
        "rr": ("r",),
        "ñ": ("ɲ",),
        "ll": ("ʎ", "j"),
    },
    challenge_clusters=("rr", "ñ", "ll"),
    practice_templates=(
        "Roll your 'r' in \"{word}\": rrr...{word}",
        "Practice the Spanish rhythm: {word}",
        'Focus on clear vowel sounds in "{word}"',
    ),
)

FRENCH_FR = _profile(
    "fr-FR",
    {
        "r": ("ʁ",),
        "u": ("y",),
        "eu": ("ø", "œ"),
    },
    challenge_clusters=("r", "u", "eu", "an", "on"),
    practice_templates=(
        'Practice nasal sounds in "{word}"',
        "Focus on French 'r' sound: {word}",
        "Maintain French intonation: {word}",
    ),
)

LANGUAGE_PROFILES: Mapping[str, LanguageProfile] = MappingProxyType({
    p.code: p for p in (ENGLISH_US, SPANISH_ES, FRENCH_FR)
})


def normalize_language_code(language_code: str) -> str:
    """Canonical form for lookups: ``en_us`` -> ``en-us``."""
    return (language_code or "").strip().replace("_", "-").lower()


def resolve_profile(
    language_code: str,
    profiles: Mapping[str, LanguageProfile] = LANGUAGE_PROFILES,
) -> LanguageProfile:
    """Find the profile for a language code.

    Lookup order: exact code (case-insensitive), then the first profile
    sharing the primary subtag (``en-GB`` -> ``en-US``). Unknown codes get
    an empty profile, which makes phoneme analysis fall back to one symbol
    per letter and adds no challenge clusters.

    Args:
        language_code: BCP-47 style code from the caller
        profiles: Registry to search

    Returns:
        The matching profile, or an empty one for unknown languages
    """
    wanted = normalize_language_code(language_code)
    for code, profile in profiles.items():
        if normalize_language_code(code) == wanted:
            return profile

    primary = wanted.split("-", 1)[0]
    if primary:
        for profile in profiles.values():
            if profile.primary_subtag == primary:
                return profile

    return LanguageProfile(code=language_code or "")
