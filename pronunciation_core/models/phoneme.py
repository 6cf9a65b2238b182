"""Approximate phoneme sequences and their comparison results."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .assessment import PhonemeIssue


@dataclass(frozen=True)
class PhonemeSequence:
    """Sound-unit breakdown of one word (derived from spelling, not audio)."""

    source_word: str
    symbols: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.symbols)


@dataclass(frozen=True)
class PhonemeMatch:
    """Comparison of the expected and heard symbol at one position."""

    position: int
    expected: str
    transcribed: str
    similarity: float

    @property
    def match(self) -> bool:
        return self.expected == self.transcribed


@dataclass(frozen=True)
class PhonemeAnalysis:
    """Positional comparison of two words' phoneme sequences."""

    expected: PhonemeSequence
    transcribed: PhonemeSequence
    matches: Tuple[PhonemeMatch, ...]
    accuracy: float
    issues: Tuple["PhonemeIssue", ...]

    @property
    def main_issue(self) -> Optional["PhonemeIssue"]:
        """Worst issue at a position of the reference word.

        Issues past the end of the reference (expected == "") name no sound
        to practice and are skipped. Among the rest, the first high-severity
        issue wins, else the first one; None when nothing is left.
        """
        named = [issue for issue in self.issues if issue.expected]
        for issue in named:
            if issue.severity == "high":
                return issue
        return named[0] if named else None
