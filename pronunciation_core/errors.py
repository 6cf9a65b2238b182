"""Errors raised by the pronunciation assessment engine."""
from __future__ import annotations


class InvalidInputError(ValueError):
    """Reference text is missing or contains no words after tokenization.

    This is the only error the engine raises for learner input. Everything
    else (short transcripts, missing confidences, unknown languages) is
    absorbed into low scores.
    """
