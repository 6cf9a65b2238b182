"""Feedback generation for learners."""
from .exercises import phoneme_tip, practice_exercises
from .generator import (
    Feedback,
    generate_feedback,
    identify_common_issues,
    needs_attention,
    prioritize_improvement_areas,
)

__all__ = [
    "Feedback",
    "generate_feedback",
    "identify_common_issues",
    "needs_attention",
    "phoneme_tip",
    "practice_exercises",
    "prioritize_improvement_areas",
]
