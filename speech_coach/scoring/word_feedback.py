"""Feedback strings for reference-based assessment."""
from __future__ import annotations

from typing import Dict, List, Sequence

from speech_coach.models.assessment import WordAnalysis
from .rules import (
    ACCURACY_BANDS,
    FLUENCY_BANDS,
    MAX_SUGGESTIONS,
    OVERALL_PRAISE_BANDS,
    WORD_DISTANT_THRESHOLD,
)


def generate_word_feedback(analysis: WordAnalysis) -> List[str]:
    """Build the feedback shown next to one word."""
    feedback: List[str] = []

    if not analysis.matched:
        if analysis.word == "":
            feedback.append("Word was not recognized - try speaking more clearly")
        elif analysis.similarity < WORD_DISTANT_THRESHOLD:
            feedback.append(
                f'Pronunciation differs significantly from "{analysis.original_word}"'
            )
        else:
            feedback.append(f'Close pronunciation - review the "{analysis.original_word}" sound')

    if analysis.difficulty == "complex":
        feedback.append("This is a challenging word - practice slowly first")
    elif analysis.difficulty == "hard":
        feedback.append("Focus on each syllable clearly")

    for error in analysis.phoneme_errors:
        feedback.append(f"Check {error} sound")

    return feedback


def generate_suggestions(
    analyses: Sequence[WordAnalysis],
    accuracy: int,
    fluency: int,
    overall: int,
) -> List[str]:
    """Aggregate suggestions for the whole reading.

    Suggestions are added in a fixed order (accuracy, fluency, repeated
    phoneme errors, unmatched complex words, praise) and the first
    MAX_SUGGESTIONS are kept.
    """
    suggestions: List[str] = []
    accuracy_low, accuracy_fair = ACCURACY_BANDS
    fluency_low, fluency_fair = FLUENCY_BANDS

    if accuracy < accuracy_low:
        suggestions.append("Focus on articulation - speak each word clearly and slowly")
        suggestions.append("Practice difficult words separately before reading full text")
    elif accuracy < accuracy_fair:
        suggestions.append("Good pronunciation! Focus on the challenging words highlighted above")

    if fluency < fluency_low:
        suggestions.append("Take your time - focus on clarity over speed")
        suggestions.append("Practice reading the text silently first to familiarize yourself")
    elif fluency < fluency_fair:
        suggestions.append("Good pace! Try to maintain consistent rhythm throughout")

    error_counts: Dict[str, int] = {}
    for analysis in analyses:
        for error in analysis.phoneme_errors:
            if error:
                error_counts[error] = error_counts.get(error, 0) + 1
    for error, count in error_counts.items():
        if count > 1:
            suggestions.append(f"Focus on {error} - this appeared multiple times")

    if any(a.difficulty == "complex" and not a.matched for a in analyses):
        suggestions.append("Practice complex words with online pronunciation guides")

    excellent, good = OVERALL_PRAISE_BANDS
    if overall >= excellent:
        suggestions.append("Excellent pronunciation! Keep practicing to maintain this level")
    elif overall >= good:
        suggestions.append(
            "Good job! A few more practice sessions will significantly improve your score"
        )

    return suggestions[:MAX_SUGGESTIONS]
