"""Templated feedback for free speech assessment."""
from __future__ import annotations

from typing import List

from speech_coach.models.audio import AudioFeatures
from speech_coach.models.free_speech import FreeSpeechMetrics
from speech_coach.utils.numeric import round_half_up
from .rules import (
    FAIR_CONFIDENCE,
    FILLER_IMPROVEMENT_COUNT,
    FILLER_SUGGESTION_COUNT,
    HIGH_CONFIDENCE,
    IMPROVEMENT_SCORE,
    LIMITED_VOCABULARY,
    MAX_NATURAL_WPM,
    MAX_PAUSES_BEFORE_WARNING,
    MIN_NATURAL_WPM,
    POOR_VOCABULARY,
    RICH_VOCABULARY,
    STRENGTH_SCORE,
    SUGGESTION_SCORE,
)


def generate_feedback(metrics: FreeSpeechMetrics) -> List[str]:
    feedback: List[str] = []
    wpm = round_half_up(metrics.speech_rate)

    if metrics.speech_rate < MIN_NATURAL_WPM:
        feedback.append(
            f"Your speech rate is {wpm} words per minute, which is slower than average. "
            "Try to speak a bit faster."
        )
    elif metrics.speech_rate > MAX_NATURAL_WPM:
        feedback.append(
            f"Your speech rate is {wpm} words per minute, which is quite fast. "
            "Try to slow down for better clarity."
        )
    else:
        feedback.append(
            f"Your speech rate of {wpm} words per minute is natural and easy to follow."
        )

    if metrics.filler_word_count > 0:
        filler_rate = metrics.filler_word_count / metrics.total_words * 100
        distinct = ", ".join(dict.fromkeys(metrics.filler_words))
        feedback.append(
            f"You used {metrics.filler_word_count} filler word(s) ({filler_rate:.1f}% of speech). "
            f"Common fillers: {distinct}."
        )
    else:
        feedback.append("Great job avoiding filler words!")

    confidence_percent = f"{metrics.average_confidence * 100:.0f}"
    if metrics.average_confidence >= HIGH_CONFIDENCE:
        feedback.append(f"Excellent clarity with {confidence_percent}% average confidence.")
    elif metrics.average_confidence >= FAIR_CONFIDENCE:
        feedback.append(f"Good clarity with {confidence_percent}% average confidence.")
    else:
        feedback.append(
            f"Clarity could be improved ({confidence_percent}% confidence). "
            "Focus on enunciating clearly."
        )

    if metrics.vocabulary_richness > RICH_VOCABULARY:
        feedback.append("Excellent vocabulary diversity!")
    elif metrics.vocabulary_richness < POOR_VOCABULARY:
        feedback.append("Try to use more varied vocabulary to make your speech more engaging.")

    return feedback


def generate_suggestions(
    metrics: FreeSpeechMetrics,
    audio_features: AudioFeatures,
    fluency_score: int,
    clarity_score: int,
    grammar_score: int,
) -> List[str]:
    suggestions: List[str] = []

    if fluency_score < SUGGESTION_SCORE:
        suggestions.append(
            "Practice speaking at a steady pace without rushing or hesitating too much."
        )
        if metrics.filler_word_count > FILLER_SUGGESTION_COUNT:
            suggestions.append(
                'When you feel the urge to say "um" or "uh", try pausing silently instead.'
            )

    if clarity_score < SUGGESTION_SCORE:
        suggestions.append("Focus on pronouncing each word clearly and completely.")
        suggestions.append("Maintain consistent volume throughout your speech.")

    if grammar_score < SUGGESTION_SCORE:
        suggestions.append("Try to speak in complete sentences with proper structure.")
        suggestions.append("Practice organizing your thoughts before speaking.")

    if len(audio_features.pauses) > MAX_PAUSES_BEFORE_WARNING:
        suggestions.append("Work on reducing unnecessary pauses to maintain better flow.")

    if metrics.vocabulary_richness < LIMITED_VOCABULARY:
        suggestions.append("Expand your vocabulary by reading more and learning new words.")

    suggestions.append("Record yourself regularly to track improvement over time.")
    suggestions.append("Listen to native speakers and try to mimic their pace and rhythm.")
    return suggestions


def identify_strengths(
    fluency_score: int,
    clarity_score: int,
    grammar_score: int,
    pronunciation_score: int,
    metrics: FreeSpeechMetrics,
) -> List[str]:
    strengths: List[str] = []
    if fluency_score >= STRENGTH_SCORE:
        strengths.append("Strong fluency and natural speech flow")
    if clarity_score >= STRENGTH_SCORE:
        strengths.append("Clear and understandable pronunciation")
    if grammar_score >= STRENGTH_SCORE:
        strengths.append("Good grammar and sentence structure")
    if pronunciation_score >= STRENGTH_SCORE:
        strengths.append("Confident word pronunciation")
    if metrics.filler_word_count == 0:
        strengths.append("No filler words used")
    if metrics.vocabulary_richness > RICH_VOCABULARY:
        strengths.append("Rich and diverse vocabulary")
    if MIN_NATURAL_WPM <= metrics.speech_rate <= MAX_NATURAL_WPM:
        strengths.append("Natural speaking pace")
    return strengths


def identify_areas_to_improve(
    fluency_score: int,
    clarity_score: int,
    grammar_score: int,
    pronunciation_score: int,
    metrics: FreeSpeechMetrics,
) -> List[str]:
    areas: List[str] = []
    if fluency_score < IMPROVEMENT_SCORE:
        areas.append("Speech fluency and flow")
    if clarity_score < IMPROVEMENT_SCORE:
        areas.append("Pronunciation clarity")
    if grammar_score < IMPROVEMENT_SCORE:
        areas.append("Grammar and sentence structure")
    if pronunciation_score < IMPROVEMENT_SCORE:
        areas.append("Word pronunciation accuracy")
    if metrics.filler_word_count > FILLER_IMPROVEMENT_COUNT:
        areas.append("Reducing filler words")
    if metrics.speech_rate < MIN_NATURAL_WPM:
        areas.append("Speaking speed (too slow)")
    elif metrics.speech_rate > MAX_NATURAL_WPM:
        areas.append("Speaking speed (too fast)")
    if metrics.vocabulary_richness < POOR_VOCABULARY:
        areas.append("Vocabulary diversity")
    return areas
