"""Reference-based pronunciation assessment.

Compares what the speaker was asked to read (the reference text) with
what the transcription service heard, and scores accuracy (how close each
word was) and fluency (reading speed times how much of the text was
actually read).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from speech_coach.alignment import align, normalize, similarity
from speech_coach.models.assessment import (
    PronunciationAssessment,
    WordAnalysis,
    WordLevelScore,
)
from speech_coach.phonetics import find_phoneme_errors, phoneme_breakdown
from speech_coach.utils.logger import get_logger
from speech_coach.utils.numeric import clamp, round_half_up
from speech_coach.utils.validation import require_duration, require_text
from .difficulty import classify_difficulty
from .rules import (
    ACCURACY_WEIGHT,
    EXPECTED_READING_WPM,
    FLUENCY_WEIGHT,
    WORD_MATCH_THRESHOLD,
)
from .word_feedback import generate_suggestions, generate_word_feedback

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReferenceScores:
    accuracy: int
    fluency: int
    overall: int


def analyze_word(original_word: str, transcribed_word: str) -> WordAnalysis:
    """Score one aligned pair and attach its difficulty and phoneme errors."""
    sim = similarity(original_word, transcribed_word)
    return WordAnalysis(
        word=transcribed_word,
        original_word=original_word,
        matched=sim > WORD_MATCH_THRESHOLD,
        similarity=sim,
        phoneme_errors=tuple(find_phoneme_errors(original_word, transcribed_word)),
        difficulty=classify_difficulty(original_word),
    )


def calculate_scores(
    analyses: Sequence[WordAnalysis],
    duration: float,
    original_word_count: int,
) -> ReferenceScores:
    """Accuracy, fluency and overall score for a list of word analyses.

    - accuracy = round(mean similarity * 100)
    - fluency = round(min(100, wpm / 180 * 100) * completion rate), where
      wpm defaults to 180 when the duration is 0
    - overall = round(0.7 * accuracy + 0.3 * fluency)
    """
    if analyses:
        accuracy = round_half_up(sum(a.similarity for a in analyses) / len(analyses) * 100)
        completion_rate = sum(1 for a in analyses if a.word) / len(analyses)
    else:
        accuracy = 0
        completion_rate = 0.0

    if duration > 0:
        words_per_minute = original_word_count / duration * 60
    else:
        logger.debug("No duration given, assuming %.0f wpm", EXPECTED_READING_WPM)
        words_per_minute = EXPECTED_READING_WPM
    speed_score = min(100.0, words_per_minute / EXPECTED_READING_WPM * 100)
    fluency = round_half_up(speed_score * completion_rate)

    accuracy = int(clamp(accuracy))
    fluency = int(clamp(fluency))
    overall = int(clamp(round_half_up(accuracy * ACCURACY_WEIGHT + fluency * FLUENCY_WEIGHT)))
    return ReferenceScores(accuracy=accuracy, fluency=fluency, overall=overall)


def assess_reference_based(
    original_text: str,
    transcribed_text: str,
    duration: float = 0.0,
) -> PronunciationAssessment:
    """Assess a reading of a known text.

    Args:
        original_text: Text the speaker was asked to read
        transcribed_text: What the transcription service heard
        duration: Recording length in seconds (0 when unknown)

    Returns:
        PronunciationAssessment with one WordLevelScore per reference word

    Raises:
        InvalidArgumentError: If a text is not a string or the duration is
            negative, NaN or infinite
    """
    original_text = require_text("original_text", original_text)
    transcribed_text = require_text("transcribed_text", transcribed_text)
    duration = require_duration("duration", duration)

    original_words = normalize(original_text)
    transcribed_words = normalize(transcribed_text)

    analyses: List[WordAnalysis] = [
        analyze_word(pair.original, pair.transcribed)
        for pair in align(original_words, transcribed_words)
    ]
    scores = calculate_scores(analyses, duration, len(original_words))

    word_level_scores = tuple(
        WordLevelScore(
            word=analysis.word,
            original_word=analysis.original_word,
            score=round_half_up(analysis.similarity * 100),
            phonemes=tuple(phoneme_breakdown(analysis.original_word, analysis.word)),
            feedback=tuple(generate_word_feedback(analysis)),
        )
        for analysis in analyses
    )
    suggestions = generate_suggestions(analyses, scores.accuracy, scores.fluency, scores.overall)

    logger.debug(
        "Reference assessment: %d words, accuracy=%d fluency=%d overall=%d",
        len(analyses), scores.accuracy, scores.fluency, scores.overall,
    )
    return PronunciationAssessment(
        overall_score=scores.overall,
        accuracy_score=scores.accuracy,
        fluency_score=scores.fluency,
        word_level_scores=word_level_scores,
        suggestions=tuple(suggestions),
    )
