"""Reference-free assessment of spontaneous speech.

Without a reference text there is nothing to compare words against, so
the scores come from speaking rate, filler words, pauses and volume in the
recording, transcription confidence, sentence structure and vocabulary.
"""
from __future__ import annotations

import re
from dataclasses import replace
from typing import Any, List, Mapping, Optional, Sequence, Union

from speech_coach.audio.features import analyze_audio, volume_consistency
from speech_coach.exceptions import InvalidArgumentError
from speech_coach.models.audio import AudioFeatures
from speech_coach.models.free_speech import (
    FreeSpeechAssessment,
    FreeSpeechMetrics,
    TranscriptionChunk,
)
from speech_coach.utils.logger import get_logger
from speech_coach.utils.numeric import clamp, round_half_up
from speech_coach.utils.validation import require_confidence, require_duration, require_text
from .free_speech_feedback import (
    generate_feedback,
    generate_suggestions,
    identify_areas_to_improve,
    identify_strengths,
)
from .grammar import SentenceAnalyzer, calculate_grammar_score
from .rules import (
    ACCEPTABLE_PAUSES_PER_MINUTE,
    CLARITY_CONFIDENCE_WEIGHT,
    CLARITY_OVERALL_WEIGHT,
    CLARITY_VOLUME_WEIGHT,
    DEFAULT_CONFIDENCE,
    FILLER_WORDS,
    FLUENCY_OVERALL_WEIGHT,
    GRAMMAR_OVERALL_WEIGHT,
    MAX_FILLER_PENALTY,
    MAX_PAUSE_PENALTY,
    MAX_SPEED_PENALTY,
    OPTIMAL_WPM,
    PAUSE_PENALTY_PER_EXTRA_PAUSE,
    PRONUNCIATION_OVERALL_WEIGHT,
    SPEED_PENALTY_SCALE,
    WORD_LENGTH_BONUS_CAP,
    WORD_LENGTH_BONUS_FLOOR,
    WORD_LENGTH_BONUS_RATE,
)

logger = get_logger(__name__)

ChunkLike = Union[TranscriptionChunk, Mapping[str, Any]]

_FILLER_PATTERNS = [
    re.compile(rf"\b{re.escape(filler)}\b", re.IGNORECASE) for filler in FILLER_WORDS
]


def coerce_chunks(chunks: Optional[Sequence[ChunkLike]]) -> List[TranscriptionChunk]:
    """Accept TranscriptionChunk objects or provider dicts.

    Confidence must be None or a finite number.

    Raises:
        InvalidArgumentError: If chunks is not a sequence of chunks/mappings
    """
    if chunks is None:
        return []
    if isinstance(chunks, (str, bytes, Mapping)) or not isinstance(chunks, Sequence):
        raise InvalidArgumentError("chunks", f"expected a sequence, got {type(chunks).__name__}")

    coerced: List[TranscriptionChunk] = []
    for index, chunk in enumerate(chunks):
        if isinstance(chunk, Mapping):
            try:
                chunk = TranscriptionChunk.from_dict(chunk)
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError("chunks", f"item {index}: {e}") from e
        elif not isinstance(chunk, TranscriptionChunk):
            raise InvalidArgumentError(
                "chunks", f"item {index} is {type(chunk).__name__}, expected a chunk or mapping"
            )
        confidence = require_confidence(f"chunks[{index}].confidence", chunk.confidence)
        coerced.append(replace(chunk, confidence=confidence))
    return coerced


def find_filler_words(text: str) -> List[str]:
    """All filler-word matches, grouped by filler in FILLER_WORDS order."""
    found: List[str] = []
    for pattern in _FILLER_PATTERNS:
        found.extend(match.lower() for match in pattern.findall(text))
    return found


def average_confidence(chunks: Sequence[TranscriptionChunk]) -> float:
    values = [c.confidence for c in chunks if c.confidence is not None]
    if not values:
        return DEFAULT_CONFIDENCE
    return sum(values) / len(values)


def calculate_metrics(
    text: str,
    chunks: Sequence[TranscriptionChunk],
    audio_features: AudioFeatures,
    duration: float,
) -> FreeSpeechMetrics:
    words = text.lower().split()
    total_words = len(words)
    unique_words = len(set(words))

    if duration > 0:
        speech_rate = total_words / duration * 60
    else:
        logger.debug("Zero duration, reporting speech rate as 0")
        speech_rate = 0.0

    filler_words = find_filler_words(text)

    return FreeSpeechMetrics(
        speech_rate=speech_rate,
        pause_count=len(audio_features.pauses),
        pause_duration=audio_features.silence_duration,
        filler_word_count=len(filler_words),
        filler_words=tuple(filler_words),
        average_confidence=average_confidence(chunks),
        vocabulary_richness=unique_words / total_words if total_words else 0.0,
        total_words=total_words,
        unique_words=unique_words,
        average_word_length=sum(len(w) for w in words) / (total_words or 1),
        volume_consistency=volume_consistency(audio_features.volume_variance),
    )


def calculate_fluency_score(metrics: FreeSpeechMetrics, audio_features: AudioFeatures) -> int:
    """100 minus penalties for off-target speed, frequent pauses and fillers."""
    score = 100.0

    wpm_deviation = abs(metrics.speech_rate - OPTIMAL_WPM)
    score -= min(MAX_SPEED_PENALTY, wpm_deviation / OPTIMAL_WPM * SPEED_PENALTY_SCALE)

    speech_minutes = audio_features.speech_duration / 60
    pauses_per_minute = metrics.pause_count / speech_minutes if speech_minutes > 0 else 0.0
    score -= min(
        MAX_PAUSE_PENALTY,
        max(0.0, (pauses_per_minute - ACCEPTABLE_PAUSES_PER_MINUTE) * PAUSE_PENALTY_PER_EXTRA_PAUSE),
    )

    filler_rate = metrics.filler_word_count / metrics.total_words if metrics.total_words else 0.0
    score -= min(MAX_FILLER_PENALTY, filler_rate * 100)

    return max(0, round_half_up(score))


def calculate_clarity_score(metrics: FreeSpeechMetrics) -> int:
    score = (
        metrics.average_confidence * 100 * CLARITY_CONFIDENCE_WEIGHT
        + metrics.volume_consistency * 100 * CLARITY_VOLUME_WEIGHT
    )
    return max(0, round_half_up(score))


def calculate_pronunciation_score(metrics: FreeSpeechMetrics) -> int:
    """Transcription confidence, plus up to 10 points for longer words."""
    score = metrics.average_confidence * 100
    if metrics.average_word_length > WORD_LENGTH_BONUS_FLOOR:
        score += min(
            WORD_LENGTH_BONUS_CAP,
            (metrics.average_word_length - WORD_LENGTH_BONUS_FLOOR) * WORD_LENGTH_BONUS_RATE,
        )
    return int(clamp(round_half_up(score)))


def calculate_overall_score(fluency: int, clarity: int, grammar: int, pronunciation: int) -> int:
    return round_half_up(
        fluency * FLUENCY_OVERALL_WEIGHT
        + clarity * CLARITY_OVERALL_WEIGHT
        + grammar * GRAMMAR_OVERALL_WEIGHT
        + pronunciation * PRONUNCIATION_OVERALL_WEIGHT
    )


def assess_free_speech(
    transcribed_text: str,
    chunks: Optional[Sequence[ChunkLike]],
    samples: Any,
    sample_rate: int,
    duration: float,
    *,
    analyzer: Optional[SentenceAnalyzer] = None,
) -> FreeSpeechAssessment:
    """Assess speech that has no reference text.

    Args:
        transcribed_text: Transcription of the recording
        chunks: Optional provider chunks; only their confidence is used
        samples: Decoded mono (or multi-channel) samples of the recording
        sample_rate: Samples per second
        duration: Recording length in seconds
        analyzer: Sentence/part-of-speech capability for grammar scoring;
            defaults to the NLTK-backed analyzer

    Returns:
        FreeSpeechAssessment with component scores, metrics and feedback

    Raises:
        InvalidArgumentError: On malformed text, chunks, audio or duration
        GrammarResourceError: If the default analyzer lacks NLTK data
    """
    transcribed_text = require_text("transcribed_text", transcribed_text)
    duration = require_duration("duration", duration)
    chunk_list = coerce_chunks(chunks)

    audio_features = analyze_audio(samples, sample_rate)
    metrics = calculate_metrics(transcribed_text, chunk_list, audio_features, duration)

    fluency = calculate_fluency_score(metrics, audio_features)
    clarity = calculate_clarity_score(metrics)
    grammar = calculate_grammar_score(transcribed_text, analyzer)
    pronunciation = calculate_pronunciation_score(metrics)
    overall = calculate_overall_score(fluency, clarity, grammar, pronunciation)

    logger.debug(
        "Free speech assessment: %d words, fluency=%d clarity=%d grammar=%d "
        "pronunciation=%d overall=%d",
        metrics.total_words, fluency, clarity, grammar, pronunciation, overall,
    )
    return FreeSpeechAssessment(
        fluency_score=fluency,
        clarity_score=clarity,
        grammar_score=grammar,
        pronunciation_score=pronunciation,
        overall_score=overall,
        metrics=metrics,
        feedback=tuple(generate_feedback(metrics)),
        suggestions=tuple(
            generate_suggestions(metrics, audio_features, fluency, clarity, grammar)
        ),
        strengths=tuple(identify_strengths(fluency, clarity, grammar, pronunciation, metrics)),
        areas_to_improve=tuple(
            identify_areas_to_improve(fluency, clarity, grammar, pronunciation, metrics)
        ),
    )
