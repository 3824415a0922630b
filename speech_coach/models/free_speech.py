"""Data models for reference-free (free speech) assessment."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

from .assessment import to_plain


@dataclass(frozen=True)
class TranscriptionChunk:
    """One time-stamped piece of a transcription.

    Attributes:
        text: Chunk text as returned by the transcription provider
        timestamp: (start, end) in seconds
        confidence: Provider confidence in [0, 1], or None when not reported
    """
    text: str
    timestamp: Tuple[float, float] = (0.0, 0.0)
    confidence: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranscriptionChunk":
        start, end = data.get("timestamp") or (0.0, 0.0)
        return cls(
            text=data.get("text", ""),
            timestamp=(start, end),
            confidence=data.get("confidence"),
        )


@dataclass(frozen=True)
class FreeSpeechMetrics:
    speech_rate: float
    pause_count: int
    pause_duration: float
    filler_word_count: int
    filler_words: Tuple[str, ...]
    average_confidence: float
    vocabulary_richness: float
    total_words: int
    unique_words: int
    average_word_length: float
    volume_consistency: float


@dataclass(frozen=True)
class FreeSpeechAssessment:
    """Scores and feedback for speech with no reference text.

    overall_score is round(0.30 * fluency + 0.25 * clarity
    + 0.20 * grammar + 0.25 * pronunciation).
    """
    fluency_score: int
    clarity_score: int
    grammar_score: int
    pronunciation_score: int
    overall_score: int
    metrics: FreeSpeechMetrics
    feedback: Tuple[str, ...] = field(default_factory=tuple)
    suggestions: Tuple[str, ...] = field(default_factory=tuple)
    strengths: Tuple[str, ...] = field(default_factory=tuple)
    areas_to_improve: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return to_plain(asdict(self))
