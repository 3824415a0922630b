"""Data models for reference-based pronunciation assessment."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class WordAnalysis:
    """Intermediate per-word analysis built from one AlignmentPair.

    Attributes:
        word: Transcribed word ("" for a deletion)
        original_word: Reference word
        matched: True when similarity > 0.8
        similarity: Normalized edit-distance similarity in [0, 1]
        phoneme_errors: Heuristic error strings ("f instead of th", "missing θ")
        difficulty: One of "easy", "medium", "hard", "complex"
    """
    word: str
    original_word: str
    matched: bool
    similarity: float
    phoneme_errors: Tuple[str, ...] = ()
    difficulty: str = "medium"


@dataclass(frozen=True)
class PhonemeScore:
    expected: str
    actual: str
    score: int


@dataclass(frozen=True)
class WordLevelScore:
    word: str
    original_word: str
    score: int
    phonemes: Tuple[PhonemeScore, ...] = ()
    feedback: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PronunciationAssessment:
    """Result of comparing a transcription against a reference text.

    overall_score is round(0.7 * accuracy_score + 0.3 * fluency_score);
    all three scores lie in [0, 100].
    """
    overall_score: int
    accuracy_score: int
    fluency_score: int
    word_level_scores: Tuple[WordLevelScore, ...] = field(default_factory=tuple)
    suggestions: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return to_plain(asdict(self))


def to_plain(value: Any) -> Any:
    """Turn the tuples produced by asdict into lists for JSON encoders."""
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value
