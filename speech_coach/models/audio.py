"""Data models for signal-level audio features."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple

from .assessment import to_plain


@dataclass(frozen=True)
class Pause:
    """A stretch of silence at least as long as the minimum pause duration.

    Attributes:
        start: Start time in seconds
        end: End time in seconds
        duration: end - start
    """
    start: float
    end: float
    duration: float


@dataclass(frozen=True)
class AudioFeatures:
    """Envelope features of one mono signal.

    Attributes:
        pauses: Detected pauses, in time order
        average_volume: Mean frame RMS
        volume_variance: Coefficient of variation of frame RMS (1.0 when silent)
        speech_duration: Total duration minus silence_duration
        silence_duration: Sum of pause durations
    """
    pauses: Tuple[Pause, ...] = field(default_factory=tuple)
    average_volume: float = 0.0
    volume_variance: float = 1.0
    speech_duration: float = 0.0
    silence_duration: float = 0.0

    @property
    def total_duration(self) -> float:
        return self.speech_duration + self.silence_duration

    def to_dict(self) -> Dict[str, Any]:
        return to_plain(asdict(self))
