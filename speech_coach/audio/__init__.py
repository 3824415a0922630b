"""Signal-level analysis of decoded audio."""
from .features import (
    analyze_audio,
    detect_pauses,
    frame_rms,
    to_mono,
    volume_consistency,
    volume_metrics,
)
from .loader import load_audio_mono
from .rules import FRAME_SIZE, MIN_PAUSE_DURATION, SILENCE_THRESHOLD

__all__ = [
    "analyze_audio",
    "detect_pauses",
    "frame_rms",
    "to_mono",
    "volume_consistency",
    "volume_metrics",
    "load_audio_mono",
    "FRAME_SIZE",
    "MIN_PAUSE_DURATION",
    "SILENCE_THRESHOLD",
]
