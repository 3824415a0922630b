"""Pause and volume analysis of a decoded mono signal."""
from __future__ import annotations

import math
import numbers
from typing import Any, List, Optional, Tuple

import numpy as np

from speech_coach.exceptions import InvalidArgumentError
from speech_coach.models.audio import AudioFeatures, Pause
from speech_coach.utils.logger import get_logger
from speech_coach.utils.validation import require_sample_rate
from .rules import FRAME_SIZE, MIN_PAUSE_DURATION, SILENCE_THRESHOLD

logger = get_logger(__name__)


def to_mono(samples: Any) -> np.ndarray:
    """Return samples as a 1-D float32 array, averaging channels if needed.

    Accepts a 1-D array or a 2-D (n_samples, n_channels) array.

    Raises:
        InvalidArgumentError: If the data is not finite numeric 1-D/2-D audio
    """
    try:
        y = np.asarray(samples)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError("samples", str(e)) from e
    if y.size and not np.issubdtype(y.dtype, np.number):
        raise InvalidArgumentError("samples", f"expected numeric samples, got dtype {y.dtype}")
    if y.ndim == 2:
        y = y.mean(axis=1)
    elif y.ndim != 1:
        raise InvalidArgumentError("samples", f"expected 1-D or 2-D audio, got {y.ndim}-D")
    if not np.all(np.isfinite(y)):
        raise InvalidArgumentError("samples", "contains NaN or infinite values")
    return y.astype(np.float32, copy=False)


def frame_rms(samples: np.ndarray, frame_size: int = FRAME_SIZE) -> np.ndarray:
    """RMS energy of each complete frame; a trailing partial frame is ignored."""
    n_frames = len(samples) // frame_size
    if n_frames == 0:
        return np.zeros(0, dtype=np.float64)
    frames = samples[: n_frames * frame_size].astype(np.float64).reshape(n_frames, frame_size)
    return np.sqrt(np.mean(frames ** 2, axis=1))


def detect_pauses(
    rms: np.ndarray,
    sample_rate: int,
    total_samples: int,
    frame_size: int = FRAME_SIZE,
    silence_threshold: float = SILENCE_THRESHOLD,
    min_pause_duration: float = MIN_PAUSE_DURATION,
) -> List[Pause]:
    """Group consecutive silent frames into pauses.

    A pause starts at the first silent frame and ends where the next
    non-silent frame starts. A silence still open when the signal ends is
    closed at the end of the signal. Only silences of at least
    min_pause_duration seconds are kept.
    """
    pauses: List[Pause] = []
    silence_start: Optional[float] = None

    for index, value in enumerate(rms):
        current_time = index * frame_size / sample_rate
        if value < silence_threshold:
            if silence_start is None:
                silence_start = current_time
        elif silence_start is not None:
            duration = current_time - silence_start
            if duration >= min_pause_duration:
                pauses.append(Pause(start=silence_start, end=current_time, duration=duration))
            silence_start = None

    if silence_start is not None:
        end_time = total_samples / sample_rate
        duration = end_time - silence_start
        if duration >= min_pause_duration:
            pauses.append(Pause(start=silence_start, end=end_time, duration=duration))

    return pauses


def volume_metrics(rms: np.ndarray) -> Tuple[float, float]:
    """Mean frame RMS and its coefficient of variation.

    The coefficient of variation is 1.0 when there are no frames or the
    signal is completely silent.
    """
    if rms.size == 0:
        return 0.0, 1.0
    average = float(np.mean(rms))
    if average <= 0:
        return average, 1.0
    return average, float(np.std(rms)) / average


def volume_consistency(volume_variance: float) -> float:
    """Map a coefficient of variation to a 0-1 consistency score.

    Lower variation gives a score closer to 1.
    """
    return max(0.0, min(1.0, math.exp(-volume_variance * 2)))


def analyze_audio(
    samples: Any,
    sample_rate: int,
    *,
    frame_size: int = FRAME_SIZE,
    silence_threshold: float = SILENCE_THRESHOLD,
    min_pause_duration: float = MIN_PAUSE_DURATION,
) -> AudioFeatures:
    """Extract pauses and volume statistics from a decoded signal.

    Args:
        samples: Mono float samples, or (n_samples, n_channels) to downmix
        sample_rate: Samples per second
        frame_size: Samples per analysis frame
        silence_threshold: Frame RMS below which a frame is silent
        min_pause_duration: Shortest silence reported as a pause (seconds)

    Returns:
        AudioFeatures for the whole signal

    Raises:
        InvalidArgumentError: On malformed samples or a non-positive rate
    """
    sample_rate = require_sample_rate("sample_rate", sample_rate)
    if isinstance(frame_size, bool) or not isinstance(frame_size, numbers.Integral):
        raise InvalidArgumentError("frame_size", "must be a positive integer")
    if frame_size <= 0:
        raise InvalidArgumentError("frame_size", "must be a positive integer")
    frame_size = int(frame_size)
    y = to_mono(samples)

    total_duration = len(y) / sample_rate
    rms = frame_rms(y, frame_size)
    pauses = detect_pauses(
        rms,
        sample_rate,
        len(y),
        frame_size=frame_size,
        silence_threshold=silence_threshold,
        min_pause_duration=min_pause_duration,
    )
    average_volume, volume_variance = volume_metrics(rms)
    silence_duration = sum(p.duration for p in pauses)

    logger.debug(
        "Audio features: %.2fs, %d frames, %d pauses, avg volume %.4f",
        total_duration, rms.size, len(pauses), average_volume,
    )
    return AudioFeatures(
        pauses=tuple(pauses),
        average_volume=average_volume,
        volume_variance=volume_variance,
        speech_duration=total_duration - silence_duration,
        silence_duration=silence_duration,
    )
