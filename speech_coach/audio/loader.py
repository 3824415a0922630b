"""Decode audio files into mono float samples."""
from __future__ import annotations

from typing import Optional, Tuple

import librosa
import numpy as np
import soundfile as sf

from speech_coach.exceptions import AudioLoadError
from speech_coach.utils.logger import get_logger
from .features import to_mono

logger = get_logger(__name__)


def load_audio_mono(
    path: str,
    target_sample_rate: Optional[int] = None,
) -> Tuple[np.ndarray, int]:
    """Read an audio file as mono float32.

    Multi-channel audio is averaged down to one channel. When
    target_sample_rate is given and differs from the file's rate the
    signal is resampled (the transcription provider expects 16 kHz).

    Args:
        path: Path to a file soundfile can read (wav, flac, ogg, ...)
        target_sample_rate: Optional output sample rate

    Returns:
        (samples, sample_rate)

    Raises:
        AudioLoadError: If the file cannot be read or resampled
    """
    try:
        y, sr = sf.read(path, always_2d=False, dtype="float32")
    except (RuntimeError, OSError) as e:
        raise AudioLoadError(path, str(e)) from e

    y = to_mono(y)
    sr = int(sr)

    if target_sample_rate and target_sample_rate != sr:
        logger.debug("Resampling %s from %d Hz to %d Hz", path, sr, target_sample_rate)
        try:
            y = librosa.resample(y, orig_sr=sr, target_sr=target_sample_rate)
        except ValueError as e:
            raise AudioLoadError(path, f"resampling failed: {e}") from e
        sr = int(target_sample_rate)

    return y.astype(np.float32, copy=False), sr
