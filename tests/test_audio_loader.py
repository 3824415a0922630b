import numpy as np
import pytest
import soundfile as sf

from speech_coach.audio import load_audio_mono
from speech_coach.exceptions import AudioLoadError
from .conftest import tone


def test_load_mono_file(tmp_path):
    path = tmp_path / "mono.wav"
    sf.write(str(path), tone(8000), 16000)

    y, sr = load_audio_mono(str(path))
    assert sr == 16000
    assert y.dtype == np.float32
    assert y.shape == (8000,)


def test_load_stereo_file_is_averaged(tmp_path):
    path = tmp_path / "stereo.wav"
    left = tone(4000)
    sf.write(str(path), np.stack([left, np.zeros_like(left)], axis=1), 16000)

    y, _ = load_audio_mono(str(path))
    assert y.ndim == 1
    assert np.allclose(y, left / 2, atol=1e-3)


def test_load_resamples_to_target_rate(tmp_path):
    path = tmp_path / "narrowband.wav"
    sf.write(str(path), tone(8000, sample_rate=8000), 8000)

    y, sr = load_audio_mono(str(path), target_sample_rate=16000)
    assert sr == 16000
    assert len(y) == 16000


def test_missing_file(tmp_path):
    with pytest.raises(AudioLoadError) as exc_info:
        load_audio_mono(str(tmp_path / "missing.wav"))
    assert "missing.wav" in str(exc_info.value)


def test_resampling_error_is_wrapped(tmp_path, monkeypatch):
    path = tmp_path / "clip.wav"
    sf.write(str(path), tone(800), 16000)

    def broken_resample(*args, **kwargs):
        raise ValueError("bad rate")

    monkeypatch.setattr("speech_coach.audio.loader.librosa.resample", broken_resample)
    with pytest.raises(AudioLoadError):
        load_audio_mono(str(path), target_sample_rate=22050)
