import math

import numpy as np
import pytest

from speech_coach.audio import analyze_audio, volume_consistency
from speech_coach.audio.features import frame_rms
from speech_coach.exceptions import InvalidArgumentError
from .conftest import silence, tone

SR = 16000
FRAME = 2048


def test_long_silence_is_a_pause():
    samples = np.concatenate([tone(FRAME * 4), silence(FRAME * 5), tone(FRAME * 4)])
    features = analyze_audio(samples, SR)
    assert len(features.pauses) == 1
    pause = features.pauses[0]
    assert pause.start == pytest.approx(4 * FRAME / SR)
    assert pause.end == pytest.approx(9 * FRAME / SR)
    assert pause.duration == pytest.approx(0.64)


def test_short_silence_is_not_a_pause():
    samples = np.concatenate([tone(FRAME * 4), silence(FRAME * 2), tone(FRAME * 4)])
    features = analyze_audio(samples, SR)
    assert features.pauses == ()
    assert features.silence_duration == 0


def test_minimum_pause_duration_with_fine_frames():
    # 10 ms frames
    just_over = np.concatenate([tone(1600), silence(31 * 160), tone(1600)])
    just_under = np.concatenate([tone(1600), silence(29 * 160), tone(1600)])

    over = analyze_audio(just_over, SR, frame_size=160)
    assert len(over.pauses) == 1
    assert over.pauses[0].duration == pytest.approx(0.31)

    assert analyze_audio(just_under, SR, frame_size=160).pauses == ()


def test_trailing_silence_closes_at_end_of_signal():
    samples = np.concatenate([tone(FRAME * 4), silence(FRAME * 3 + 100)])
    features = analyze_audio(samples, SR)
    assert len(features.pauses) == 1
    pause = features.pauses[0]
    assert pause.start == pytest.approx(4 * FRAME / SR)
    assert pause.end == pytest.approx(len(samples) / SR)


def test_silent_signal():
    features = analyze_audio(silence(SR), SR)
    assert features.average_volume == 0
    assert features.volume_variance == 1.0
    assert len(features.pauses) == 1
    assert features.pauses[0].duration == pytest.approx(1.0)
    assert features.speech_duration == pytest.approx(0.0)


def test_signal_shorter_than_a_frame():
    features = analyze_audio(tone(100), SR)
    assert features.pauses == ()
    assert features.average_volume == 0
    assert features.volume_variance == 1.0


def test_volume_variance_is_coefficient_of_variation():
    samples = np.concatenate([np.full(FRAME, 0.2), np.full(FRAME, 0.4)]).astype(np.float32)
    features = analyze_audio(samples, SR)
    assert features.average_volume == pytest.approx(0.3)
    assert features.volume_variance == pytest.approx(1 / 3, rel=1e-5)


def test_constant_volume_has_no_variance():
    features = analyze_audio(np.full(FRAME * 3, 0.5, dtype=np.float32), SR)
    assert features.volume_variance == pytest.approx(0.0, abs=1e-6)


def test_speech_and_silence_add_up_to_total():
    samples = np.concatenate([silence(FRAME * 4), tone(FRAME * 6), silence(FRAME * 3 + 7)])
    features = analyze_audio(samples, SR)
    assert features.speech_duration + features.silence_duration == pytest.approx(len(samples) / SR)
    assert features.total_duration == pytest.approx(len(samples) / SR)


def test_stereo_is_downmixed():
    mono = np.concatenate([tone(FRAME * 2), silence(FRAME * 4)])
    stereo = np.stack([mono, mono], axis=1)
    assert analyze_audio(stereo, SR) == analyze_audio(mono, SR)


def test_opposite_phase_channels_cancel_out():
    mono = tone(FRAME * 4)
    features = analyze_audio(np.stack([mono, -mono], axis=1), SR)
    assert features.average_volume == 0


def test_frame_rms_ignores_partial_frame():
    assert frame_rms(np.ones(FRAME * 2 + 5, dtype=np.float32)).shape == (2,)


@pytest.mark.parametrize(
    "variance,expected",
    [(0.0, 1.0), (0.5, math.exp(-1)), (1.0, math.exp(-2)), (-1.0, 1.0)],
)
def test_volume_consistency(variance, expected):
    assert volume_consistency(variance) == pytest.approx(expected)


@pytest.mark.parametrize(
    "samples,sample_rate",
    [
        (np.zeros(10), 0),
        (np.zeros(10), -16000),
        (np.zeros((2, 2, 2)), SR),
        (np.array(["a", "b"]), SR),
    ],
)
def test_invalid_audio(samples, sample_rate):
    with pytest.raises(InvalidArgumentError):
        analyze_audio(samples, sample_rate)


def test_numpy_sample_rate_is_accepted():
    samples = np.concatenate([tone(FRAME * 4), silence(FRAME * 5), tone(FRAME * 4)])
    assert analyze_audio(samples, np.int64(SR)) == analyze_audio(samples, SR)


@pytest.mark.parametrize("sample_rate", [0.5, 44100.7, float("nan")])
def test_fractional_sample_rate_is_rejected(sample_rate):
    with pytest.raises(InvalidArgumentError):
        analyze_audio(tone(FRAME * 2), sample_rate)


@pytest.mark.parametrize("bad_value", [np.nan, np.inf, -np.inf])
def test_non_finite_samples_are_rejected(bad_value):
    samples = tone(FRAME * 2)
    samples[10] = bad_value
    with pytest.raises(InvalidArgumentError):
        analyze_audio(samples, SR)
