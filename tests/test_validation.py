import math

import numpy as np
import pytest

from speech_coach.exceptions import AudioLoadError, InvalidArgumentError
from speech_coach.utils import require_confidence, require_duration, require_sample_rate


@pytest.mark.parametrize("value", [0, 2, 1.5, np.float32(1.25), np.int64(3)])
def test_require_duration_accepts_real_numbers(value):
    result = require_duration("duration", value)
    assert type(result) is float
    assert result == float(value)


@pytest.mark.parametrize("value", [True, "1", None, -0.1, math.nan, math.inf, np.float64("nan")])
def test_require_duration_rejects(value):
    with pytest.raises(InvalidArgumentError):
        require_duration("duration", value)


@pytest.mark.parametrize("value", [16000, 16000.0, np.int64(8000), np.float32(22050)])
def test_require_sample_rate_accepts_whole_numbers(value):
    assert require_sample_rate("sample_rate", value) == int(value)


@pytest.mark.parametrize("value", [0, -1, 0.5, 44100.7, math.inf, False])
def test_require_sample_rate_rejects(value):
    with pytest.raises(InvalidArgumentError):
        require_sample_rate("sample_rate", value)


def test_require_confidence():
    assert require_confidence("confidence", None) is None
    assert require_confidence("confidence", 0.9) == 0.9
    with pytest.raises(InvalidArgumentError):
        require_confidence("confidence", "0.9")
    with pytest.raises(InvalidArgumentError):
        require_confidence("confidence", math.nan)


def test_audio_load_error_without_reason():
    assert str(AudioLoadError("clip.wav")) == "Failed to load audio 'clip.wav'"
