import re

import numpy as np
import pytest

from speech_coach.scoring.grammar import SentenceAnalyzer


def tone(n_samples, sample_rate=16000, amplitude=0.5, freq=220.0):
    t = np.arange(n_samples) / sample_rate
    # phase offset keeps the first samples of each tone away from zero
    return (amplitude * np.sin(2 * np.pi * freq * t + np.pi / 2)).astype(np.float32)


def silence(n_samples):
    return np.zeros(n_samples, dtype=np.float32)


class KeywordSentenceAnalyzer(SentenceAnalyzer):
    """Deterministic stand-in for an NLP toolkit."""

    VERBS = {"is", "are", "think", "went", "like", "runs", "was"}
    NOUNS = {"i", "you", "this", "dog", "it", "park", "we"}

    def split_sentences(self, text):
        return [s.strip() for s in re.findall(r"[^.!?]+[.!?]*", text) if s.strip()]

    def _words(self, sentence):
        return set(re.findall(r"[a-z']+", sentence.lower()))

    def has_verb(self, sentence):
        return bool(self._words(sentence) & self.VERBS)

    def has_noun(self, sentence):
        return bool(self._words(sentence) & self.NOUNS)


@pytest.fixture
def analyzer():
    return KeywordSentenceAnalyzer()


@pytest.fixture
def steady_speech():
    """Three seconds of uninterrupted tone at 16 kHz."""
    return tone(48000), 16000
