"""Heuristic sound extraction and confusable-sound error detection."""
from __future__ import annotations

from typing import List

from speech_coach.models.assessment import PhonemeScore
from .sound_map import COMMON_MISTAKES, DIGRAPH_SOUNDS, LETTER_SOUNDS


def extract_sounds(word: str) -> List[str]:
    """Map a word's spelling to a coarse sequence of sound symbols.

    Scans left to right; a known two-letter spelling consumes two
    characters, anything else consumes one (vowels are mapped, other
    letters are kept as-is).

    Example: "think" -> ["θ", "ɪ", "n", "k"]
    """
    sounds: List[str] = []
    i = 0
    while i < len(word):
        pair = word[i:i + 2]
        if len(pair) == 2 and pair in DIGRAPH_SOUNDS:
            sounds.append(DIGRAPH_SOUNDS[pair])
            i += 2
        else:
            char = word[i]
            sounds.append(LETTER_SOUNDS.get(char, char))
            i += 1
    return [s for s in sounds if s]


def find_phoneme_errors(original: str, transcribed: str) -> List[str]:
    """List likely sound errors between a reference word and what was heard.

    Two kinds of errors are reported, in this order:
      - "<mistake> instead of <correct>" when the original contains a
        pattern from COMMON_MISTAKES and the transcription contains one of
        its usual substitutes but not the pattern itself
      - "missing <sound>" for every sound of the original that does not
        occur anywhere in the transcription's sounds

    This is best-effort feedback; false positives are expected.
    """
    errors: List[str] = []

    for correct, mistakes in COMMON_MISTAKES.items():
        if correct not in original:
            continue
        for mistake in mistakes:
            if mistake in transcribed and correct not in transcribed:
                errors.append(f"{mistake} instead of {correct}")

    transcribed_sounds = set(extract_sounds(transcribed))
    for sound in extract_sounds(original):
        if sound not in transcribed_sounds:
            errors.append(f"missing {sound}")

    return errors


def phoneme_breakdown(original: str, transcribed: str) -> List[PhonemeScore]:
    """Position-by-position comparison of expected and heard sounds.

    The shorter sequence is padded with "" so every position of the longer
    one is reported. Equal sounds score 100, anything else 0.
    """
    expected = extract_sounds(original)
    actual = extract_sounds(transcribed)
    scores: List[PhonemeScore] = []
    for index in range(max(len(expected), len(actual))):
        exp = expected[index] if index < len(expected) else ""
        act = actual[index] if index < len(actual) else ""
        scores.append(PhonemeScore(expected=exp, actual=act, score=100 if exp == act else 0))
    return scores
