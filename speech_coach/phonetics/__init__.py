"""Spelling-based sound heuristics for pronunciation feedback."""
from .phoneme_errors import extract_sounds, find_phoneme_errors, phoneme_breakdown
from .sound_map import COMMON_MISTAKES, DIGRAPH_SOUNDS, LETTER_SOUNDS

__all__ = [
    "extract_sounds",
    "find_phoneme_errors",
    "phoneme_breakdown",
    "COMMON_MISTAKES",
    "DIGRAPH_SOUNDS",
    "LETTER_SOUNDS",
]
