"""Static spelling-to-sound tables used by the phoneme heuristics.

These are coarse orthographic approximations, not a pronouncing
dictionary: each digraph or vowel letter maps to one IPA-like symbol.
"""
from __future__ import annotations

from typing import Dict, Tuple

# Two-letter spellings, checked before single letters
DIGRAPH_SOUNDS: Dict[str, str] = {
    # vowels
    "ee": "i",
    "oo": "u",
    "ou": "aʊ",
    "ow": "aʊ",
    "ay": "eɪ",
    "ai": "eɪ",
    "ey": "eɪ",
    "ie": "aɪ",
    # consonants
    "th": "θ",
    "sh": "ʃ",
    "ch": "tʃ",
    "ng": "ŋ",
    "ph": "f",
    "gh": "f",
    "ck": "k",
    # silent letters
    "kn": "n",
    "wr": "r",
    "mb": "m",
}

# Single vowel letters; any other letter stands for itself
LETTER_SOUNDS: Dict[str, str] = {
    "a": "æ",
    "e": "ɛ",
    "i": "ɪ",
    "o": "ɔ",
    "u": "ʌ",
    "y": "aɪ",
}

# correct spelling -> spellings a learner commonly substitutes for it
COMMON_MISTAKES: Dict[str, Tuple[str, ...]] = {
    "th": ("f", "d", "t", "s"),
    "v": ("w", "b"),
    "w": ("v",),
    "r": ("l",),
    "l": ("r",),
    "p": ("b",),
    "b": ("p",),
    "t": ("d",),
    "d": ("t",),
    "k": ("g",),
    "g": ("k",),
}
