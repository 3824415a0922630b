"""Word difficulty tiers for per-word feedback."""
from __future__ import annotations

import re

EASY = re.compile(r"^[a-z]{1,4}$", re.IGNORECASE)
HARD = re.compile(r"^[a-z]{8,}$", re.IGNORECASE)
COMPLEX = re.compile(r"(th|sh|ch|ng|ough|augh|eigh)", re.IGNORECASE)


def classify_difficulty(word: str) -> str:
    """Return "complex", "hard", "easy" or "medium" for a reference word.

    Any word containing a hard spelling pattern is complex regardless of
    length. Words that do not match a length tier (digits, accents) fall
    back to medium.
    """
    if COMPLEX.search(word):
        return "complex"
    if HARD.match(word):
        return "hard"
    if EASY.match(word):
        return "easy"
    return "medium"
