"""Levenshtein edit distance and the similarity derived from it."""
from __future__ import annotations

from typing import List

from speech_coach.utils.validation import require_text


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance with unit cost for insert, delete and substitute.

    Fills the full (len(b)+1) x (len(a)+1) dynamic-programming matrix.
    Strings are compared by code point.
    """
    rows, cols = len(b) + 1, len(a) + 1
    matrix: List[List[int]] = [[0] * cols for _ in range(rows)]

    for i in range(cols):
        matrix[0][i] = i
    for j in range(rows):
        matrix[j][0] = j

    for j in range(1, rows):
        for i in range(1, cols):
            cost_sub = 0 if a[i - 1] == b[j - 1] else 1
            matrix[j][i] = min(
                matrix[j][i - 1] + 1,  # insertion
                matrix[j - 1][i] + 1,  # deletion
                matrix[j - 1][i - 1] + cost_sub,
            )
    return matrix[rows - 1][cols - 1]


def similarity(a: str, b: str) -> float:
    """Normalized similarity in [0, 1] between two tokens.

    (max_len - edit_distance) / max_len. Equal strings (including two
    empty strings) score 1.0; an empty string against a non-empty one
    scores 0.0.

    Raises:
        InvalidArgumentError: If either argument is not a string
    """
    a = require_text("a", a)
    b = require_text("b", b)
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    max_len = max(len(a), len(b))
    return (max_len - levenshtein_distance(a, b)) / max_len
