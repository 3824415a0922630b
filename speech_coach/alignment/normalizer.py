"""Text normalization shared by every text-based scorer."""
from __future__ import annotations

import re
from typing import List

from speech_coach.utils.validation import require_text

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> List[str]:
    """Lowercase text, strip punctuation and split it into word tokens.

    Example: "Hello,  World!" -> ["hello", "world"]

    Args:
        text: Raw text (None is treated as empty)

    Returns:
        List of non-empty tokens

    Raises:
        InvalidArgumentError: If text is not a string
    """
    text = require_text("text", text)
    cleaned = _NON_WORD.sub("", text.lower())
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    return [token for token in cleaned.split(" ") if token]
