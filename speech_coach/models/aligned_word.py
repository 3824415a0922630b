"""Data model for a reference word paired with what was transcribed."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AlignmentPair:
    """Represents one reference word and the transcribed word aligned to it.

    Attributes:
        original: The normalized word from the reference text
        transcribed: The normalized transcribed word, or "" when the
            reference word was never said (deletion)
    """
    original: str
    transcribed: str

    @property
    def is_deletion(self) -> bool:
        return self.transcribed == ""
