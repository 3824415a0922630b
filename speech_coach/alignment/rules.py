"""Thresholds for greedy word alignment."""
from __future__ import annotations

# Minimum similarity for two different words to be treated as the same word
# when walking the reference and the transcription side by side
ALIGNMENT_SIMILARITY_THRESHOLD = 0.5
