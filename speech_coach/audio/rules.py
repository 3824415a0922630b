"""Thresholds for frame-based envelope analysis."""
from __future__ import annotations

# Frame RMS below this amplitude counts as silence
SILENCE_THRESHOLD = 0.01

# Silences shorter than this are gaps between words, not pauses (seconds)
MIN_PAUSE_DURATION = 0.3

# Samples per analysis frame
FRAME_SIZE = 2048
