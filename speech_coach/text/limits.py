"""Length limits for practice texts and uploaded documents."""
from __future__ import annotations

MAX_CHARACTERS_PRACTICE = 10000
MAX_WORDS_PRACTICE = 2000

MIN_CHARACTERS = 50
MIN_WORDS = 10

SNIPPET_CHARACTERS = 150

# Extracted document text is capped at the practice limits
DOCUMENT_MAX_CHARACTERS = MAX_CHARACTERS_PRACTICE
DOCUMENT_MAX_WORDS = MAX_WORDS_PRACTICE

READING_WPM = 180

# Warning thresholds
LONG_WORD_AVERAGE = 15
LONG_READING_MINUTES = 15
MAX_SPECIAL_CHARACTERS = 10

# Suitability thresholds
SUITABLE_MIN_WORDS = 50
SUITABLE_MIN_SENTENCES = 3
SUITABLE_MAX_WORD_AVERAGE = 12
SUITABLE_MAX_NUMBER_RATIO = 0.1
