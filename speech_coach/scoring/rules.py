"""Weights and thresholds for both assessment engines."""
from __future__ import annotations

# --- Reference-based scoring ---

# A word counts as correctly pronounced above this similarity
WORD_MATCH_THRESHOLD = 0.8

# Below this similarity an unmatched word is "significantly different"
WORD_DISTANT_THRESHOLD = 0.3

# Typical read-aloud speed; also assumed when the duration is unknown
EXPECTED_READING_WPM = 180.0

ACCURACY_WEIGHT = 0.7
FLUENCY_WEIGHT = 0.3

# Upper bounds for accuracy / fluency suggestion bands: (low, fair)
ACCURACY_BANDS = (70, 85)
FLUENCY_BANDS = (60, 80)

# Overall score at or above which praise is added: (excellent, good)
OVERALL_PRAISE_BANDS = (85, 70)

MAX_SUGGESTIONS = 5

# --- Free speech scoring ---

OPTIMAL_WPM = 140.0
MIN_NATURAL_WPM = 100.0
MAX_NATURAL_WPM = 180.0

# Used when the transcription provider reports no confidence
DEFAULT_CONFIDENCE = 0.85

MAX_SPEED_PENALTY = 30.0
SPEED_PENALTY_SCALE = 50.0
ACCEPTABLE_PAUSES_PER_MINUTE = 3.0
PAUSE_PENALTY_PER_EXTRA_PAUSE = 5.0
MAX_PAUSE_PENALTY = 20.0
MAX_FILLER_PENALTY = 25.0

CLARITY_CONFIDENCE_WEIGHT = 0.7
CLARITY_VOLUME_WEIGHT = 0.3

# Grammar: max deduction for sentences missing a verb or a noun
INCOMPLETE_SENTENCE_PENALTY = 30.0
# Grammar: points carried by capitalization and by end punctuation
GRAMMAR_SUBSCORE_POINTS = 10.0
GRAMMAR_BLEND = 0.9
NO_SENTENCE_GRAMMAR_SCORE = 50

# Pronunciation bonus for longer words: min(cap, (avg_len - floor) * rate)
WORD_LENGTH_BONUS_FLOOR = 5.0
WORD_LENGTH_BONUS_RATE = 2.0
WORD_LENGTH_BONUS_CAP = 10.0

FLUENCY_OVERALL_WEIGHT = 0.30
CLARITY_OVERALL_WEIGHT = 0.25
GRAMMAR_OVERALL_WEIGHT = 0.20
PRONUNCIATION_OVERALL_WEIGHT = 0.25

FILLER_WORDS = (
    "um",
    "uh",
    "uhm",
    "hmm",
    "err",
    "ah",
    "like",
    "you know",
    "sort of",
    "kind of",
    "basically",
    "actually",
    "literally",
    "i mean",
)

# Feedback bands
HIGH_CONFIDENCE = 0.85
FAIR_CONFIDENCE = 0.70
RICH_VOCABULARY = 0.7
POOR_VOCABULARY = 0.5
LIMITED_VOCABULARY = 0.6
MAX_PAUSES_BEFORE_WARNING = 10
STRENGTH_SCORE = 80
SUGGESTION_SCORE = 75
IMPROVEMENT_SCORE = 70
FILLER_SUGGESTION_COUNT = 3
FILLER_IMPROVEMENT_COUNT = 5
