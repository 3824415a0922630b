"""Value objects returned by the assessment engines."""
from .aligned_word import AlignmentPair
from .assessment import (
    PhonemeScore,
    PronunciationAssessment,
    WordAnalysis,
    WordLevelScore,
)
from .audio import AudioFeatures, Pause
from .free_speech import FreeSpeechAssessment, FreeSpeechMetrics, TranscriptionChunk

__all__ = [
    "AlignmentPair",
    "PhonemeScore",
    "PronunciationAssessment",
    "WordAnalysis",
    "WordLevelScore",
    "AudioFeatures",
    "Pause",
    "FreeSpeechAssessment",
    "FreeSpeechMetrics",
    "TranscriptionChunk",
]
