"""Pronunciation and free speech assessment engines."""
from .alignment import align, normalize, similarity
from .audio import analyze_audio, load_audio_mono, volume_consistency
from .exceptions import (
    AudioLoadError,
    GrammarResourceError,
    InvalidArgumentError,
    SpeechCoachError,
)
from .models import (
    AlignmentPair,
    AudioFeatures,
    FreeSpeechAssessment,
    FreeSpeechMetrics,
    Pause,
    PronunciationAssessment,
    TranscriptionChunk,
    WordAnalysis,
    WordLevelScore,
)
from .scoring import (
    NltkSentenceAnalyzer,
    SentenceAnalyzer,
    assess_free_speech,
    assess_reference_based,
)

__all__ = [
    "align",
    "normalize",
    "similarity",
    "analyze_audio",
    "load_audio_mono",
    "volume_consistency",
    "assess_free_speech",
    "assess_reference_based",
    "NltkSentenceAnalyzer",
    "SentenceAnalyzer",
    "AudioLoadError",
    "GrammarResourceError",
    "InvalidArgumentError",
    "SpeechCoachError",
    "AlignmentPair",
    "AudioFeatures",
    "FreeSpeechAssessment",
    "FreeSpeechMetrics",
    "Pause",
    "PronunciationAssessment",
    "TranscriptionChunk",
    "WordAnalysis",
    "WordLevelScore",
]
