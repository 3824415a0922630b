"""Reference-based and reference-free scoring engines."""
from .difficulty import classify_difficulty
from .free_speech import (
    assess_free_speech,
    calculate_clarity_score,
    calculate_fluency_score,
    calculate_metrics,
    calculate_overall_score,
    calculate_pronunciation_score,
    find_filler_words,
)
from .grammar import (
    NltkSentenceAnalyzer,
    SentenceAnalyzer,
    calculate_grammar_score,
    get_default_analyzer,
)
from .reference import analyze_word, assess_reference_based, calculate_scores

__all__ = [
    "classify_difficulty",
    "assess_free_speech",
    "calculate_clarity_score",
    "calculate_fluency_score",
    "calculate_metrics",
    "calculate_overall_score",
    "calculate_pronunciation_score",
    "find_filler_words",
    "NltkSentenceAnalyzer",
    "SentenceAnalyzer",
    "calculate_grammar_score",
    "get_default_analyzer",
    "analyze_word",
    "assess_reference_based",
    "calculate_scores",
]
