"""Reference text validation and clean-up."""
from .validation import (
    DocumentError,
    SuitabilityReport,
    TextStats,
    TextValidationResult,
    clean_text_for_practice,
    count_sentences,
    count_words,
    estimate_reading_time,
    format_text_stats,
    get_text_snippet,
    is_text_suitable_for_practice,
    truncate_text_at_sentence,
    validate_text,
    validate_text_length,
)

__all__ = [
    "DocumentError",
    "SuitabilityReport",
    "TextStats",
    "TextValidationResult",
    "clean_text_for_practice",
    "count_sentences",
    "count_words",
    "estimate_reading_time",
    "format_text_stats",
    "get_text_snippet",
    "is_text_suitable_for_practice",
    "truncate_text_at_sentence",
    "validate_text",
    "validate_text_length",
]
