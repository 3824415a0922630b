"""Validation and clean-up of reference texts before practice.

The assessment engines do not bound their input; callers run texts
through these checks first so that the quadratic word similarity never
sees unbounded documents.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from . import limits

_ZERO_WIDTH = re.compile("[\u200b-\u200d\ufeff]")
_DOUBLE_QUOTES = re.compile("[\u201c\u201d]")
_SINGLE_QUOTES = re.compile("[\u2018\u2019]")
_SPACE_BEFORE_PUNCT = re.compile(r"\s+([,.!?;:])")
_SPACE_AFTER_PUNCT = re.compile(r"([,.!?;:])\s*")
_NON_STANDARD = re.compile(r"[^\w\s\-.,!?;:()'\"/\n]")


@dataclass(frozen=True)
class TextStats:
    characters: int = 0
    words: int = 0
    sentences: int = 0
    estimated_reading_time: int = 0


@dataclass(frozen=True)
class TextValidationResult:
    is_valid: bool
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    stats: TextStats = field(default_factory=TextStats)


@dataclass(frozen=True)
class DocumentError:
    code: str  # "TEXT_TOO_LONG"
    message: str


@dataclass(frozen=True)
class SuitabilityReport:
    suitable: bool
    reasons: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()


def count_words(text: str) -> int:
    """Count whitespace-separated tokens that contain a word character."""
    if not text or not isinstance(text, str):
        return 0
    return sum(1 for word in text.split() if re.search(r"\w", word))


def count_sentences(text: str) -> int:
    if not text or not isinstance(text, str):
        return 0
    return sum(1 for sentence in re.split(r"[.!?]+", text) if sentence.strip())


def estimate_reading_time(text: str) -> int:
    """Reading time in whole minutes at 180 words per minute."""
    return math.ceil(count_words(text) / limits.READING_WPM)


def clean_text_for_practice(
    text: str,
    allow_empty_lines: bool = False,
    preserve_formatting: bool = False,
) -> str:
    """Normalize whitespace, quotes and punctuation runs in a practice text."""
    if not text or not isinstance(text, str):
        return ""

    cleaned = text
    if not preserve_formatting:
        cleaned = re.sub(r"[ \t]+", " ", cleaned)
        if allow_empty_lines:
            cleaned = re.sub(r"\n{3,}", "\n\n", cleaned)
        else:
            cleaned = re.sub(r"\n+", " ", cleaned)

    cleaned = _ZERO_WIDTH.sub("", cleaned)
    cleaned = _DOUBLE_QUOTES.sub('"', cleaned)
    cleaned = _SINGLE_QUOTES.sub("'", cleaned)
    cleaned = re.sub(r"\.{4,}", "...", cleaned)
    cleaned = re.sub(r"!{2,}", "!", cleaned)
    cleaned = re.sub(r"\?{2,}", "?", cleaned)
    cleaned = _SPACE_BEFORE_PUNCT.sub(r"\1", cleaned)
    cleaned = _SPACE_AFTER_PUNCT.sub(r"\1 ", cleaned)
    return re.sub(r"\s+", " ", cleaned).strip()


def validate_text(
    text: str,
    max_characters: int = limits.MAX_CHARACTERS_PRACTICE,
    max_words: int = limits.MAX_WORDS_PRACTICE,
    min_characters: int = limits.MIN_CHARACTERS,
    min_words: int = limits.MIN_WORDS,
) -> TextValidationResult:
    """Check a practice text against length limits and flag oddities.

    Errors make the text invalid; warnings are informational.
    """
    if not text or not isinstance(text, str):
        return TextValidationResult(is_valid=False, errors=("Text is required",))

    cleaned = clean_text_for_practice(text)
    characters = len(cleaned)
    words = count_words(cleaned)
    sentences = count_sentences(cleaned)
    reading_time = estimate_reading_time(cleaned)

    errors: List[str] = []
    warnings: List[str] = []

    if characters < min_characters:
        errors.append(f"Text is too short. Minimum {min_characters} characters required.")
    if characters > max_characters:
        errors.append(f"Text is too long. Maximum {max_characters} characters allowed.")
    if words < min_words:
        errors.append(f"Text is too short. Minimum {min_words} words required.")
    if words > max_words:
        errors.append(f"Text is too long. Maximum {max_words} words allowed.")

    if sentences == 0:
        warnings.append("Text appears to have no complete sentences.")
    if words > 0 and characters / words > limits.LONG_WORD_AVERAGE:
        warnings.append("Text may contain very long words that could be difficult to pronounce.")
    if reading_time > limits.LONG_READING_MINUTES:
        warnings.append("Text is quite long and may take over 15 minutes to read aloud.")
    if len(_NON_STANDARD.findall(cleaned)) > limits.MAX_SPECIAL_CHARACTERS:
        warnings.append("Text contains many special characters that may affect pronunciation.")

    return TextValidationResult(
        is_valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
        stats=TextStats(
            characters=characters,
            words=words,
            sentences=sentences,
            estimated_reading_time=reading_time,
        ),
    )


def validate_text_length(text: str) -> Optional[DocumentError]:
    """Return a TEXT_TOO_LONG error when extracted document text is over the cap."""
    word_count = len(text.split())
    if len(text) > limits.DOCUMENT_MAX_CHARACTERS:
        return DocumentError(
            code="TEXT_TOO_LONG",
            message=(
                f"Text exceeds {limits.DOCUMENT_MAX_CHARACTERS} character limit. "
                f"Current: {len(text)} characters."
            ),
        )
    if word_count > limits.DOCUMENT_MAX_WORDS:
        return DocumentError(
            code="TEXT_TOO_LONG",
            message=(
                f"Text exceeds {limits.DOCUMENT_MAX_WORDS} word limit. "
                f"Current: {word_count} words."
            ),
        )
    return None


def truncate_text_at_sentence(text: str, max_length: int) -> Tuple[str, bool]:
    """Cut text to at most max_length characters, preferring sentence ends.

    Falls back to a word boundary when not even the first sentence fits.

    Returns:
        (truncated_text, is_truncated)
    """
    if not text or len(text) <= max_length:
        return text, False

    parts = re.split(r"([.!?]+)", text)
    truncated = ""
    is_truncated = False

    for i in range(0, len(parts), 2):
        sentence = parts[i]
        punctuation = parts[i + 1] if i + 1 < len(parts) else ""
        candidate = truncated + sentence + punctuation
        if len(candidate) > max_length:
            is_truncated = True
            break
        truncated = candidate

    if not truncated:
        for word in text.split():
            candidate = f"{truncated} {word}" if truncated else word
            if len(candidate) > max_length:
                break
            truncated = candidate
        is_truncated = True

    return truncated or text[:max_length], is_truncated or len(truncated) < len(text)


def get_text_snippet(text: str, max_length: int = limits.SNIPPET_CHARACTERS) -> str:
    """Preview of text ending in "...", cut at a space when one is near the end."""
    if not text or len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > max_length * 0.8:
        return truncated[:last_space] + "..."
    return truncated + "..."


def format_text_stats(stats: TextStats) -> str:
    parts = [f"{stats.words:,} words", f"{stats.characters:,} characters"]
    if stats.sentences > 0:
        parts.append(f"{stats.sentences} sentences")
    if stats.estimated_reading_time > 0:
        parts.append(f"~{stats.estimated_reading_time} min read")
    return " • ".join(parts)


def is_text_suitable_for_practice(text: str) -> SuitabilityReport:
    """Judge whether a text makes a good read-aloud exercise."""
    validation = validate_text(text)
    reasons: List[str] = list(validation.errors)
    suggestions: List[str] = []
    words = validation.stats.words
    characters = validation.stats.characters

    if words < limits.SUITABLE_MIN_WORDS:
        reasons.append("Text is quite short for meaningful practice")
        suggestions.append("Consider adding more content or combining with other texts")

    if validation.stats.sentences < limits.SUITABLE_MIN_SENTENCES:
        reasons.append("Text has very few complete sentences")
        suggestions.append("Add more complete sentences for better practice flow")

    if words > 0 and characters / words > limits.SUITABLE_MAX_WORD_AVERAGE:
        reasons.append("Text contains many long or complex words")
        suggestions.append("Consider simplifying vocabulary for clearer pronunciation practice")

    numbers = re.findall(r"\d+", text) if isinstance(text, str) else []
    if numbers and len(numbers) > words * limits.SUITABLE_MAX_NUMBER_RATIO:
        reasons.append("Text contains many numbers which may be hard to pronounce naturally")
        suggestions.append("Consider replacing numbers with written-out versions")

    return SuitabilityReport(
        suitable=not reasons,
        reasons=tuple(reasons),
        suggestions=tuple(suggestions),
    )
