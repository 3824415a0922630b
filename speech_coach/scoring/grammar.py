"""Grammar heuristics for transcribed free speech.

Grammar scoring only needs three capabilities from an NLP toolkit:
splitting text into sentences and telling whether a sentence has a verb
and a noun. SentenceAnalyzer captures that; NltkSentenceAnalyzer is the
default implementation.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import List, Optional, Tuple

import nltk
from nltk.tokenize import wordpunct_tokenize
from nltk.tokenize.punkt import PunktSentenceTokenizer

from speech_coach.config import NLTK_DATA_DIR
from speech_coach.exceptions import GrammarResourceError
from speech_coach.utils.logger import get_logger
from speech_coach.utils.numeric import round_half_up
from .rules import (
    GRAMMAR_BLEND,
    GRAMMAR_SUBSCORE_POINTS,
    INCOMPLETE_SENTENCE_PENALTY,
    NO_SENTENCE_GRAMMAR_SCORE,
)

logger = get_logger(__name__)

if NLTK_DATA_DIR and NLTK_DATA_DIR not in nltk.data.path:
    nltk.data.path.append(NLTK_DATA_DIR)

TAGGER_RESOURCE = "averaged_perceptron_tagger_eng"

VERB_TAG_PREFIXES = ("VB", "MD")
# Pronouns stand in for nouns as sentence subjects
NOUN_TAG_PREFIXES = ("NN", "PRP")

_CAPITALIZED = re.compile(r"^[A-Z]")
_TERMINATED = re.compile(r"[.!?]$")


class SentenceAnalyzer(ABC):
    """Minimal NLP capability needed for grammar scoring."""

    @abstractmethod
    def split_sentences(self, text: str) -> List[str]:
        """Split text into sentences."""
        pass

    @abstractmethod
    def has_verb(self, sentence: str) -> bool:
        pass

    @abstractmethod
    def has_noun(self, sentence: str) -> bool:
        pass


@lru_cache(maxsize=512)
def _pos_tags(sentence: str) -> Tuple[str, ...]:
    tokens = wordpunct_tokenize(sentence)
    if not tokens:
        return ()
    try:
        return tuple(tag for _, tag in nltk.pos_tag(tokens, lang="eng"))
    except LookupError as e:
        raise GrammarResourceError(TAGGER_RESOURCE) from e


class NltkSentenceAnalyzer(SentenceAnalyzer):
    """SentenceAnalyzer backed by NLTK.

    Sentences come from an untrained Punkt tokenizer (no corpus download);
    verbs and nouns from the averaged perceptron part-of-speech tagger.
    """

    def __init__(self) -> None:
        self._splitter = PunktSentenceTokenizer()

    def split_sentences(self, text: str) -> List[str]:
        return [s.strip() for s in self._splitter.tokenize(text) if s.strip()]

    def has_verb(self, sentence: str) -> bool:
        return any(tag.startswith(VERB_TAG_PREFIXES) for tag in _pos_tags(sentence))

    def has_noun(self, sentence: str) -> bool:
        return any(tag.startswith(NOUN_TAG_PREFIXES) for tag in _pos_tags(sentence))


_default_analyzer: Optional[SentenceAnalyzer] = None


def get_default_analyzer() -> SentenceAnalyzer:
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = NltkSentenceAnalyzer()
    return _default_analyzer


def calculate_grammar_score(text: str, analyzer: Optional[SentenceAnalyzer] = None) -> int:
    """Score sentence structure, capitalization and end punctuation.

    Starts at 100 and subtracts up to 30 points for the share of sentences
    missing a verb or a noun. Capitalization and end punctuation are then
    each blended in as score = score * 0.9 + (share correct * 10).
    Text with no sentences scores 50.

    Raises:
        GrammarResourceError: If the NLTK tagger data is not installed
    """
    analyzer = analyzer or get_default_analyzer()
    sentences = analyzer.split_sentences(text)
    if not sentences:
        logger.debug("No sentences found, grammar score defaults to %d", NO_SENTENCE_GRAMMAR_SCORE)
        return NO_SENTENCE_GRAMMAR_SCORE

    count = len(sentences)
    incomplete = sum(
        1 for s in sentences if not analyzer.has_verb(s) or not analyzer.has_noun(s)
    )
    score = 100.0 - incomplete / count * INCOMPLETE_SENTENCE_PENALTY

    capitalized = sum(1 for s in sentences if _CAPITALIZED.match(s.strip()))
    score = score * GRAMMAR_BLEND + capitalized / count * GRAMMAR_SUBSCORE_POINTS

    terminated = sum(1 for s in sentences if _TERMINATED.search(s.strip()))
    score = score * GRAMMAR_BLEND + terminated / count * GRAMMAR_SUBSCORE_POINTS

    return max(0, round_half_up(score))
