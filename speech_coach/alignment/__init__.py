"""Normalization, similarity and alignment of reference and transcribed words."""
from .aligner import align
from .edit_distance import levenshtein_distance, similarity
from .normalizer import normalize
from .rules import ALIGNMENT_SIMILARITY_THRESHOLD

__all__ = [
    "align",
    "levenshtein_distance",
    "similarity",
    "normalize",
    "ALIGNMENT_SIMILARITY_THRESHOLD",
]
