"""Greedy alignment of reference words against transcribed words."""
from __future__ import annotations

from typing import List, Sequence

from speech_coach.models.aligned_word import AlignmentPair
from speech_coach.utils.validation import require_tokens
from .edit_distance import similarity
from .rules import ALIGNMENT_SIMILARITY_THRESHOLD


def align(
    reference: Sequence[str],
    hypothesis: Sequence[str],
    threshold: float = ALIGNMENT_SIMILARITY_THRESHOLD,
) -> List[AlignmentPair]:
    """Walk both token lists with two pointers and pair them up.

    At each step, in order of preference:
      1. exact match -> pair, advance both
      2. similarity > threshold -> pair, advance both
      3. next transcribed token matches the reference token -> drop the
         current transcribed token (insertion), advance hypothesis only
      4. next reference token matches the transcribed token -> emit
         (reference, "") as a deletion, advance reference only
      5. otherwise -> forced substitution, advance both

    Reference tokens left over at the end become deletions. Transcribed
    tokens left over are dropped, so every reference token appears exactly
    once as ``original`` but extra spoken words are not reported.

    This is a local heuristic, not a minimum-edit-distance alignment; long
    runs of consecutive errors can make it drift.

    Args:
        reference: Normalized reference tokens
        hypothesis: Normalized transcribed tokens
        threshold: Similarity above which two words are considered aligned

    Returns:
        One AlignmentPair per reference token, in reference order

    Raises:
        InvalidArgumentError: If either argument is not a sequence of str
    """
    ref = require_tokens("reference", reference)
    hyp = require_tokens("hypothesis", hypothesis)

    pairs: List[AlignmentPair] = []
    i, j = 0, 0

    while i < len(ref) and j < len(hyp):
        ref_word, hyp_word = ref[i], hyp[j]

        if ref_word == hyp_word or similarity(ref_word, hyp_word) > threshold:
            pairs.append(AlignmentPair(ref_word, hyp_word))
            i += 1
            j += 1
        elif j + 1 < len(hyp) and similarity(ref_word, hyp[j + 1]) > threshold:
            j += 1
        elif i + 1 < len(ref) and similarity(ref[i + 1], hyp_word) > threshold:
            pairs.append(AlignmentPair(ref_word, ""))
            i += 1
        else:
            pairs.append(AlignmentPair(ref_word, hyp_word))
            i += 1
            j += 1

    for ref_word in ref[i:]:
        pairs.append(AlignmentPair(ref_word, ""))

    return pairs
