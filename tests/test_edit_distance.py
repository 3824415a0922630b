import itertools

import pytest

from speech_coach.alignment import levenshtein_distance, similarity
from speech_coach.exceptions import InvalidArgumentError

WORDS = ["", "a", "cat", "bat", "mat", "kitten", "sitting", "through", "threw", "ünï"]


def test_levenshtein_distance_classic_example():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("abc", "abc") == 0


def test_similarity_known_values():
    assert similarity("kitten", "sitting") == pytest.approx(4 / 7)
    assert similarity("mat", "bat") == pytest.approx(2 / 3)


def test_similarity_identity_and_empty():
    assert similarity("", "") == 1.0
    assert similarity("word", "word") == 1.0
    assert similarity("", "x") == 0.0
    assert similarity("x", "") == 0.0


@pytest.mark.parametrize("a,b", list(itertools.combinations(WORDS, 2)))
def test_similarity_is_symmetric_and_bounded(a, b):
    forward = similarity(a, b)
    assert forward == similarity(b, a)
    assert 0.0 <= forward <= 1.0


def test_similarity_rejects_non_string():
    with pytest.raises(InvalidArgumentError):
        similarity("cat", ["c", "a", "t"])
