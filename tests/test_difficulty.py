import pytest

from speech_coach.scoring.difficulty import classify_difficulty


@pytest.mark.parametrize(
    "word,expected",
    [
        ("cat", "easy"),
        ("a", "easy"),
        ("apple", "medium"),
        ("elephants", "hard"),
        ("think", "complex"),
        ("strength", "complex"),
        ("abc123", "medium"),
    ],
)
def test_classify_difficulty(word, expected):
    assert classify_difficulty(word) == expected
