import pytest

from speech_coach.alignment import normalize
from speech_coach.exceptions import InvalidArgumentError


def test_normalize_lowercases_and_strips_punctuation():
    assert normalize("Hello,  World!") == ["hello", "world"]


def test_normalize_drops_apostrophes_and_collapses_whitespace():
    assert normalize("It's a\tdog's\n\nlife.") == ["its", "a", "dogs", "life"]


@pytest.mark.parametrize("text", ["", "   ", "?!.,", None])
def test_normalize_empty_inputs(text):
    assert normalize(text) == []


@pytest.mark.parametrize(
    "text",
    ["The Quick, brown fox!", "  spaced   out  ", "Ünïcode wörds, too.", "a_b c-d"],
)
def test_normalize_is_idempotent(text):
    tokens = normalize(text)
    assert normalize(" ".join(tokens)) == tokens


def test_normalize_rejects_non_string():
    with pytest.raises(InvalidArgumentError):
        normalize(123)
