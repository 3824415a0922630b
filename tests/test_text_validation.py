from speech_coach.text import (
    TextStats,
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

PANGRAMS = " ".join(["The quick brown fox jumps over the lazy dog."] * 7)


def test_count_words_ignores_punctuation_only_tokens():
    assert count_words("Hello, world! 123 --") == 3
    assert count_words("") == 0


def test_count_sentences():
    assert count_sentences("One. Two! Three?") == 3
    assert count_sentences("...") == 0
    assert count_sentences("") == 0


def test_estimate_reading_time_rounds_up():
    assert estimate_reading_time(" ".join(["word"] * 181)) == 2
    assert estimate_reading_time("") == 0


def test_clean_text_for_practice():
    assert clean_text_for_practice("Hello   world !!\nHow are you ??") == "Hello world! How are you?"
    assert clean_text_for_practice("\u201cHi\u201d she said") == '"Hi" she said'
    assert clean_text_for_practice("it\u2019s a\u200bb") == "it's ab"
    assert clean_text_for_practice(None) == ""


def test_validate_empty_text():
    result = validate_text("")
    assert not result.is_valid
    assert result.errors == ("Text is required",)


def test_validate_short_text():
    result = validate_text("Short text.")
    assert not result.is_valid
    assert result.errors == (
        "Text is too short. Minimum 50 characters required.",
        "Text is too short. Minimum 10 words required.",
    )


def test_validate_good_text():
    result = validate_text(PANGRAMS)
    assert result.is_valid
    assert result.warnings == ()
    assert result.stats == TextStats(
        characters=314, words=63, sentences=7, estimated_reading_time=1
    )


def test_validate_word_limit():
    result = validate_text(PANGRAMS, max_words=20)
    assert "Text is too long. Maximum 20 words allowed." in result.errors


def test_validate_text_length():
    assert validate_text_length("short") is None

    too_many_words = validate_text_length("a " * 2001)
    assert too_many_words.code == "TEXT_TOO_LONG"
    assert "2000 word limit" in too_many_words.message

    too_many_chars = validate_text_length("x" * 10001)
    assert "10000 character limit" in too_many_chars.message


def test_truncate_at_sentence_boundary():
    assert truncate_text_at_sentence("First one. Second one. Third.", 23) == (
        "First one. Second one.",
        True,
    )


def test_truncate_short_text_untouched():
    assert truncate_text_at_sentence("Hi.", 10) == ("Hi.", False)


def test_truncate_falls_back_to_words():
    assert truncate_text_at_sentence("alpha beta gamma delta", 12) == ("alpha beta", True)


def test_get_text_snippet():
    text = "word " * 40
    snippet = get_text_snippet(text, 150)
    assert snippet == " ".join(["word"] * 30) + "..."
    assert get_text_snippet("a" * 200, 150) == "a" * 150 + "..."
    assert get_text_snippet("short", 150) == "short"


def test_format_text_stats():
    stats = TextStats(characters=1234, words=250, sentences=12, estimated_reading_time=2)
    assert format_text_stats(stats) == "250 words • 1,234 characters • 12 sentences • ~2 min read"
    assert format_text_stats(TextStats()) == "0 words • 0 characters"


def test_suitable_text():
    report = is_text_suitable_for_practice(PANGRAMS)
    assert report.suitable
    assert report.reasons == ()


def test_unsuitable_short_text():
    report = is_text_suitable_for_practice("Hello there.")
    assert not report.suitable
    assert "Text is quite short for meaningful practice" in report.reasons
    assert "Add more complete sentences for better practice flow" in report.suggestions
