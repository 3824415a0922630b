from speech_coach.phonetics import extract_sounds, find_phoneme_errors, phoneme_breakdown


def test_extract_sounds_prefers_digraphs():
    assert extract_sounds("think") == ["θ", "ɪ", "n", "k"]
    assert extract_sounds("ship") == ["ʃ", "ɪ", "p"]
    assert extract_sounds("book") == ["b", "u", "k"]


def test_extract_sounds_empty_word():
    assert extract_sounds("") == []


def test_th_replaced_by_f():
    assert find_phoneme_errors("think", "fink") == ["f instead of th", "missing θ"]


def test_v_replaced_by_w():
    assert find_phoneme_errors("very", "wery") == ["w instead of v", "missing v"]


def test_unsaid_word_misses_every_sound():
    assert find_phoneme_errors("cat", "") == ["missing c", "missing æ", "missing t"]


def test_correct_word_has_no_errors():
    assert find_phoneme_errors("cat", "cat") == []


def test_phoneme_breakdown_scores_each_position():
    scores = phoneme_breakdown("cat", "bat")
    assert [(s.expected, s.actual, s.score) for s in scores] == [
        ("c", "b", 0),
        ("æ", "æ", 100),
        ("t", "t", 100),
    ]


def test_phoneme_breakdown_pads_shorter_side():
    scores = phoneme_breakdown("cat", "")
    assert [s.actual for s in scores] == ["", "", ""]
    assert all(s.score == 0 for s in scores)
