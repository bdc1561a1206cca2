from statement_ocr.utils.text_stats import get_text_stats


def test_text_statistics():
    stats = get_text_stats("Hello world!\nThis is a test.\nMultiple lines here.")

    assert stats.character_count == 49
    assert stats.word_count == 9
    assert stats.line_count == 3


def test_empty_text():
    stats = get_text_stats("")

    assert (stats.character_count, stats.word_count, stats.line_count) == (0, 0, 0)


def test_extra_whitespace_is_ignored_for_words_and_lines():
    stats = get_text_stats("  Hello   world  \n  \n  Another line  ")

    assert stats.character_count == 37
    assert stats.word_count == 4
    assert stats.line_count == 2
