import pytest

from commitwise.utils import (
    arithmetic_mod,
    normalize_newlines,
    pad_end,
    remove_ansi_escape_codes,
    wrap_text,
)


def test_arithmetic_mod_wraps_negative_values():
    assert arithmetic_mod(-1, 7) == 6


@pytest.mark.parametrize("value", [-20, -8, -7, -3, 0, 3, 7, 13, 22])
def test_arithmetic_mod_stays_in_range_and_is_congruent(value):
    result = arithmetic_mod(value, 7)
    assert 0 <= result < 7
    assert (result - value) % 7 == 0


def test_arithmetic_mod_positive_value_below_mod_is_unchanged():
    assert arithmetic_mod(4, 9) == 4


def test_arithmetic_mod_zero_modulus_raises():
    with pytest.raises(ZeroDivisionError):
        arithmetic_mod(5, 0)


def test_remove_ansi_escape_codes_strips_styles():
    assert remove_ansi_escape_codes("\x1b[1;32m" + "ok" + "\x1b[0m") == "ok"


def test_remove_ansi_escape_codes_leaves_plain_text():
    assert remove_ansi_escape_codes("plain text") == "plain text"


def test_normalize_newlines_collapses_runs():
    assert normalize_newlines("a\n\n\n\n\nb") == "a\n\nb"


def test_normalize_newlines_keeps_content():
    text = "first\n\n\n\nsecond\nthird\n\n\n"
    result = normalize_newlines(text)
    assert "\n\n\n" not in result
    assert result.replace("\n", "") == text.replace("\n", "")


def test_normalize_newlines_keeps_double_newline():
    text = "a\n\nb"
    assert normalize_newlines(text) == text


def test_pad_end_reaches_length():
    result = pad_end("ab", 5, ".")
    assert len(result) == 5
    assert result.rstrip(".") == "ab"


def test_pad_end_does_not_truncate():
    assert pad_end("abcdef", 3, " ") == "abcdef"


def test_wrap_text_breaks_at_space():
    assert wrap_text("hello world", 5) == "hello\nworld\n"


def test_wrap_text_short_line_gets_newline():
    result = wrap_text("abc", 10)
    assert result.rstrip("\n") == "abc"
    assert result.endswith("\n")


def test_wrap_text_lines_fit_and_words_survive():
    text = "the quick brown fox jumps over the lazy dog again and again"
    result = wrap_text(text, 12)
    lines = result.split("\n")[:-1]
    assert all(len(line) <= 12 for line in lines)
    assert " ".join(result.split()) == text


def test_wrap_text_hard_splits_long_word():
    word = "abcdefghijklmnopqrstuvwxyz"
    result = wrap_text(word, 7)
    pieces = result.split("\n")[:-1]
    assert all(len(piece) <= 7 for piece in pieces)
    assert "".join(pieces) == word


def test_wrap_text_ignores_escape_codes_when_measuring():
    line = "\x1b[31m" + "short" + "\x1b[0m"
    assert wrap_text(line, 5) == line + "\n"


def test_wrap_text_keeps_each_input_line():
    result = wrap_text("one\ntwo", 80)
    assert result.split("\n")[:2] == ["one", "two"]


def test_wrap_text_rejects_zero_width():
    with pytest.raises(ValueError):
        wrap_text("text", 0)