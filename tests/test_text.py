import pytest

from promptsh.text import (
    count_tokens,
    format_int,
    is_digits,
    is_whitespace,
    parse_int,
    split_tokens,
)


@pytest.mark.parametrize("number", list(range(-300, 301, 7)) + [2**31 - 1, -(2**31)])
def test_parse_format_round_trip(number):
    assert parse_int(format_int(number)) == number


def test_parse_int_plain_and_signed():
    assert parse_int("42") == 42
    assert parse_int("-17") == -17
    assert parse_int("+9") == parse_int("9")


@pytest.mark.parametrize("text", ["12a", "abc", "", "-", "+", "1 2", "--3"])
def test_parse_int_malformed_is_zero(text):
    assert parse_int(text) == 0


def test_is_whitespace():
    assert is_whitespace(" \t\r\n\f\v\a") is True
    assert is_whitespace("") is True
    assert is_whitespace("  x ") is False


def test_is_digits():
    assert is_digits("0123456789") is True
    assert is_digits("") is True
    assert is_digits("12a") is False
    assert is_digits("-1") is False


def test_split_tokens_collapses_delimiters():
    assert split_tokens("  ls   -l\t/tmp ", " \t") == ["ls", "-l", "/tmp"]


def test_split_tokens_path_style():
    assert split_tokens("/bin::/usr/bin:", ":") == ["/bin", "/usr/bin"]


def test_split_tokens_empty_and_only_delimiters():
    assert split_tokens("", " ") == []
    assert split_tokens(" \t ", " \t") == []


def test_split_tokens_no_delimiters_keeps_text():
    assert split_tokens("word", "") == ["word"]


@pytest.mark.parametrize(
    "text, delims",
    [("a b  c", " "), ("", " "), ("::x::y", ":"), ("one", " "), (" \t x\ty ", " \t")],
)
def test_count_matches_split(text, delims):
    assert count_tokens(text, delims) == len(split_tokens(text, delims))


def test_tokens_rejoin_without_delimiters():
    text = "echo  hello\tworld"
    tokens = split_tokens(text, " \t")
    assert "".join(tokens) == "".join(ch for ch in text if ch not in " \t")