"""Small text helpers: number conversion, whitespace checks and tokenizing."""

from collections.abc import Iterator

WHITESPACE = " \t\r\f\v\a\n"
_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(WHITESPACE)


def is_whitespace(text: str) -> bool:
    """Return True if every character of ``text`` is whitespace (True when empty)."""
    return all(ch in _WHITESPACE for ch in text)


def is_digits(text: str) -> bool:
    """Return True if ``text`` holds only ASCII digits (True when empty)."""
    return all(ch in _DIGITS for ch in text)


def parse_int(text: str) -> int:
    """Convert an optionally signed decimal string to an int.

    A string with anything other than digits after the sign gives 0.
    """
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]
    elif text.startswith("+"):
        text = text[1:]
    if not text or not is_digits(text):
        return 0
    return sign * int(text)


def format_int(number: int) -> str:
    """Render an integer in decimal."""
    return str(int(number))


def _iter_tokens(text: str, delimiters: str) -> Iterator[str]:
    delims = frozenset(delimiters)
    start = None
    for pos, ch in enumerate(text):
        if ch in delims:
            if start is not None:
                yield text[start:pos]
                start = None
        elif start is None:
            start = pos
    if start is not None:
        yield text[start:]


def split_tokens(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any of the characters in ``delimiters``, dropping empty tokens."""
    return list(_iter_tokens(text, delimiters))


def count_tokens(text: str, delimiters: str) -> int:
    """Count the non-empty tokens of ``text`` separated by ``delimiters``."""
    return sum(1 for _ in _iter_tokens(text, delimiters))