"""Low-level text helpers for reading scene description lines."""

from __future__ import annotations

import re
from itertools import takewhile

_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \t\n\v\f\r")
_WORD = re.compile(r"[^ \t]+")


def _is_digit(ch: str) -> bool:
    return ch in _DIGITS


def atoi(text: str) -> int:
    """Parse a leading integer: skips whitespace, accepts one sign, stops at non-digits."""
    i = 0
    n = len(text)
    while i < n and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < n and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    value = 0
    while i < n and _is_digit(text[i]):
        value = value * 10 + (ord(text[i]) - ord("0"))
        i += 1
    return sign * value


def atod(text: str) -> float:
    """Parse a decimal number.

    Returns -1 if the text contains anything but digits, signs and a point.
    """
    if not only_numbers_signs_and_dec_pt(text):
        return -1
    start = text.find(".") + 1
    if start == 0:
        return atoi(text)
    whole = abs(atoi(text[:start]))
    digits = "".join(takewhile(_is_digit, text[start:]))
    fraction = int(digits) / 10 ** len(digits) if digits else 0.0
    result = whole + fraction
    if text.startswith("-"):
        return -result
    return result


def split_by_spaces(line: str) -> list[str]:
    """Split a line on spaces and tabs, dropping everything from a '#' word on."""
    return list(takewhile(lambda w: not w.startswith("#"), _WORD.findall(line)))


def only_numbers_dec_pt_and_newline(text: str) -> bool:
    """True if the text holds only digits, '.' and newlines."""
    return all(_is_digit(ch) or ch in ".\n" for ch in text)


def only_numbers_and_newline(text: str) -> bool:
    """True if the text holds only digits and newlines."""
    return all(_is_digit(ch) or ch == "\n" for ch in text)


def only_numbers_signs_and_dec_pt(text: str) -> bool:
    """True if the text holds only digits, signs and '.', and a leading sign precedes a digit."""
    if text[:1] in ("-", "+") and not _is_digit(text[1:2]):
        return False
    return all(_is_digit(ch) or ch in "+-." for ch in text)


def only_numbers_and_dec_pt(text: str) -> bool:
    """True if the text holds only digits and '.'."""
    return all(_is_digit(ch) or ch == "." for ch in text)