import pytest

from minirt.textutils import (
    atod,
    atoi,
    only_numbers_and_dec_pt,
    only_numbers_and_newline,
    only_numbers_dec_pt_and_newline,
    only_numbers_signs_and_dec_pt,
    split_by_spaces,
)


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi("  -42abc") == -42
    assert atoi("+17") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0


@pytest.mark.parametrize("text,expected", [("0.25", 0.25), ("-1.5", -1.5), ("3", 3), ("-0.5", -0.5)])
def test_atod_parses_decimals(text, expected):
    assert atod(text) == pytest.approx(expected)


def test_atod_invalid_characters_give_minus_one():
    assert atod("1.5x") == -1
    assert atod("-.5") == -1


def test_atod_negation_is_symmetric():
    assert atod("-12.75") == -atod("12.75")


def test_split_by_spaces_keeps_newline_in_last_word():
    assert split_by_spaces("A 0.2\t255,255,255\n") == ["A", "0.2", "255,255,255\n"]


def test_split_by_spaces_stops_at_comment():
    assert split_by_spaces("sp 0,0,0 # a comment") == ["sp", "0,0,0"]
    assert split_by_spaces("# only a comment\n") == []


def test_split_by_spaces_empty_and_blank_lines():
    assert split_by_spaces("") == []
    assert split_by_spaces("\n") == ["\n"]


def test_only_numbers_dec_pt_and_newline():
    assert only_numbers_dec_pt_and_newline("0.5\n")
    assert not only_numbers_dec_pt_and_newline("-0.5")


def test_only_numbers_and_newline():
    assert only_numbers_and_newline("255\n")
    assert not only_numbers_and_newline("2.5")


def test_only_numbers_signs_and_dec_pt():
    assert only_numbers_signs_and_dec_pt("-1.0")
    assert only_numbers_signs_and_dec_pt("+3")
    assert not only_numbers_signs_and_dec_pt("-")
    assert not only_numbers_signs_and_dec_pt("+.5")
    assert not only_numbers_signs_and_dec_pt("1.0\n")


def test_only_numbers_and_dec_pt():
    assert only_numbers_and_dec_pt("12.6")
    assert not only_numbers_and_dec_pt("12.6\n")
    assert not only_numbers_and_dec_pt("-1")