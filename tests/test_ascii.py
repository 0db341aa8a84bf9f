import string

import pytest

from abstractknn.ascii import is_alpha, is_decimal, is_hexadecimal, is_whitespace

ALL_BYTES = range(256)


def test_alpha_matches_ascii_letters():
    letters = {ord(c) for c in string.ascii_letters}
    assert {b for b in ALL_BYTES if is_alpha(b)} == letters


def test_decimal_matches_digits():
    digits = {ord(c) for c in string.digits}
    assert {b for b in ALL_BYTES if is_decimal(b)} == digits


def test_hexadecimal_matches_hexdigits():
    hexdigits = {ord(c) for c in string.hexdigits}
    assert {b for b in ALL_BYTES if is_hexadecimal(b)} == hexdigits


def test_whitespace_set():
    expected = {ord(c) for c in " \n\r\t"}
    assert {b for b in ALL_BYTES if is_whitespace(b)} == expected


def test_vertical_tab_and_form_feed_are_not_whitespace():
    assert is_whitespace("\v") is False
    assert is_whitespace("\f") is False


@pytest.mark.parametrize("char", ["a", "Z", "q"])
def test_accepts_single_character_strings(char):
    assert is_alpha(char) is True
    assert is_decimal(char) is False


def test_non_ascii_letter_is_not_alpha():
    assert is_alpha("é") is False


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("ab")