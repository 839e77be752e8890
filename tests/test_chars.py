import string

import pytest

from fillit.ft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    str_lowcase,
    str_upcase,
    to_lower,
    to_upper,
)

ASCII = range(128)


def test_is_alpha_matches_ascii_letters():
    letters = set(string.ascii_letters)
    assert [is_alpha(c) for c in ASCII] == [chr(c) in letters for c in ASCII]


def test_is_digit_matches_ascii_digits():
    assert [is_digit(chr(c)) for c in ASCII] == [
        chr(c) in string.digits for c in ASCII
    ]


def test_is_alnum_is_union_of_alpha_and_digit():
    for c in range(256):
        assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_is_ascii_range():
    assert all(is_ascii(c) for c in ASCII)
    assert not any(is_ascii(c) for c in (-1, 128, 255))


def test_is_print_matches_printable_minus_control_whitespace():
    printable = set(string.printable) - set("\t\n\r\v\f")
    assert [is_print(c) for c in ASCII] == [chr(c) in printable for c in ASCII]


def test_is_space_accepts_the_six_spaces():
    assert all(is_space(ch) for ch in " \n\v\t\f\r")
    assert not any(is_space(ch) for ch in "a0#.")


def test_is_space_uses_low_byte():
    assert is_space(256 + ord(" ")) == is_space(" ")
    assert is_space(256 + ord("a")) == is_space("a")


def test_to_upper_and_lower_round_trip_letters():
    for ch in string.ascii_lowercase:
        assert to_lower(to_upper(ch)) == ch
        assert to_upper(ch) == ch.upper()
    for ch in string.ascii_uppercase:
        assert to_upper(to_lower(ch)) == ch


def test_case_conversion_leaves_other_characters():
    for ch in string.digits + string.punctuation + " ":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch
    assert to_upper("é") == "é"


def test_case_conversion_keeps_integer_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


def test_str_case_conversion_on_ascii():
    text = "Hello, World 42!"
    assert str_upcase(text) == text.upper()
    assert str_lowcase(text) == text.lower()


def test_str_case_conversion_ignores_non_ascii():
    assert str_upcase("ée") == "éE"
    assert str_lowcase("ÉE") == "Ée"


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")