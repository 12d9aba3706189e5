import string

import pytest

from solong.charclass import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(-5, 260))
def test_classification_matches_ascii_sets(code):
    ch = chr(code) if 0 <= code < 0x110000 else None
    assert is_alpha(code) == (ch is not None and ch in string.ascii_letters)
    assert is_digit(code) == (ch is not None and ch in string.digits)
    assert is_alnum(code) == (
        ch is not None and ch in string.ascii_letters + string.digits
    )
    assert is_ascii(code) == (0 <= code <= 127)
    assert is_print(code) == (32 <= code <= 126)


def test_string_and_int_forms_agree():
    for ch in string.printable:
        assert is_alnum(ch) == is_alnum(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


def test_case_mapping_letters():
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        assert to_lower(upper) == lower
        assert to_upper(lower) == upper
        assert to_lower(ord(upper)) == ord(lower)
        assert to_upper(ord(lower)) == ord(upper)


def test_case_mapping_leaves_others():
    for ch in string.digits + string.punctuation + " ":
        assert to_lower(ch) == ch
        assert to_upper(ch) == ch
    assert to_upper(200) == 200


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_char_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, 2147483647, -2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == atoi("17")


def test_atoi_double_sign_is_zero():
    assert atoi("+-5") == 0
    assert atoi("-+5") == 0


def test_atoi_no_digits():
    assert atoi("") == 0
    assert atoi("abc") == 0


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")