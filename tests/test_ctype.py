import string

import pytest

from cmrender.ctype import isalnum, isalpha, isdigit, ispunct, isspace

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r"])
def test_space_characters(ch):
    assert isspace(ch) is True


@pytest.mark.parametrize("ch", ["\x0b", "\x0c", "\x00", "a", "\xa0"])
def test_not_space(ch):
    assert isspace(ch) is False


def test_punct_matches_ascii_punctuation():
    assert {c for c in ASCII if ispunct(c)} == set(string.punctuation)


def test_digit_matches_ascii_digits():
    assert {c for c in ASCII if isdigit(c)} == set(string.digits)


def test_alpha_matches_ascii_letters():
    assert {c for c in ASCII if isalpha(c)} == set(string.ascii_letters)


def test_alnum_is_union_of_digit_and_alpha():
    for code in range(256):
        assert isalnum(code) == (isdigit(code) or isalpha(code))


def test_classes_are_exclusive():
    for code in range(256):
        hits = [f(code) for f in (isspace, ispunct, isdigit, isalpha)]
        assert sum(hits) <= 1


def test_int_and_str_agree():
    for code in range(256):
        for predicate in (isspace, ispunct, isdigit, isalpha, isalnum):
            assert predicate(code) == predicate(chr(code))


@pytest.mark.parametrize("ch", ["é", "世", "\x80", "\xff", 0x80, 0xFF])
def test_non_ascii_has_no_class(ch):
    assert not any(f(ch) for f in (isspace, ispunct, isdigit, isalpha, isalnum))