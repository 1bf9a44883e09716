import pytest

from lspkit.strcase import (
    compare_nocase,
    is_alnum,
    is_alpha,
    is_lower,
    is_numeric,
    is_upper,
    swapcase,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize(
    "text, expected",
    [("abc123", True), ("ABCxyz", True), ("", False), ("ab-c", False), ("a b", False), ("é1", False)],
)
def test_is_alnum(text, expected):
    assert is_alnum(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("Hello", True), ("", False), ("abc1", False), ("[", False), ("`", False), ("ñ", False)],
)
def test_is_alpha(text, expected):
    assert is_alpha(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("0123456789", True), ("", False), ("12a", False), ("-1", False), ("1.5", False)],
)
def test_is_numeric(text, expected):
    assert is_numeric(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("abc", True), ("z", True), ("aBc", False), ("", False), ("abc1", False)],
)
def test_is_lower(text, expected):
    assert is_lower(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("ABC", True), ("Z", True), ("AbC", False), ("", False), ("AB C", False)],
)
def test_is_upper(text, expected):
    assert is_upper(text) is expected


def test_swapcase_value():
    assert swapcase("Hello World 1") == "hELLO wORLD 1"


@pytest.mark.parametrize("text", ["", "MiXeD cAsE", "123 !?", "straße"])
def test_swapcase_is_its_own_inverse(text):
    assert swapcase(swapcase(text)) == text


def test_swapcase_leaves_non_ascii():
    assert swapcase("Éé") == "Éé"


@pytest.mark.parametrize("text", ["ABC def 123", "already lower", "MIXED_case-Text"])
def test_to_lower_and_upper_match_ascii_case_mapping(text):
    assert to_lower(text) == text.lower()
    assert to_upper(text) == text.upper()


def test_case_conversion_ignores_non_ascii():
    assert to_lower("É") == "É"
    assert to_upper("é") == "é"


def test_to_upper_makes_text_upper():
    assert is_upper(to_upper("letters"))
    assert is_lower(to_lower("LETTERS"))


def test_compare_nocase_equal():
    assert compare_nocase("abc", "ABC") == 0
    assert compare_nocase("", "") == 0


def test_compare_nocase_ordering():
    assert compare_nocase("abc", "ABD") < 0
    assert compare_nocase("b", "A") > 0
    assert compare_nocase("ab", "ABC") < 0


def test_compare_nocase_is_antisymmetric():
    pairs = [("Alpha", "beta"), ("Zeta", "zet"), ("same", "SAME")]
    for a, b in pairs:
        assert compare_nocase(a, b) == -compare_nocase(b, a)