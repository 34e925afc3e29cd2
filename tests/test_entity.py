import html

import pytest

from cmrender.entity import unescape, unescape_html


def test_named_entity():
    assert unescape("amp;") == ("&", 4)


def test_named_entity_ignores_trailing_text():
    assert unescape("amp;rest") == ("&", 4)


def test_decimal_and_hex_agree():
    decimal = unescape("#65;")
    hexadecimal = unescape("#x41;")
    upper_hex = unescape("#X41;")
    assert decimal[0] == hexadecimal[0] == upper_hex[0]
    assert decimal[1] == 4
    assert hexadecimal[1] == 5


@pytest.mark.parametrize("body", ["#0;", "#xD800;", "#xE000;", "#1114112;", "#x110000;"])
def test_invalid_codepoints_become_replacement(body):
    assert unescape(body) == ("\ufffd", len(body))


def test_clamped_large_number_within_eight_digits():
    assert unescape("#99999999;") == ("\ufffd", 10)


@pytest.mark.parametrize(
    "body",
    ["#123456789;", "#x;", "#;", "#12", "foo bar;", "nosuchentity;", "a", "", "amp"],
)
def test_rejected(body):
    assert unescape(body) is None


def test_too_long_name_rejected():
    assert unescape("a" * 40 + ";") is None


def test_unescape_html_without_ampersand_is_identity():
    text = "plain text with no references"
    assert unescape_html(text) == text


def test_unescape_html_keeps_bare_ampersand():
    assert unescape_html("a &amp b & c") == "a &amp b & c"


@pytest.mark.parametrize("text", ["<a href=\"x\">'quoted' & more</a>", "&&&", "x > y < z"])
def test_round_trip_with_stdlib_escape(text):
    assert unescape_html(html.escape(text)) == text


@pytest.mark.parametrize(
    "text", ["&copy; 2020", "&#169;&#xA9;", "&Aacute;&eacute;", "a&nbsp;b", "&lt;&gt;&quot;"]
)
def test_matches_stdlib_for_well_formed_references(text):
    assert unescape_html(text) == html.unescape(text)


def test_mixed_valid_and_invalid():
    assert unescape_html("&amp;&bogus;&#65;") == "&&bogus;" + unescape("#65;")[0]