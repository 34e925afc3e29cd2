import pytest

from cmrender.escaping import (
    dangerous_url,
    escape,
    escape_href,
    tagfilter,
    tagfilter_block,
    write_opening_tag,
)


def test_escape_special_characters():
    assert escape('"') == "&quot;"
    assert escape("&") == "&amp;"
    assert escape("<") == "&lt;"
    assert escape(">") == "&gt;"


def test_escape_leaves_other_text_alone():
    text = "Hello, 世界! it's fine"
    assert escape(text) == text


def test_escape_mixed_text_round_trips():
    text = 'a < b && c > "d"'
    escaped = escape(text)
    assert "<" not in escaped and ">" not in escaped and '"' not in escaped
    restored = (
        escaped.replace("&lt;", "<")
        .replace("&gt;", ">")
        .replace("&quot;", '"')
        .replace("&amp;", "&")
    )
    assert restored == text


def test_escape_href_keeps_percent_encoding():
    url = "https://ddg.gg/?q=a%20b"
    assert escape_href(url) == url


def test_escape_href_ampersand_and_apostrophe():
    assert escape_href("&") == "&amp;"
    assert escape_href("'") == "&#x27;"


def test_escape_href_space():
    assert escape_href(" ") == "%20"


def test_escape_href_non_ascii_is_utf8_percent_encoded():
    result = escape_href("é")
    parts = result.split("%")[1:]
    assert bytes(int(p, 16) for p in parts) == "é".encode("utf-8")


def test_escape_href_output_is_safe():
    result = escape_href('a b<c>"d"\\e')
    for ch in ' <>"\\':
        assert ch not in result


def test_write_opening_tag_without_attributes():
    assert write_opening_tag("code") == "<code>"
    assert write_opening_tag("pre", {}) == "<pre>"


def test_write_opening_tag_with_attributes():
    assert write_opening_tag("pre", {"lang": "rust"}) == '<pre lang="rust">'


def test_write_opening_tag_escapes_values():
    tag = write_opening_tag("code", [("class", 'a"b')])
    assert tag == '<code class="a&quot;b">'


def test_write_opening_tag_keeps_order():
    tag = write_opening_tag("pre", [("lang", "x"), ("data-meta", "y")])
    assert tag.index("lang") < tag.index("data-meta")


@pytest.mark.parametrize(
    "literal",
    ["<script>", "</title>", "<style/>", "<IFRAME src=x>", "<plaintext\n", "<xmp>"],
)
def test_tagfilter_matches_blacklisted_tags(literal):
    assert tagfilter(literal) is True


@pytest.mark.parametrize(
    "literal", ["<b>", "<scripts>", "<x", "script>", "<title", "<style/", "<div>"]
)
def test_tagfilter_rejects_other_input(literal):
    assert tagfilter(literal) is False


def test_tagfilter_block_filters_only_blacklisted_tags():
    text = "<div><script>alert(1)</script></div>"
    result = tagfilter_block(text)
    assert "<div>" in result and "</div>" in result
    assert "<script>" not in result and "</script>" not in result
    assert result.replace("&lt;", "<") == text


def test_tagfilter_block_without_tags_unchanged():
    text = "plain text & more"
    assert tagfilter_block(text) == text


@pytest.mark.parametrize(
    "url",
    [
        "javascript:alert(1)",
        "JavaScript:alert(1)",
        "vbscript:msgbox",
        "file:///etc/hosts",
        "data:text/html,hi",
    ],
)
def test_dangerous_urls(url):
    assert dangerous_url(url) is True


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com",
        "data:image/png;base64,AAAA",
        "data:image/webp;base64,AAAA",
        "/relative/path",
        "mailto:someone@example.com",
    ],
)
def test_safe_urls(url):
    assert dangerous_url(url) is False