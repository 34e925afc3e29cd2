import pytest

from cmrender.anchors import Anchorizer


def test_repeated_header_gets_suffix():
    anchorizer = Anchorizer()
    assert anchorizer.anchorize("Stuff") == "stuff"
    assert anchorizer.anchorize("Stuff") == "stuff-1"


def test_apostrophe_removed():
    assert Anchorizer().anchorize("Ticks aren't in") == "ticks-arent-in"


def test_punctuation_dropped_and_spaces_dashed():
    assert Anchorizer().anchorize("Hello World!") == "hello-world"


def test_unicode_letters_kept():
    anchor = Anchorizer().anchorize("Über Café")
    assert anchor == "über-café"


def test_separate_anchorizers_do_not_share_state():
    first = Anchorizer()
    second = Anchorizer()
    assert first.anchorize("Same") == "same"
    assert second.anchorize("Same") == "same"


@pytest.mark.parametrize("header", ["a", "A b", "x_y", "one-two"])
def test_anchors_unique_within_instance(header):
    anchorizer = Anchorizer()
    anchors = [anchorizer.anchorize(header) for _ in range(5)]
    assert len(set(anchors)) == 5
    assert all(a.startswith(anchors[0]) for a in anchors)


def test_suffix_skips_taken_anchor():
    anchorizer = Anchorizer()
    first = anchorizer.anchorize("foo-1")
    second = anchorizer.anchorize("foo")
    third = anchorizer.anchorize("foo")
    assert first == "foo-1"
    assert second == "foo"
    assert third not in (first, second)
    assert third.startswith("foo-")