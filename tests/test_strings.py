from algostudy.strings import reverse, reversed_chars


def test_reverse_example():
    assert reverse("this") == "siht"


def test_reverse_empty():
    assert reverse("") == ""


def test_reverse_twice_is_identity():
    for text in ("a", "ab", "hello world", "racecar"):
        assert reverse(reverse(text)) == text


def test_reversed_chars_matches_reverse():
    text = "abcdef"
    assert "".join(reversed_chars(text)) == reverse(text)
    assert list(reversed_chars("")) == []


def test_reversed_chars_yields_single_characters():
    chars = list(reversed_chars("xyz"))
    assert len(chars) == 3
    assert chars[0] == "z"
    assert chars[-1] == "x"