import pytest

from textslug.utils import cleanup, ensure_text, normalize


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("-", ""),
        ("---", ""),
        ("abc", "abc"),
        ("-abc-", "abc"),
        ("a--b", "a-b"),
        ("a-----b", "a-b"),
        ("--a--b--c--", "a-b-c"),
        ("a-b_c.d", "a-b_c.d"),
    ],
)
def test_cleanup(text, expected):
    assert cleanup(text) == expected


@pytest.mark.parametrize("text", ["", "-", "--a--", "a-b", "x---y---", "_-_"])
def test_cleanup_is_idempotent(text):
    once = cleanup(text)
    assert cleanup(once) == once


def test_normalize_splits_accents_into_combining_marks():
    assert normalize("\u00e9") == "e\u0301"


def test_normalize_expands_compatibility_characters():
    assert normalize("ﬁ") == "fi"
    assert normalize("Ａ１") == "A1"
    assert normalize("x²") == "x2"


def test_ensure_text():
    assert ensure_text("abc") == "abc"
    with pytest.raises(TypeError, match="expected str, got bytes"):
        ensure_text(b"abc")
