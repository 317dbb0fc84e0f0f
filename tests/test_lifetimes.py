import pytest

from rustdrill.exercises.lifetimes import longest


def test_first_is_longer():
    assert longest("abcd", "xyz") == "abcd"


def test_second_is_longer():
    assert longest("xyz", "long string is long") == "long string is long"


def test_tie_returns_second():
    assert longest("ab", "cd") == "cd"


def test_compares_bytes_not_characters():
    assert longest("éé", "abc") == "éé"


@pytest.mark.parametrize(
    "x,y",
    [("", ""), ("a", ""), ("", "a"), ("long string is long", "xyz"), ("ñ", "nn")],
)
def test_result_is_an_input_and_not_shorter(x, y):
    result = longest(x, y)
    other = y if result is x else x
    assert result in (x, y)
    assert len(result.encode("utf-8")) >= len(other.encode("utf-8"))
    assert longest(x, y) == longest(x, y)