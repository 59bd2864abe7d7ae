import pytest

from cabinet.utils import INVALID_SIZE_MESSAGE, InvalidSizeError, assert_allowed_size, normalize


@pytest.mark.parametrize("raw, expected", [
    ("Test1", "test1"),
    ("  TEST1\t", "test1"),
    ("\nMixed Case Name ", "mixed case name"),
    ("already", "already"),
])
def test_normalize_strips_and_lowercases(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_normalize_absent_or_blank_is_none(raw):
    assert normalize(raw) is None


@pytest.mark.parametrize("raw", [None, "", " Small ", "LARGE", "x y "])
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


@pytest.mark.parametrize("raw, expected", [
    ("small", "small"),
    (" Medium ", "medium"),
    ("LARGE", "large"),
])
def test_assert_allowed_size_accepts_categories(raw, expected):
    assert assert_allowed_size(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "bogus", "tiny", "smallish"])
def test_assert_allowed_size_rejects_everything_else(raw):
    with pytest.raises(InvalidSizeError) as excinfo:
        assert_allowed_size(raw)
    assert str(excinfo.value) == "Invalid folder size."
    assert str(excinfo.value) == INVALID_SIZE_MESSAGE


def test_invalid_size_error_is_value_error():
    assert issubclass(InvalidSizeError, ValueError)
