"""Tests for _types module."""
import pytest

from clickerengine._types import compare, is_int


def test_compare_operators():
    assert compare(5, ">=", 3)
    assert compare(3, ">=", 3)
    assert not compare(2, ">=", 3)

    assert compare(3, "<=", 5)
    assert not compare(4, "<=", 3)

    assert compare(5, ">", 3)
    assert not compare(3, ">", 3)

    assert compare(3, "<", 5)
    assert not compare(3, "<", 3)

    assert compare(3, "==", 3)
    assert not compare(3, "==", 4)

    assert compare(3, "!=", 4)
    assert not compare(3, "!=", 3)


def test_compare_unknown_operator():
    with pytest.raises(ValueError, match="Unknown operator"):
        compare(1, "??", 2)


def test_is_int():
    assert is_int(3)
    assert is_int(-1)
    assert not is_int(True)
    assert not is_int(3.0)
    assert not is_int("3")
