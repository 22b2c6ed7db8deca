"""Tests for the special-character policy (policy.py)."""

import pytest

from honocoroko.policy import PRESERVED_CHARS, should_preserve


def test_preserved_set_contents():
    assert PRESERVED_CHARS == frozenset("?!@#$%^&*-_=+[]{}|\\;'<>/`~")


@pytest.mark.parametrize("char", [",", ".", ":", '"', "(", ")"])
def test_pada_punctuation_not_preserved(char):
    assert char not in PRESERVED_CHARS


def test_should_preserve_default():
    assert should_preserve("?")
    assert should_preserve("/")
    assert not should_preserve("a")
    assert not should_preserve(" ")


def test_should_preserve_when_converting():
    assert not should_preserve("?", convert_special_chars=True)
