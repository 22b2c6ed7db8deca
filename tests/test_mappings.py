"""Tests for the static mapping tables (mappings.py)."""

import dataclasses

import pytest

from honocoroko.mappings import (
    ALL_MAPPINGS,
    CATEGORIES,
    CONSONANTS,
    MURDA_CONSONANTS,
    NUMBERS,
    PANGKON,
    PHONETIC_APPROXIMATIONS,
    VOWEL_MARKS,
    CharacterMapping,
)


# ── Table shape ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize("name, table", CATEGORIES)
def test_latin_forms_unique_within_category(name, table):
    keys = [m.latin.lower() for m in table]
    assert len(keys) == len(set(keys)), name


def test_category_order_is_fixed():
    assert [name for name, _ in CATEGORIES] == [
        "consonants", "vowels", "vowel_marks", "murda_consonants",
        "numbers", "punctuation", "special_marks", "phonetic_approximations",
    ]


def test_all_mappings_concatenates_categories():
    assert len(ALL_MAPPINGS) == sum(len(t) for _, t in CATEGORIES)
    assert ALL_MAPPINGS[0] == CONSONANTS[0]
    assert ALL_MAPPINGS[-1] == PHONETIC_APPROXIMATIONS[-1]


def test_single_letter_aliases_follow_their_syllable():
    order = [m.latin for m in CONSONANTS]
    for i, latin in enumerate(order):
        if len(latin) == 1:
            assert order.index(latin + "a") < i


def test_aliases_share_glyph_with_syllable():
    glyphs = {m.latin: m.javanese for m in CONSONANTS}
    for latin, javanese in glyphs.items():
        if len(latin) == 1:
            assert glyphs[latin + "a"] == javanese


def test_twenty_syllable_consonants():
    assert sum(1 for m in CONSONANTS if m.latin.endswith("a")) == 20


def test_murda_forms_are_capitalised():
    assert all(m.latin[0].isupper() for m in MURDA_CONSONANTS)


# ── Individual entries ────────────────────────────────────────────────────────

def test_numbers_in_numeric_order():
    assert [m.latin for m in NUMBERS] == list("0123456789")
    assert [ord(m.javanese) for m in NUMBERS] == list(range(0xA9D0, 0xA9DA))


def test_o_vowel_mark_is_two_codepoints():
    o = next(m for m in VOWEL_MARKS if m.latin == "o")
    assert len(o.javanese) == 2


def test_x_approximation_uses_pangkon():
    x = next(m for m in PHONETIC_APPROXIMATIONS if m.latin == "x")
    assert x.javanese == "ꦏ" + PANGKON + "ꦱ"


def test_character_mapping_is_immutable():
    m = CharacterMapping("ka", "ꦏ")
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.latin = "ga"
