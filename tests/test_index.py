"""Tests for the lookup index builder (index.py)."""

import pytest

from honocoroko.index import DEFAULT_INDEX, build_index


# ── Forward maps ──────────────────────────────────────────────────────────────

def test_flat_forward_map_is_last_write_wins():
    fwd = DEFAULT_INDEX.forward
    # murda "Na" lower-cases onto nglegena "na" and comes later
    assert fwd["na"] == "ꦟ"
    # layar / wignyan come after the consonant aliases
    assert fwd["r"] == "ꦂ"
    assert fwd["h"] == "ꦃ"
    # vowel marks come after independent vowels
    assert fwd["i"] == "ꦶ"


def test_flat_forward_map_keys_are_lowercase():
    assert all(k == k.lower() for k in DEFAULT_INDEX.forward)


def test_per_category_maps():
    assert DEFAULT_INDEX.consonants["nga"] == "ꦔ"
    assert DEFAULT_INDEX.consonants["k"] == "ꦏ"
    assert DEFAULT_INDEX.vowels["a"] == "ꦄ"
    assert DEFAULT_INDEX.vowel_marks["o"] == "ꦺꦴ"
    assert DEFAULT_INDEX.numbers["7"] == "꧗"
    assert DEFAULT_INDEX.punctuation[","] == "꧈"
    assert DEFAULT_INDEX.phonetic["q"] == "ꦏ"


def test_narrow_maps_do_not_leak_other_categories():
    assert "ng" not in DEFAULT_INDEX.consonants
    assert "a" not in DEFAULT_INDEX.consonants
    assert "na" not in DEFAULT_INDEX.vowels


# ── Reverse map ───────────────────────────────────────────────────────────────

def test_reverse_prefers_syllable_forms():
    rev = DEFAULT_INDEX.reverse
    assert rev["ꦲ"] == "ha"
    assert rev["ꦏ"] == "ka"
    assert rev["ꦔ"] == "nga"


def test_reverse_never_yields_bare_consonant_alias():
    consonant_glyphs = "ꦲꦤꦕꦫꦏꦢꦠꦱꦮꦭꦥꦗꦪꦩꦒꦧ"
    for glyph in consonant_glyphs:
        assert len(DEFAULT_INDEX.reverse[glyph]) > 1


def test_reverse_phonetic_only_where_absent():
    rev = DEFAULT_INDEX.reverse
    assert rev["ꦥ꦳"] == "f"
    assert rev["ꦏ꧀ꦱ"] == "x"
    assert "q" not in rev.values()


def test_reverse_special_marks():
    rev = DEFAULT_INDEX.reverse
    assert rev["꧀"] == "/"
    assert rev["ꦁ"] == "ng"


def test_reverse_excludes_murda():
    assert "ꦟ" not in DEFAULT_INDEX.reverse


def test_reverse_size():
    # 5 marks + 20 syllables + 5 vowels + 10 digits + 6 pada + 4 marks + 4 approximations
    assert len(DEFAULT_INDEX.reverse) == 54


def test_max_grapheme_length():
    assert DEFAULT_INDEX.max_grapheme_length == 3


# ── Construction ──────────────────────────────────────────────────────────────

def test_build_index_is_deterministic():
    a, b = build_index(), build_index()
    assert list(a.reverse.items()) == list(b.reverse.items())
    assert list(a.forward.items()) == list(b.forward.items())


def test_maps_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_INDEX.reverse["x"] = "y"
    with pytest.raises(TypeError):
        DEFAULT_INDEX.consonants["fa"] = "ꦥ"
