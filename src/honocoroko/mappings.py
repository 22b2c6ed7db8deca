"""
Latin <-> Javanese (Hanacaraka) character mapping tables.

Each category is an ordered tuple of CharacterMapping pairs.  Order is
significant: the index builder walks these tuples in a fixed sequence, and
which entry wins a key collision depends on it.

Usage:
    from honocoroko.mappings import CONSONANTS, VOWEL_MARKS

    for m in CONSONANTS:
        print(m.latin, m.javanese)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CharacterMapping:
    """One Latin form paired with one Javanese grapheme.

    The Javanese side may span several codepoints (base + diacritic, or a
    consonant + pangkon + consonant cluster) but is always one visual unit.
    """

    latin: str
    javanese: str


_M = CharacterMapping

PANGKON = "꧀"  # virama, kills the inherent vowel
CECAK_TELU = "꦳"  # marks foreign sounds (f, v, z)


# ── Aksara nglegena (basic consonants) ──────────────────────────────────────
# Syllables with inherent "a" first, then bare-letter aliases pointing at the
# same glyph so both "ka" and "k" are addressable.

CONSONANTS: tuple[CharacterMapping, ...] = (
    _M("ha", "ꦲ"),
    _M("na", "ꦤ"),
    _M("ca", "ꦕ"),
    _M("ra", "ꦫ"),
    _M("ka", "ꦏ"),
    _M("da", "ꦢ"),
    _M("ta", "ꦠ"),
    _M("sa", "ꦱ"),
    _M("wa", "ꦮ"),
    _M("la", "ꦭ"),
    _M("pa", "ꦥ"),
    _M("dha", "ꦝ"),
    _M("ja", "ꦗ"),
    _M("ya", "ꦪ"),
    _M("nya", "ꦚ"),
    _M("ma", "ꦩ"),
    _M("ga", "ꦒ"),
    _M("ba", "ꦧ"),
    _M("tha", "ꦛ"),
    _M("nga", "ꦔ"),
    _M("h", "ꦲ"),
    _M("n", "ꦤ"),
    _M("c", "ꦕ"),
    _M("r", "ꦫ"),
    _M("k", "ꦏ"),
    _M("d", "ꦢ"),
    _M("t", "ꦠ"),
    _M("s", "ꦱ"),
    _M("w", "ꦮ"),
    _M("l", "ꦭ"),
    _M("p", "ꦥ"),
    _M("j", "ꦗ"),
    _M("y", "ꦪ"),
    _M("m", "ꦩ"),
    _M("g", "ꦒ"),
    _M("b", "ꦧ"),
)

# ── Aksara swara (independent vowels) ───────────────────────────────────────

VOWELS: tuple[CharacterMapping, ...] = (
    _M("a", "ꦄ"),
    _M("i", "ꦆ"),
    _M("u", "ꦈ"),
    _M("e", "ꦌ"),
    _M("o", "ꦎ"),
)

# ── Sandhangan swara (dependent vowel marks) ────────────────────────────────

VOWEL_MARKS: tuple[CharacterMapping, ...] = (
    _M("i", "ꦶ"),  # wulu
    _M("u", "ꦸ"),  # suku
    _M("é", "ꦺ"),  # taling
    _M("e", "ꦼ"),  # pepet
    _M("o", "ꦺꦴ"),  # taling + tarung
)

# ── Aksara murda (honorific consonants) ─────────────────────────────────────
# Case-significant: "Na" is murda, "na" is nglegena.

MURDA_CONSONANTS: tuple[CharacterMapping, ...] = (
    _M("Na", "ꦟ"),
    _M("Ka", "ꦑ"),
    _M("Ta", "ꦡ"),
    _M("Sa", "ꦯ"),
    _M("Pa", "ꦦ"),
    _M("Ga", "ꦓ"),
    _M("Ba", "ꦨ"),
)

# ── Angka (digits, U+A9D0..U+A9D9) ──────────────────────────────────────────

NUMBERS: tuple[CharacterMapping, ...] = tuple(
    _M(str(d), chr(0xA9D0 + d)) for d in range(10)
)

# ── Pada (punctuation) ──────────────────────────────────────────────────────

PUNCTUATION: tuple[CharacterMapping, ...] = (
    _M(",", "꧈"),  # pada lingsa
    _M(".", "꧉"),  # pada lungsi
    _M(":", "꧇"),  # pada pangkat
    _M('"', "꧊꧋"),  # pada adeg + pada adeg-adeg
    _M("(", "꧌"),  # pada piseleh
    _M(")", "꧍"),  # pada piseleh walik
)

# ── Sandhangan panyigeg (finals) and pangkon ────────────────────────────────

SPECIAL_MARKS: tuple[CharacterMapping, ...] = (
    _M("ng", "ꦁ"),  # cecak
    _M("r", "ꦂ"),  # layar
    _M("h", "ꦃ"),  # wignyan
    _M("/", PANGKON),
)

# ── Approximations for Latin letters with no Javanese phoneme ───────────────

PHONETIC_APPROXIMATIONS: tuple[CharacterMapping, ...] = (
    _M("f", "ꦥ" + CECAK_TELU),  # pa + cecak telu
    _M("v", "ꦮ" + CECAK_TELU),  # wa + cecak telu
    _M("z", "ꦗ" + CECAK_TELU),  # ja + cecak telu
    _M("q", "ꦏ"),  # ka
    _M("x", "ꦏ" + PANGKON + "ꦱ"),  # ka + pangkon + sa
)


# Named categories in the fixed forward-index order.
CATEGORIES: tuple[tuple[str, tuple[CharacterMapping, ...]], ...] = (
    ("consonants", CONSONANTS),
    ("vowels", VOWELS),
    ("vowel_marks", VOWEL_MARKS),
    ("murda_consonants", MURDA_CONSONANTS),
    ("numbers", NUMBERS),
    ("punctuation", PUNCTUATION),
    ("special_marks", SPECIAL_MARKS),
    ("phonetic_approximations", PHONETIC_APPROXIMATIONS),
)

ALL_MAPPINGS: tuple[CharacterMapping, ...] = tuple(
    m for _name, table in CATEGORIES for m in table
)
