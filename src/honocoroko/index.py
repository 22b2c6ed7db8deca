"""
Lookup indexes derived from the mapping tables.

Built once at import time (DEFAULT_INDEX) and shared read-only by every
transliteration call.  All maps are wrapped in MappingProxyType so callers
cannot mutate them.

Usage:
    from honocoroko.index import DEFAULT_INDEX

    DEFAULT_INDEX.consonants["ka"]     # 'ꦏ'
    DEFAULT_INDEX.reverse["ꦏ"]         # 'ka'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from honocoroko.mappings import (
    ALL_MAPPINGS,
    CONSONANTS,
    NUMBERS,
    PHONETIC_APPROXIMATIONS,
    PUNCTUATION,
    SPECIAL_MARKS,
    VOWEL_MARKS,
    VOWELS,
    CharacterMapping,
)


@dataclass(frozen=True, slots=True)
class LookupIndex:
    """Forward (Latin -> Javanese) and reverse (Javanese -> Latin) maps."""

    forward: Mapping[str, str]         # every category, last write wins
    consonants: Mapping[str, str]
    vowels: Mapping[str, str]
    vowel_marks: Mapping[str, str]
    numbers: Mapping[str, str]
    punctuation: Mapping[str, str]
    phonetic: Mapping[str, str]
    reverse: Mapping[str, str]         # first write wins, see _reverse_order

    @property
    def max_grapheme_length(self) -> int:
        """Longest Javanese key in the reverse map, in codepoints."""
        return max((len(k) for k in self.reverse), default=0)


def _forward_map(mappings: Iterable[CharacterMapping]) -> Mapping[str, str]:
    """Lower-cased Latin form -> Javanese form.  Later entries overwrite."""
    result: dict[str, str] = {}
    for m in mappings:
        result[m.latin.lower()] = m.javanese
    return MappingProxyType(result)


def _reverse_order() -> list[CharacterMapping]:
    """Reverse-index insertion sequence, highest priority first."""
    order: list[CharacterMapping] = list(VOWEL_MARKS)
    # "ha", "nga" etc. claim the consonant glyph before any bare-letter alias
    order.extend(
        m for m in CONSONANTS if len(m.latin) > 1 and m.latin.endswith("a")
    )
    order.extend(VOWELS)
    order.extend(NUMBERS)
    order.extend(PUNCTUATION)
    order.extend(SPECIAL_MARKS)
    # Last: "q" shares ꦏ with "ka" and must not take it over.
    order.extend(PHONETIC_APPROXIMATIONS)
    return order


def _reverse_map(ordered: Iterable[CharacterMapping]) -> Mapping[str, str]:
    result: dict[str, str] = {}
    for m in ordered:
        result.setdefault(m.javanese, m.latin)
    return MappingProxyType(result)


def build_index() -> LookupIndex:
    """Derive every lookup structure from the static tables.

    Pure function of the tables in honocoroko.mappings; calling it twice
    yields equal indexes.
    """
    return LookupIndex(
        forward=_forward_map(ALL_MAPPINGS),
        consonants=_forward_map(CONSONANTS),
        vowels=_forward_map(VOWELS),
        vowel_marks=_forward_map(VOWEL_MARKS),
        numbers=_forward_map(NUMBERS),
        punctuation=_forward_map(PUNCTUATION),
        phonetic=_forward_map(PHONETIC_APPROXIMATIONS),
        reverse=_reverse_map(_reverse_order()),
    )


DEFAULT_INDEX = build_index()
