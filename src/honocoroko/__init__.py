"""honocoroko: Latin <-> Javanese script (Hanacaraka) transliteration."""

from honocoroko.mappings import CharacterMapping
from honocoroko.index import LookupIndex, build_index
from honocoroko.diagnostics import UnmappedCharacter, UnmappedCharacterError
from honocoroko.transliterator import (
    TransliterationOptions,
    Transliterator,
    to_honocoroko,
    from_honocoroko,
    transliterate,
)

__all__ = [
    "CharacterMapping",
    "LookupIndex", "build_index",
    "UnmappedCharacter", "UnmappedCharacterError",
    "TransliterationOptions", "Transliterator",
    "to_honocoroko", "from_honocoroko", "transliterate",
]
