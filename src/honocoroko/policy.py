"""Which characters bypass the mapping tables entirely."""

from __future__ import annotations

# ASCII symbols with no place in Javanese script.  Copied verbatim unless the
# caller asks for conversion.  , . : " ( ) are absent: they have pada glyphs.
PRESERVED_CHARS: frozenset[str] = frozenset("?!@#$%^&*-_=+[]{}|\\;'<>/`~")


def should_preserve(char: str, convert_special_chars: bool = False) -> bool:
    """True if *char* must be emitted unchanged without any lookup."""
    return not convert_special_chars and char in PRESERVED_CHARS
