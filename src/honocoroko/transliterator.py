"""
Latin <-> Javanese script transliteration engines.

The forward engine (Latin -> Javanese) walks the input left to right and at
each position takes the longest Latin unit it recognises: a 3-letter
consonant ("nga", "nya", "dha", "tha"), a 2-letter syllable, or a single
letter, digit or punctuation mark.  Abugida rules are applied on the way:
the inherent "a" needs no mark, other vowels attach a sandhangan, and a
consonant followed directly by another consonant gets a pangkon.

The reverse engine (Javanese -> Latin) is a greedy longest-match over the
reverse index, trying 4, 3, 2 and then 1 codepoint(s) so that multi-codepoint
graphemes such as taling-tarung are never split.

Usage:
    from honocoroko import to_honocoroko, from_honocoroko, transliterate

    to_honocoroko("hanacaraka")             # 'ꦲꦤꦕꦫꦏ'
    from_honocoroko("ꦲꦤꦕꦫꦏ")               # 'hanacaraka'
    transliterate("ꦧꦶ", "from_honocoroko")  # 'bai'

    # Or with custom options and a diagnostics hook:
    notices = []
    t = Transliterator(on_unmapped=notices.append)
    t.to_honocoroko("hana?", TransliterationOptions(convert_special_chars=True))
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path

from honocoroko.diagnostics import (
    UnmappedCharacter,
    UnmappedCharacterError,
    UnmappedHandler,
    default_unmapped_handler,
    logger,
)
from honocoroko.index import DEFAULT_INDEX, LookupIndex
from honocoroko.mappings import CATEGORIES, PANGKON
from honocoroko.policy import should_preserve

TO_HONOCOROKO = "to_honocoroko"
FROM_HONOCOROKO = "from_honocoroko"

_DIRECTIONS = {
    TO_HONOCOROKO: TO_HONOCOROKO,
    FROM_HONOCOROKO: FROM_HONOCOROKO,
    "toHonocoroko": TO_HONOCOROKO,
    "fromHonocoroko": FROM_HONOCOROKO,
}

_VOWEL_CHARS = frozenset("aiueéo")
_LATIN_CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz")

# Longest reverse-index key is 3 codepoints (ꦏ꧀ꦱ); one spare.
_REVERSE_WINDOW = 4


@dataclass(frozen=True, slots=True)
class TransliterationOptions:
    """Per-call switches shared by both directions."""

    convert_special_chars: bool = False  # False: PRESERVED_CHARS pass through
    strict: bool = False                 # True: raise on unmapped characters


class Transliterator:
    """
    Bidirectional Latin/Javanese transliterator.

    Holds a read-only LookupIndex, the default options used when a call
    passes none, and the on_unmapped hook that receives an UnmappedCharacter
    for every character copied through without a mapping.  Instances keep
    no per-call state, so one instance can serve many threads.
    """

    def __init__(
        self,
        options: TransliterationOptions | None = None,
        index: LookupIndex | None = None,
        on_unmapped: UnmappedHandler | None = None,
    ):
        self.options = options or TransliterationOptions()
        self.index = index or DEFAULT_INDEX
        self.on_unmapped = on_unmapped or default_unmapped_handler

    @classmethod
    def from_config(
        cls,
        config_path: str | Path = "honocoroko.toml",
        on_unmapped: UnmappedHandler | None = None,
    ) -> Transliterator:
        """Build a Transliterator whose default options come from a TOML file."""
        from honocoroko.config import load_config

        cfg = load_config(config_path)
        return cls(options=cfg.options, on_unmapped=on_unmapped)

    # ── Public API ───────────────────────────────────────────────────────

    def to_honocoroko(
        self, text: str, options: TransliterationOptions | None = None,
    ) -> str:
        """Transliterate Latin text to Javanese script."""
        opts = self._resolve(options)
        return self._forward(_check_text(text), opts, self._notifier(opts))

    def from_honocoroko(
        self, text: str, options: TransliterationOptions | None = None,
    ) -> str:
        """Transliterate Javanese script to Latin text."""
        opts = self._resolve(options)
        return self._reverse(_check_text(text), opts, self._notifier(opts))

    def transliterate(
        self,
        text: str,
        direction: str,
        options: TransliterationOptions | None = None,
    ) -> str:
        """Route to to_honocoroko or from_honocoroko by direction tag."""
        if _resolve_direction(direction) == TO_HONOCOROKO:
            return self.to_honocoroko(text, options)
        return self.from_honocoroko(text, options)

    def find_unmapped(
        self,
        text: str,
        direction: str,
        options: TransliterationOptions | None = None,
    ) -> list[UnmappedCharacter]:
        """List every character a call would pass through unmapped.

        Nothing is logged and strict mode is ignored.
        """
        opts = dataclasses.replace(self._resolve(options), strict=False)
        text = _check_text(text)
        found: list[UnmappedCharacter] = []
        if _resolve_direction(direction) == TO_HONOCOROKO:
            self._forward(text, opts, found.append)
        else:
            self._reverse(text, opts, found.append)
        return found

    def summary(self) -> str:
        lines = ["Honocoroko Transliterator (Latin <-> Javanese)"]
        lines.append("  Tables:")
        for name, table in CATEGORIES:
            lines.append(f"    {name + ':':26s}{len(table)}")
        lines.append(
            f"  Reverse index:  {len(self.index.reverse)} graphemes "
            f"(longest {self.index.max_grapheme_length} codepoints)"
        )
        lines.append(
            f"  Options:        convert_special_chars="
            f"{self.options.convert_special_chars}, strict={self.options.strict}"
        )
        return "\n".join(lines)

    # ── Diagnostics ──────────────────────────────────────────────────────

    def _resolve(
        self, options: TransliterationOptions | None,
    ) -> TransliterationOptions:
        return self.options if options is None else options

    def _notifier(self, options: TransliterationOptions) -> UnmappedHandler:
        if options.strict:
            return _raise_unmapped
        return self._notify

    def _notify(self, notice: UnmappedCharacter) -> None:
        # A failing hook must not change the transliteration result.
        try:
            self.on_unmapped(notice)
        except Exception:
            logger.exception("on_unmapped hook failed for %s", notice.codepoint)

    # ── Latin -> Javanese ────────────────────────────────────────────────

    def _is_consonant(self, char: str) -> bool:
        lower = char.lower()
        consonants = self.index.consonants
        return (
            lower in consonants
            or lower + "a" in consonants
            or lower in _LATIN_CONSONANTS
        )

    def _forward(
        self, text: str, options: TransliterationOptions, report: UnmappedHandler,
    ) -> str:
        if not text:
            return ""

        idx = self.index
        consonants = idx.consonants
        out: list[str] = []
        n = len(text)
        i = 0

        while i < n:
            char = text[i]

            if should_preserve(char, options.convert_special_chars) or char.isspace():
                out.append(char)
                i += 1
                continue

            glyph = idx.numbers.get(char) or idx.punctuation.get(char)
            if glyph:
                out.append(glyph)
                i += 1
                continue

            # nga, nya, dha, tha
            if i + 3 <= n:
                glyph = consonants.get(text[i:i + 3])
                if glyph:
                    out.append(glyph)
                    i += 3
                    continue

            if i + 2 <= n:
                pair = text[i:i + 2]
                glyph = consonants.get(pair)
                if glyph:
                    out.append(glyph)
                    i += 2
                    continue

                # Consonant + vowel: base glyph, then a sandhangan unless "a"
                vowel = pair[1]
                if vowel.lower() in _VOWEL_CHARS:
                    glyph = consonants.get(char + "a") or consonants.get(char)
                    if glyph:
                        out.append(glyph)
                        if vowel != "a":
                            out.append(idx.vowel_marks.get(vowel.lower(), ""))
                        i += 2
                        continue

            # Lone consonant: pangkon if another consonant follows directly
            glyph = consonants.get(char + "a") or consonants.get(char)
            if glyph:
                out.append(glyph)
                if i + 1 < n and self._is_consonant(text[i + 1]):
                    out.append(PANGKON)
                i += 1
                continue

            glyph = idx.vowels.get(char) or idx.phonetic.get(char.lower())
            if glyph:
                out.append(glyph)
                i += 1
                continue

            report(UnmappedCharacter(char, i, TO_HONOCOROKO))
            out.append(char)
            i += 1

        return "".join(out)

    # ── Javanese -> Latin ────────────────────────────────────────────────

    def _reverse(
        self, text: str, options: TransliterationOptions, report: UnmappedHandler,
    ) -> str:
        if not text:
            return ""

        reverse = self.index.reverse
        out: list[str] = []
        n = len(text)
        i = 0

        while i < n:
            char = text[i]

            if should_preserve(char, options.convert_special_chars):
                out.append(char)
                i += 1
                continue

            for length in range(min(_REVERSE_WINDOW, n - i), 0, -1):
                latin = reverse.get(text[i:i + length])
                if latin is not None:
                    out.append(latin)
                    i += length
                    break
            else:
                if not char.isspace():
                    report(UnmappedCharacter(char, i, FROM_HONOCOROKO))
                out.append(char)
                i += 1

        return "".join(out)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _check_text(text: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")
    return text


def _resolve_direction(direction: str) -> str:
    try:
        return _DIRECTIONS[direction]
    except KeyError:
        raise ValueError(
            f"Unsupported direction: {direction!r} "
            f"(expected {TO_HONOCOROKO!r} or {FROM_HONOCOROKO!r})"
        ) from None


def _raise_unmapped(notice: UnmappedCharacter) -> None:
    raise UnmappedCharacterError(notice)


# ── Module-level entry points ────────────────────────────────────────────────

_default = Transliterator()


def to_honocoroko(text: str, options: TransliterationOptions | None = None) -> str:
    """Transliterate Latin text to Javanese script (Hanacaraka)."""
    return _default.to_honocoroko(text, options)


def from_honocoroko(text: str, options: TransliterationOptions | None = None) -> str:
    """Transliterate Javanese script (Hanacaraka) to Latin text."""
    return _default.from_honocoroko(text, options)


def transliterate(
    text: str, direction: str, options: TransliterationOptions | None = None,
) -> str:
    """Transliterate in either direction ("to_honocoroko" / "from_honocoroko")."""
    return _default.transliterate(text, direction, options)
