"""
Notices for characters that no mapping table covers.

An unmapped character is not a failure: the engines copy it through and
hand an UnmappedCharacter notice to the on_unmapped hook.  The default hook
logs a warning on the "honocoroko" logger.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger("honocoroko")


@dataclass(frozen=True, slots=True)
class UnmappedCharacter:
    """A character copied through because no table had an entry for it."""

    char: str
    position: int     # index into the input text
    direction: str    # "to_honocoroko" | "from_honocoroko"

    @property
    def codepoint(self) -> str:
        return f"U+{ord(self.char):04X}"

    @property
    def message(self) -> str:
        if self.direction == "from_honocoroko":
            return (
                f"No reverse mapping found for character: {self.char!r} "
                f"({self.codepoint})"
            )
        return f"No mapping found for character: {self.char!r}"


UnmappedHandler = Callable[[UnmappedCharacter], None]


class UnmappedCharacterError(ValueError):
    """Raised in strict mode instead of passing an unmapped character through."""

    def __init__(self, notice: UnmappedCharacter):
        super().__init__(f"{notice.message} at position {notice.position}")
        self.notice = notice


def default_unmapped_handler(notice: UnmappedCharacter) -> None:
    logger.warning(notice.message)
