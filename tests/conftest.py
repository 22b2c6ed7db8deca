"""Shared test fixtures."""

from pathlib import Path

import pytest

from honocoroko import Transliterator, UnmappedCharacter


@pytest.fixture
def notices() -> list[UnmappedCharacter]:
    """Collects every unmapped-character notice a Transliterator emits."""
    return []


@pytest.fixture
def translit(notices) -> Transliterator:
    """A Transliterator wired to the notices list instead of the logger."""
    return Transliterator(on_unmapped=notices.append)


@pytest.fixture
def write_config(tmp_path):
    """Write a honocoroko.toml into tmp_path and return its path."""

    def _write(body: str, name: str = "honocoroko.toml") -> Path:
        p = tmp_path / name
        p.write_text(body, encoding="utf-8")
        return p

    return _write
