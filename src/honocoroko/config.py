"""
TOML configuration for the transliterator and its CLI.

    [transliteration]
    convert_special_chars = false
    strict = false

    [logging]
    level = "WARNING"

Every table and key is optional; missing values fall back to defaults.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from honocoroko.transliterator import TransliterationOptions

DEFAULT_CONFIG_NAME = "honocoroko.toml"


@dataclass(slots=True)
class HonocorokoConfig:
    options: TransliterationOptions = field(default_factory=TransliterationOptions)
    log_level: str = "WARNING"
    path: Path | None = None


def find_default_config() -> Path | None:
    """Look for honocoroko.toml in the current directory."""
    candidate = Path(DEFAULT_CONFIG_NAME)
    if candidate.exists():
        return candidate
    return None


def load_config(config_path: str | Path = DEFAULT_CONFIG_NAME) -> HonocorokoConfig:
    """Read and validate a config file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with config_path.open("rb") as f:
        cfg = tomllib.load(f)

    tr_cfg = _get_table(cfg, "transliteration")
    options = TransliterationOptions(
        convert_special_chars=_get_bool(tr_cfg, "convert_special_chars"),
        strict=_get_bool(tr_cfg, "strict"),
    )

    level = _get_table(cfg, "logging").get("level", "WARNING")
    if not isinstance(level, str) or level.upper() not in logging.getLevelNamesMapping():
        raise ValueError(f"[logging] level: unknown level {level!r}")

    return HonocorokoConfig(options=options, log_level=level.upper(), path=config_path)


def _get_table(cfg: dict, name: str) -> dict:
    table = cfg.get(name, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{name}] must be a table, got {table!r}")
    return table


def _get_bool(table: dict, key: str) -> bool:
    value = table.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"[transliteration] {key} must be true or false, got {value!r}")
    return value
