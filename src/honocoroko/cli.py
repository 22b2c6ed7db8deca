#!/usr/bin/env python3
"""
Latin <-> Javanese script transliteration CLI.

Reads defaults from honocoroko.toml if present, overridable with flags:

    python -m honocoroko.cli --to "hanacaraka"
    python -m honocoroko.cli --from "ꦲꦤꦕꦫꦏ"
    python -m honocoroko.cli --file notes.txt --direction to
    python -m honocoroko.cli --file - --direction from < javanese.txt
    python -m honocoroko.cli --to "hana?" --convert-special-chars --check
    python -m honocoroko.cli --summary
"""

import argparse
import logging
import sys
from pathlib import Path


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Transliterate between Latin and Javanese script (Hanacaraka)"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect honocoroko.toml)",
    )
    parser.add_argument(
        "--to",
        metavar="TEXT",
        help="Transliterate Latin text to Javanese script",
    )
    parser.add_argument(
        "--from",
        dest="from_",
        metavar="TEXT",
        help="Transliterate Javanese script to Latin text",
    )
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="Read text from a UTF-8 file ('-' for stdin)",
    )
    parser.add_argument(
        "--direction",
        choices=["to", "from"],
        default="to",
        help="Direction for --file input (default: to)",
    )
    parser.add_argument(
        "--convert-special-chars",
        action="store_true",
        default=None,
        help="Run symbols like ? @ / through the mapping tables instead of preserving them",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on the first character with no mapping",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report unmapped characters instead of transliterating",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print mapping table and option summary",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    args = parser.parse_args(argv)

    if args.to is None and args.from_ is None and not (args.file or args.summary):
        parser.error("Nothing to do: pass --to, --from, --file or --summary.")

    # ── Config ───────────────────────────────────────────────────────────

    from honocoroko.config import HonocorokoConfig, find_default_config, load_config
    from honocoroko.transliterator import (
        FROM_HONOCOROKO,
        TO_HONOCOROKO,
        TransliterationOptions,
        Transliterator,
    )
    from honocoroko.diagnostics import UnmappedCharacterError

    config_path = Path(args.config) if args.config else find_default_config()
    try:
        cfg = load_config(config_path) if config_path else HonocorokoConfig()
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=args.log_level or cfg.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    options = TransliterationOptions(
        convert_special_chars=(
            cfg.options.convert_special_chars
            if args.convert_special_chars is None else args.convert_special_chars
        ),
        strict=cfg.options.strict if args.strict is None else args.strict,
    )
    translit = Transliterator(options=options)

    if args.summary:
        print(translit.summary())
        print()

    # ── Work items ───────────────────────────────────────────────────────

    jobs: list[tuple[str, str]] = []
    if args.to is not None:
        jobs.append((TO_HONOCOROKO, args.to))
    if args.from_ is not None:
        jobs.append((FROM_HONOCOROKO, args.from_))
    if args.file:
        direction = TO_HONOCOROKO if args.direction == "to" else FROM_HONOCOROKO
        try:
            jobs.append((direction, _read_input(args.file)))
        except (OSError, UnicodeDecodeError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

    for direction, text in jobs:
        if args.check:
            notices = translit.find_unmapped(text, direction)
            if notices:
                print(f"{len(notices)} unmapped character(s) ({direction}):")
                for n in notices:
                    print(f"  {n.position:6d}  {n.char!r}  {n.codepoint}")
            else:
                print(f"All characters mapped ({direction}).")
            continue

        try:
            result = translit.transliterate(text, direction)
        except UnmappedCharacterError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        sys.stdout.write(result if result.endswith("\n") else result + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
