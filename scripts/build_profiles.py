#!/usr/bin/env python3
"""Build trigram profiles for trigramid.

Reads one UTF-8 corpus file per language from ``scripts/corpus/<code>.txt``,
ranks its trigrams with the same extractor used at detection time, keeps the
most frequent ``MAX_PROFILE_SIZE`` trigrams, and writes ``profiles.tsv``.

Usage:
    python scripts/build_profiles.py
    python scripts/build_profiles.py --corpus-dir my_corpus --output out.tsv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from trigramid._utils import MAX_PROFILE_SIZE
from trigramid.enums import LANG_SCRIPTS, Lang, Script
from trigramid.profiles import parse_profiles
from trigramid.text import Text
from trigramid.trigrams import rank_trigrams

_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_CORPUS_DIR = _ROOT / "scripts" / "corpus"
_DEFAULT_OUTPUT = _ROOT / "src" / "trigramid" / "profiles" / "profiles.tsv"

_HEADER = (
    "# Trigram profiles, one language per line: script, language, trigrams by rank.\n"
    "# Generated by scripts/build_profiles.py from scripts/corpus/. "
    "Do not edit by hand.\n"
)

# Static candidate order inside each script.  Equal scores are reported in
# this order, so changing it changes tie-breaking.
PROFILE_ORDER: dict[Script, list[Lang]] = {
    Script.LATIN: [Lang.ENG, Lang.FRA, Lang.DEU, Lang.SPA, Lang.POR, Lang.ITA],
    Script.CYRILLIC: [Lang.RUS, Lang.UKR, Lang.BUL],
    Script.ARABIC: [Lang.ARA, Lang.PES, Lang.URD],
    Script.DEVANAGARI: [Lang.HIN, Lang.MAR, Lang.NEP],
    Script.HEBREW: [Lang.HEB, Lang.YID],
}


def build_profile(corpus: str, max_size: int = MAX_PROFILE_SIZE) -> list[str]:
    """Return the *max_size* most frequent trigrams of *corpus*, rank 0 first."""
    ranking = rank_trigrams(Text(corpus).lowercase())
    # rank_trigrams preserves rank order in its insertion order.
    return list(ranking)[:max_size]


def format_line(script: Script, lang: Lang, trigrams: list[str]) -> str:
    """Serialize one profile as a ``profiles.tsv`` line (without newline)."""
    for trigram in trigrams:
        if "\t" in trigram or "|" in trigram:
            msg = f"trigram {trigram!r} of {lang.code} contains a separator"
            raise ValueError(msg)
    return f"{script.value}\t{lang.code}\t{'|'.join(trigrams)}"


def build_all(corpus_dir: Path, max_size: int = MAX_PROFILE_SIZE) -> str:
    """Build the full ``profiles.tsv`` content from *corpus_dir*.

    :raises FileNotFoundError: If a language has no corpus file.
    :raises ValueError: If the result does not parse back as valid profiles.
    """
    lines = [_HEADER]
    for script, langs in PROFILE_ORDER.items():
        for lang in langs:
            if LANG_SCRIPTS[lang] is not script:
                msg = f"{lang.code} is listed under {script.value}"
                raise ValueError(msg)
            corpus = (corpus_dir / f"{lang.code}.txt").read_text(encoding="utf-8")
            trigrams = build_profile(corpus, max_size)
            print(f"  {lang.code}: {len(trigrams)} trigrams", file=sys.stderr)
            lines.append(format_line(script, lang, trigrams) + "\n")
    content = "".join(lines)
    parse_profiles(content)
    return content


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Build trigramid trigram profiles.")
    parser.add_argument(
        "--corpus-dir",
        type=Path,
        default=_DEFAULT_CORPUS_DIR,
        help="Directory holding <code>.txt corpus files",
    )
    parser.add_argument(
        "--output", type=Path, default=_DEFAULT_OUTPUT, help="Profiles file to write"
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=MAX_PROFILE_SIZE,
        help="Trigrams kept per language",
    )
    args = parser.parse_args(argv)

    if not 1 <= args.max_size <= MAX_PROFILE_SIZE:
        parser.error(f"--max-size must be between 1 and {MAX_PROFILE_SIZE}")

    content = build_all(args.corpus_dir, args.max_size)
    args.output.write_text(content, encoding="utf-8")
    print(f"Wrote {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
