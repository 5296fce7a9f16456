"""Command-line interface for trigramid."""

from __future__ import annotations

import argparse
import codecs
import logging
import sys
from pathlib import Path

import trigramid
from trigramid.allowlist import AllowList
from trigramid.enums import Lang, Script
from trigramid.pipeline import RawOutcome
from trigramid.text import Text

_SCRIPT_NAMES = [s.value for s in Script]
_LANG_CODES = [lang.code for lang in Lang]
_DEFAULT_MAX_CHARS = 100_000


def _build_allow_list(only: list[str] | None, exclude: list[str] | None) -> AllowList:
    if only is not None:
        return AllowList.only(Lang(code) for code in only)
    if exclude:
        return AllowList.excluding(Lang(code) for code in exclude)
    return AllowList.all()


def _report(name: str, outcome: RawOutcome, minimal: bool) -> None:
    best = outcome.best()
    if minimal:
        print(best[0].code if best else None)
        return
    if best is None:
        print(f"{name}: no candidate language")
        return
    print(f"{name}: {best[0].code} ({outcome.trigrams_count} trigrams)")
    for lang, score in outcome.lang_scores:
        print(f"  {lang.code} {lang.eng_name:<12} {score:.3f}")


def main(argv: list[str] | None = None) -> None:
    """Run the ``trigramid`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Rank candidate languages of UTF-8 text by trigram distance."
    )
    parser.add_argument("files", nargs="*", help="Files to detect the language of")
    parser.add_argument(
        "-s",
        "--script",
        required=True,
        choices=_SCRIPT_NAMES,
        help="Writing system of the text",
    )
    langs = parser.add_mutually_exclusive_group()
    langs.add_argument(
        "--only", nargs="*", choices=_LANG_CODES, help="Consider only these languages"
    )
    langs.add_argument(
        "--exclude", nargs="+", choices=_LANG_CODES, help="Never report these languages"
    )
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the best language code"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log per-language distances"
    )
    parser.add_argument(
        "--version", action="version", version=f"trigramid {trigramid.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    script = Script(args.script)
    allow_list = _build_allow_list(args.only, args.exclude)

    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open(encoding="utf-8") as f:
                    content = f.read(_DEFAULT_MAX_CHARS)
            except (OSError, UnicodeDecodeError) as e:
                print(f"trigramid: {filepath}: {e}", file=sys.stderr)
                continue
            outcome = trigramid.raw_detect(Text(content), script, allow_list)
            _report(filepath, outcome, args.minimal)
    else:
        data = sys.stdin.buffer.read(_DEFAULT_MAX_CHARS * 4)
        # final=False holds back a multi-byte sequence split by the read limit.
        decoder = codecs.getincrementaldecoder("utf-8")()
        try:
            content = decoder.decode(data, final=False)
        except UnicodeDecodeError as e:
            print(f"trigramid: stdin: {e}", file=sys.stderr)
            return
        outcome = trigramid.raw_detect(Text(content), script, allow_list)
        _report("stdin", outcome, args.minimal)


if __name__ == "__main__":
    main()
