# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Tuipe Contributors
#
# This file is part of Tuipe.
#
# Tuipe is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Tuipe is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import argparse
import sys

from loguru import logger

from tuipe._version import __version__
from tuipe.cli import configure, langs, practice, stats, wordlist
from tuipe.cli._io import configure_logging
from tuipe.cli.exitcodes import EXIT_ERROR, EXIT_USAGE, exit_code_for_error
from tuipe.model.types import DEFAULT_CURVE_WINDOW
from tuipe.plot import ColorMode
from tuipe.stats.render import DEFAULT_CURVE_HEIGHT

COMMANDS = ("practice", "stats", "langs", "config", "wordlist")
DEFAULT_COMMAND = "practice"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")

    p = _ArgumentParser(prog="tuipe", description="tuipe - terminal typing practice with learning curves")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(dest="cmd", parser_class=_ArgumentParser)

    # practice
    prac = sub.add_parser("practice", parents=[common], help="Start a practice run (default).")
    prac.add_argument("--lang", default=None, help="Language code (default: en).")
    prac.add_argument("--words", type=int, default=None, help="Words per text (default: 25).")
    prac.add_argument("--caps", type=float, default=None, help="Capitalization probability, 0-1 (default: 0.5).")
    prac.add_argument("--punct", type=float, default=None, help="Punctuation probability, 0-1 (default: 0.5).")
    prac.add_argument("--punct-set", dest="punct_set", default=None, help="Punctuation characters to use.")
    prac.add_argument(
        "--focus-weak",
        dest="focus_weak",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Bias word choice toward weak characters.",
    )
    prac.add_argument("--weak-top", dest="weak_top", type=int, default=None, help="Weak characters to focus on.")
    prac.add_argument("--weak-factor", dest="weak_factor", type=float, default=None, help="Weight per weak character.")
    prac.add_argument(
        "--weak-window", dest="weak_window", type=int, default=None, help="Recent sessions used to find weak characters."
    )

    # stats
    st = sub.add_parser("stats", parents=[common], help="Show stats and learning curves.")
    st.add_argument("--lang", default="", help="Language filter.")
    st.add_argument("--since", default=None, help="Start date (YYYY-MM-DD).")
    st.add_argument("--last", type=int, default=0, help="Limit to the last N sessions.")
    st.add_argument(
        "--curve-window",
        dest="curve_window",
        type=int,
        default=DEFAULT_CURVE_WINDOW,
        help=f"Moving average window (default: {DEFAULT_CURVE_WINDOW}).",
    )
    st.add_argument("--char", dest="chars", default="", help='Characters for per-char curves ("abc" or "a,b,th").')
    st.add_argument("--width", type=int, default=None, help="Plot width in columns (default: terminal width).")
    st.add_argument(
        "--height", type=int, default=DEFAULT_CURVE_HEIGHT, help=f"Plot height in rows (default: {DEFAULT_CURVE_HEIGHT})."
    )
    st.add_argument(
        "--color", choices=[m.value for m in ColorMode], default=ColorMode.AUTO.value, help="Color output."
    )
    st.add_argument("--output", "-o", default=None, help="Also save learning curves as an image (PNG, SVG, PDF).")

    # langs
    sub.add_parser("langs", parents=[common], help="List installed word lists.")

    # config
    cfg = sub.add_parser("config", parents=[common], help="Create and edit the config file.")
    cfg.add_argument("--path", dest="path_only", action="store_true", help="Print the config path only.")

    # wordlist
    wl = sub.add_parser("wordlist", help="Word list operations.")
    wl_sub = wl.add_subparsers(dest="wordlist_cmd", required=True, parser_class=_ArgumentParser)

    wl_add = wl_sub.add_parser("add", parents=[common], help="Install a word list from a local file.")
    wl_add.add_argument("--lang", required=True, help="Language code for the list.")
    wl_add.add_argument("--from", dest="source", required=True, help="Text file with one word per line.")
    wl_add.add_argument("--size", type=int, default=None, help="Keep only the first N words.")
    wl_add.add_argument("--force", action="store_true", help="Overwrite an existing list.")

    return p


def _with_default_command(argv: list[str]) -> list[str]:
    """Running `tuipe [practice flags]` means `tuipe practice [flags]`."""
    if argv and (argv[0] in COMMANDS or argv[0] in ("-h", "--help", "--version")):
        return argv
    return [DEFAULT_COMMAND, *argv]


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(_with_default_command(argv))

    try:
        configure_logging(verbose=getattr(args, "verbose", False))

        if args.cmd == "practice":
            return practice.run(
                {
                    "lang": args.lang,
                    "words": args.words,
                    "caps_pct": args.caps,
                    "punct_pct": args.punct,
                    "punct_set": args.punct_set,
                    "focus_weak": args.focus_weak,
                    "weak_top": args.weak_top,
                    "weak_factor": args.weak_factor,
                    "weak_window": args.weak_window,
                }
            )

        if args.cmd == "stats":
            return stats.show(
                lang=args.lang,
                since=args.since,
                last=args.last,
                curve_window=args.curve_window,
                chars=args.chars,
                width=args.width,
                height=args.height,
                color=args.color,
                output=args.output,
            )

        if args.cmd == "langs":
            return langs.run()

        if args.cmd == "config":
            return configure.run(path_only=args.path_only)

        if args.cmd == "wordlist":
            if args.wordlist_cmd == "add":
                return wordlist.add(lang=args.lang, source=args.source, size=args.size, force=args.force)

        print("Unknown command.", file=sys.stderr)
        return EXIT_ERROR

    except Exception as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(f"tuipe: error: {e}", file=sys.stderr)
        return exit_code_for_error(e)


def run() -> None:
    sys.exit(main())
