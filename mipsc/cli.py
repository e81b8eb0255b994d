"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from . import constants
from .api import compile_with_stats, dump_ir, dump_tree, tokenize_source
from .errors import CompileError


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mipsc", description="Translate loop programs to MIPS assembly"
    )
    parser.add_argument("file", nargs="?",
                        help="Source file to translate (default: built-in demo)")
    parser.add_argument("--output", "-o", default=None,
                        help="Write assembly to this file instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log each pipeline stage")
    parser.add_argument("--stats", action="store_true",
                        help="Print pipeline statistics after the assembly (full translation only)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--tokens", action="store_true",
                      help="Only print the token stream")
    mode.add_argument("--ast", action="store_true",
                      help="Only print the syntax tree")
    mode.add_argument("--ir-only", action="store_true",
                      help="Only print the indented instruction listing")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    if not args.file:
        source = constants.DEMO_SOURCE
        print("No file provided. Using built-in demo:\n")
        print(source + "\n")
    else:
        with open(args.file, encoding="utf-8") as f:
            source = f.read()

    stats = None
    try:
        if args.tokens:
            text = "".join(f"  {tok}\n" for tok in tokenize_source(source))
        elif args.ast:
            text = dump_tree(source) + "\n"
        elif args.ir_only:
            text = dump_ir(source) + "\n"
        else:
            text, stats = compile_with_stats(source)
    except CompileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)
    if args.stats and stats is not None:
        print(stats.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
