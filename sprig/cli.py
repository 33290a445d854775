"""Command-line entry point: evaluate one or more Sprig source files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sprig.config import get_log_level
from sprig.interpreter import load_file
from sprig.printer import to_string
from sprig.runtime_context import set_verbose
from sprig.types.errors import SprigError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sprig",
        description="Evaluate Sprig source files, each against a fresh environment",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Source files to evaluate in order")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Trace every evaluation step to stderr",
    )
    parser.add_argument(
        "-p",
        "--print",
        dest="print_result",
        action="store_true",
        help="Print the final value of each file",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(message)s",
        stream=sys.stderr,
    )
    if args.verbose:
        set_verbose(True)

    for path in args.files:
        try:
            result = load_file(path)
        except OSError as ex:
            logging.error("cannot read %s: %s", path, ex)
            return 1
        except SprigError as ex:
            logging.error("%s: %s: %s", path, type(ex).__name__, ex)
            return 1
        if args.print_result:
            print(to_string(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
