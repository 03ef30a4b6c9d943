"""
codewalk command-line entry point.

Usage:
  codewalk <source.md> <target.md> [<base-dir>]

Reads the source document, resolves every ```codewalk block against the
files it names (relative to <base-dir>, default the current directory)
and writes the rewritten document to the target path.

Exit status is 0 on success and 1 on a usage error or any processing
error; the error message goes to stderr and the target is not written.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from codewalk import __version__, generate
from codewalk.config import WalkConfig
from codewalk.errors import CodewalkError
from codewalk.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="codewalk",
        description="Replace ```codewalk blocks with excerpts of live source files.",
    )
    parser.add_argument("--version", action="version", version=f"codewalk {__version__}")
    parser.add_argument("source", help="markdown document containing codewalk blocks")
    parser.add_argument("target", help="path of the rewritten document")
    parser.add_argument(
        "base_dir",
        nargs="?",
        default=None,
        help="directory that relative target-file paths are resolved against",
    )
    parser.add_argument(
        "--lang",
        default="go",
        help="info string of the generated code fences (default: %(default)s)",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="re-read target files for every directive",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    config = WalkConfig(
        language=args.lang,
        base_dir=args.base_dir,
        cache_sources=not args.no_cache,
    )
    logger.debug("running with %s", config)
    try:
        generate(args.source, args.target, config=config)
    except CodewalkError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE
    except OSError as exc:
        print(f"cannot write {args.target!r}: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


def run() -> NoReturn:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
