# charngram/cli.py
"""
Command-line entry point.

Examples:
  charngram -n 2 corpus.txt
  charngram -n 3 --as-percent < corpus.txt | head
  charngram -n 2 -w --json corpus.txt.gz
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from charngram import __version__
from charngram.config import DEFAULT_ENCODING, NgramConfig
from charngram.errors import NgramError
from charngram.pipeline.logger import setup_logger
from charngram.pipeline.runner import run

logger = logging.getLogger(__name__)

PROG = "charngram"
EXIT_OK = 0
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Count character n-grams of every length up to N and "
                    "report the length-N n-grams by frequency.",
    )
    p.add_argument("-n", type=_positive_int, required=True, metavar="N",
                   help="Size of ngram to collect (2 for bigrams, 3 for trigrams, etc)")
    fmt = p.add_mutually_exclusive_group()
    fmt.add_argument("-f", "--as-fraction", action="store_true",
                     help="Output decimal fractions for each ngram (rather than counts)")
    fmt.add_argument("-p", "--as-percent", action="store_true",
                     help="Output percentages for each ngram (rather than counts)")
    p.add_argument("-w", "--include-whitespace", action="store_true",
                   help="Include ngrams that contain whitespace characters")
    p.add_argument("-j", "--json", action="store_true",
                   help="Output ngrams of every length and their frequencies as JSON")
    p.add_argument("--encoding", default=DEFAULT_ENCODING,
                   help=f"Input text encoding (default: {DEFAULT_ENCODING})")
    p.add_argument("--progress", action="store_true",
                   help="Show a progress bar on stderr while reading")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log debug details to stderr")
    p.add_argument("--log-file", type=Path, default=None,
                   help="Also write log messages to this file")
    p.add_argument("-V", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("filename", type=Path, nargs="?", default=None,
                   help="File to read from ('-' or omitted reads STDIN; .gz is decompressed)")
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    args = parse_args(argv)

    try:
        config = NgramConfig.from_args(args)
    except ValueError as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        setup_logger(level=config.log_level, log_file=config.log_file, force=True)
    except OSError as exc:
        print(f"{PROG}: error: cannot open log file {str(config.log_file)!r}: "
              f"{exc.strerror or exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        run(config, out=out)
    except BrokenPipeError:
        # The reader closed its end (e.g. `| head`): a normal early exit
        logger.debug("Output pipe closed by reader; stopping")
        if out is None or out is sys.stdout:
            _silence_stdout()
        return EXIT_OK
    except NgramError as exc:
        logger.debug("Run failed", exc_info=True)
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return exc.exit_code
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
