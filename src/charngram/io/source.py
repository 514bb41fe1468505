# charngram/io/source.py
from __future__ import annotations

import gzip
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from charngram.errors import InputOpenError

logger = logging.getLogger(__name__)

GZIP_SUFFIXES: tuple[str, ...] = (".gz", ".gzip")


def is_gzip_path(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() in GZIP_SUFFIXES


def input_size(path: Optional[Union[str, Path]]) -> Optional[int]:
    """
    Return the byte size of a plain input file, or None when unknown.

    Sizes of stdin and of compressed files are not known up front (the
    decompressed length differs from the on-disk length).
    """
    if path is None or is_gzip_path(path):
        return None
    try:
        return Path(path).stat().st_size
    except OSError:
        return None


@contextmanager
def open_input(path: Optional[Union[str, Path]] = None) -> Iterator[BinaryIO]:
    """
    Open the input as a binary stream and close it on every exit path.

    - path=None reads the process's standard input (never closed here).
    - Paths ending in .gz/.gzip are decompressed transparently.
    - Failure to open raises InputOpenError chained from the OSError.
    """
    if path is None:
        logger.debug("Reading from standard input")
        yield sys.stdin.buffer
        return

    p = Path(path).expanduser()
    try:
        if is_gzip_path(p):
            stream: BinaryIO = gzip.open(p, mode="rb")  # type: ignore[assignment]
        else:
            stream = open(p, mode="rb")
    except OSError as exc:
        reason = exc.strerror or str(exc)
        logger.error("Failed to open %s: %s", p, reason)
        raise InputOpenError(p, reason) from exc

    logger.debug("Opened %s (%s)", p, "gzip" if is_gzip_path(p) else "plain")
    with stream:
        yield stream
