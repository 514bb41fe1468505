# charngram/config.py
"""Run configuration for n-gram counting."""
from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, get_args

OutputFormat = Literal["counts", "fraction", "percent", "json"]

OUTPUT_FORMATS: tuple[str, ...] = get_args(OutputFormat)
DEFAULT_ENCODING = "utf-8"
DEFAULT_CHUNK_SIZE = 64 * 1024


def _decodes_to_text(encoding: str) -> bool:
    """True iff the codec turns bytes into str (rules out base64, hex, zlib, ...)."""
    try:
        decoded = codecs.getincrementaldecoder(encoding)().decode(b"", final=True)
    except (LookupError, TypeError, ValueError):
        return False
    return isinstance(decoded, str)


@dataclass(frozen=True)
class NgramConfig:
    """Immutable settings for a single counting run."""

    # Counting
    n: int
    include_whitespace: bool = False

    # Output
    output_format: OutputFormat = "counts"

    # Input
    filename: Optional[Path] = None  # None reads from stdin
    encoding: str = DEFAULT_ENCODING
    chunk_size: int = DEFAULT_CHUNK_SIZE

    # Ambient
    progress: bool = False
    log_level: int = logging.WARNING
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n < 1:
            raise ValueError(f"n must be a positive integer, got {self.n!r}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}; "
                f"got {self.output_format!r}"
            )
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {self.encoding!r}") from exc
        if not _decodes_to_text(self.encoding):
            raise ValueError(
                f"encoding {self.encoding!r} does not decode bytes to text"
            )

    @property
    def reads_stdin(self) -> bool:
        return self.filename is None

    @property
    def source_label(self) -> str:
        return "<stdin>" if self.filename is None else str(self.filename)

    @classmethod
    def from_args(cls, args) -> "NgramConfig":
        """Build a config from an argparse namespace (see charngram.cli)."""
        if args.json:
            output_format = "json"
        elif args.as_percent:
            output_format = "percent"
        elif args.as_fraction:
            output_format = "fraction"
        else:
            output_format = "counts"

        filename = args.filename
        if filename is not None and str(filename) == "-":
            filename = None

        return cls(
            n=args.n,
            include_whitespace=args.include_whitespace,
            output_format=output_format,
            filename=filename,
            encoding=args.encoding,
            progress=args.progress,
            log_level=logging.DEBUG if args.verbose else logging.WARNING,
            log_file=args.log_file,
        )
