# charngram/pipeline/runner.py
from __future__ import annotations

import logging
import sys
import time
from typing import Optional, TextIO

from tqdm import tqdm

from charngram.accumulate import NgramAccumulator
from charngram.config import NgramConfig
from charngram.io.decode import iter_chars
from charngram.io.source import input_size, open_input
from charngram.pipeline.report import log_run_summary, write_report

logger = logging.getLogger(__name__)


def count_input(config: NgramConfig) -> NgramAccumulator:
    """
    Read, decode and count the configured input in a single pass.

    The input handle is released on every exit path. A DecodingError aborts
    the pass and propagates; no partial tables are returned.
    """
    acc = NgramAccumulator(config.n, include_whitespace=config.include_whitespace)

    with open_input(config.filename) as stream:
        with tqdm(
            total=input_size(config.filename),
            desc="Reading",
            unit="B",
            unit_scale=True,
            file=sys.stderr,
            disable=not config.progress,
        ) as pbar:
            chars = iter_chars(
                stream,
                config.encoding,
                chunk_size=config.chunk_size,
                on_chunk=pbar.update,
            )
            acc.feed(chars)

    return acc


def run(config: NgramConfig, out: Optional[TextIO] = None) -> NgramAccumulator:
    """
    Count the input, log a summary, and write the report to out (default stdout).

    Errors raised:
        InputOpenError, DecodingError: before anything is written
        OutputWriteError: a write failed
        BrokenPipeError: the reader of out went away (callers treat as success)
    """
    out = out if out is not None else sys.stdout
    t0 = time.perf_counter()

    logger.info(
        "Counting n-grams up to length %d from %s", config.n, config.source_label
    )
    acc = count_input(config)
    elapsed = time.perf_counter() - t0

    log_run_summary(
        config=config,
        tables=acc.tables,
        chars_seen=acc.chars_seen,
        elapsed_s=elapsed,
    )

    write_report(acc.tables, config, out)
    return acc
