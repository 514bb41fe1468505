# charngram/pipeline/report.py
from __future__ import annotations

import json
import logging
from collections import Counter
from typing import Iterator, List, Mapping, Sequence, TextIO, Tuple

from charngram.config import NgramConfig, OutputFormat
from charngram.errors import OutputWriteError

logger = logging.getLogger(__name__)


def rank(table: Mapping[str, int]) -> List[Tuple[str, int]]:
    """
    Return (sequence, count) pairs by descending count.

    Ties are broken by ascending code-point order of the sequence, so the
    ranking is reproducible regardless of insertion order.
    """
    return sorted(table.items(), key=lambda item: (-item[1], item[0]))


def total_count(table: Mapping[str, int]) -> int:
    return sum(table.values())


def fractions(table: Mapping[str, int]) -> List[Tuple[str, float]]:
    """Ranked (sequence, count / total) pairs; empty for an empty table."""
    total = total_count(table)
    if not total:
        return []
    return [(seq, count / total) for seq, count in rank(table)]


def percentages(table: Mapping[str, int]) -> List[Tuple[str, float]]:
    """Ranked (sequence, 100 * count / total) pairs; empty for an empty table."""
    return [(seq, 100.0 * frac) for seq, frac in fractions(table)]


def format_text_lines(
    table: Mapping[str, int],
    output_format: OutputFormat = "counts",
) -> Iterator[str]:
    """
    Yield one "<value> <sequence>" line per ranked entry (no newline).

    counts   -> integer right-aligned to the widest count
    fraction -> 7 wide, 5 decimals            e.g. "0.33333 ab"
    percent  -> 7 wide, 3 decimals, then '%'  e.g. " 33.333% ab"
    """
    if output_format == "json":
        raise ValueError("json output is not line-oriented; use dump_json")

    if output_format == "fraction":
        for seq, frac in fractions(table):
            yield f"{frac:>7.5f} {seq}"
    elif output_format == "percent":
        for seq, pct in percentages(table):
            yield f"{pct:>7.3f}% {seq}"
    else:
        ranked = rank(table)
        if not ranked:
            return
        width = len(str(ranked[0][1]))
        for seq, count in ranked:
            yield f"{count:>{width}} {seq}"


def tables_to_json(tables: Sequence[Mapping[str, int]]) -> List[dict]:
    """Plain dicts with lexicographically ordered keys, one per window length."""
    return [
        {seq: int(table[seq]) for seq in sorted(table)}
        for table in tables
    ]


def dump_json(tables: Sequence[Mapping[str, int]], stream: TextIO) -> None:
    """Write all tables as a pretty-printed JSON array (lengths 1..n)."""
    json.dump(tables_to_json(tables), stream, indent=2, ensure_ascii=False)
    stream.write("\n")


def load_json(stream: TextIO) -> List[Counter[str]]:
    """Parse the output of dump_json back into frequency tables."""
    data = json.load(stream)
    if not isinstance(data, list) or not all(isinstance(t, dict) for t in data):
        raise ValueError("expected a JSON array of objects")
    return [Counter({str(k): int(v) for k, v in t.items()}) for t in data]


def write_report(
    tables: Sequence[Mapping[str, int]],
    config: NgramConfig,
    stream: TextIO,
) -> None:
    """
    Write the report for a completed run.

    Text formats report only the longest table (length config.n); json
    writes every table. BrokenPipeError propagates unchanged so the caller
    can treat a closed reader as a normal exit; other OSErrors are raised as
    OutputWriteError.
    """
    try:
        if config.output_format == "json":
            dump_json(tables, stream)
        else:
            for line in format_text_lines(tables[config.n - 1], config.output_format):
                stream.write(line)
                stream.write("\n")
        stream.flush()
    except BrokenPipeError:
        raise
    except OSError as exc:
        raise OutputWriteError(f"failed to write output: {exc}") from exc


def _abbrev(s: str, width: int = 96) -> str:
    """Return s truncated with an ellipsis if it exceeds width."""
    return s if len(s) <= width else (s[: max(0, width - 1)] + "…")


def format_run_summary(
    *,
    config: NgramConfig,
    tables: Sequence[Mapping[str, int]],
    chars_seen: int,
    elapsed_s: float,
) -> str:
    """
    Build a human-readable summary of a finished run.
    """
    lines = [
        "N-gram Count Summary",
        f"Input source:               {_abbrev(config.source_label)}",
        f"Encoding:                   {config.encoding}",
        f"Max window length:          {config.n}",
        f"Whitespace windows:         "
        f"{'included' if config.include_whitespace else 'excluded'}",
        f"Output format:              {config.output_format}",
        f"Characters read:            {chars_seen:,}",
    ]
    for k, table in enumerate(tables, start=1):
        lines.append(
            f"Length {k:<3} distinct/total:  "
            f"{len(table):,} / {total_count(table):,}"
        )
    lines.append(f"Elapsed:                    {elapsed_s:.3f}s")
    return "\n".join(lines) + "\n"


def log_run_summary(**kwargs) -> None:
    """Log the run summary at INFO level."""
    summary = format_run_summary(**kwargs)
    for line in summary.rstrip("\n").splitlines():
        logger.info(line)
