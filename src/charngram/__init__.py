"""
Character n-gram frequency counting.

Reads a text stream once, counts every n-gram of length 1..N, and reports
the length-N n-grams by frequency (counts, fractions, percentages) or all
tables as JSON.

Main entry points:
    count_ngrams() - Frequency tables for an iterable of characters
    NgramAccumulator - Incremental, one-character-at-a-time counting
    charngram.cli.main() - Command-line interface
"""

__version__ = "0.1.0"

from charngram.accumulate import NgramAccumulator, count_ngrams
from charngram.config import NgramConfig
from charngram.errors import (
    DecodingError,
    InputOpenError,
    NgramError,
    OutputWriteError,
)

__all__ = [
    "__version__",
    "NgramAccumulator",
    "count_ngrams",
    "NgramConfig",
    "NgramError",
    "InputOpenError",
    "DecodingError",
    "OutputWriteError",
]
