# charngram/accumulate.py
"""Single-pass accumulation of character n-gram frequency tables."""
from __future__ import annotations

import logging
from collections import Counter, deque
from typing import Deque, Iterable, List

from charngram.utils.filters import make_window_predicate

logger = logging.getLogger(__name__)

__all__ = ["NgramAccumulator", "count_ngrams"]


class NgramAccumulator:
    """
    Count every character n-gram of length 1..n in one pass over the input.

    The accumulator keeps the last n characters (newest first) and, for each
    incoming character c, counts the windows of length 1, 2, ... ending at c.
    The scan over lengths stops at the first length that either lacks enough
    history or (with whitespace excluded) contains whitespace; every longer
    window would be blocked for the same reason.

    Example:
        >>> acc = NgramAccumulator(2).feed("aab")
        >>> acc.table(1)
        Counter({'a': 2, 'b': 1})
        >>> acc.table(2)
        Counter({'aa': 1, 'ab': 1})
    """

    def __init__(self, n: int, include_whitespace: bool = False) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"n must be a positive integer, got {n!r}")
        self.n = n
        self.include_whitespace = include_whitespace
        self._eligible = make_window_predicate(include_whitespace)
        # history[0] is the previous character, history[1] the one before, ...
        self._history: Deque[str] = deque(maxlen=n)
        self._tables: List[Counter[str]] = [Counter() for _ in range(n)]
        self._chars_seen = 0

    def process(self, c: str) -> None:
        """Count the windows ending at character c, then push c onto history."""
        history = self._history
        window = c
        for k in range(1, self.n + 1):
            if k > 1:
                if len(history) < k - 1:
                    break
                window = history[k - 2] + window
            if not self._eligible(window):
                break
            self._tables[k - 1][window] += 1

        # maxlen drops the oldest entry once more than n are held
        history.appendleft(c)
        self._chars_seen += 1

    def feed(self, chars: Iterable[str]) -> "NgramAccumulator":
        """Process every character of chars in order; returns self."""
        process = self.process
        for c in chars:
            process(c)
        logger.debug("Processed %d characters (n=%d)", self._chars_seen, self.n)
        return self

    @property
    def tables(self) -> List[Counter[str]]:
        """Frequency tables; tables[k - 1] holds the windows of length k."""
        return self._tables

    def table(self, k: int) -> Counter[str]:
        if not 1 <= k <= self.n:
            raise ValueError(f"window length must be in 1..{self.n}, got {k}")
        return self._tables[k - 1]

    @property
    def chars_seen(self) -> int:
        return self._chars_seen

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={self.n}, "
            f"include_whitespace={self.include_whitespace}, "
            f"chars_seen={self._chars_seen})"
        )


def count_ngrams(
    chars: Iterable[str],
    n: int,
    include_whitespace: bool = False,
) -> List[Counter[str]]:
    """Return the n frequency tables for chars (index k-1 for length k)."""
    return NgramAccumulator(n, include_whitespace).feed(chars).tables
