# charngram/utils/filters.py
from __future__ import annotations
from typing import Callable

# Unicode White_Space property (PropList.txt). str.isspace() is not used
# because it also accepts U+001C..U+001F.
WHITESPACE: frozenset[str] = frozenset(
    [chr(cp) for cp in range(0x0009, 0x000D + 1)]
    + [" ", "\u0085", "\u00a0", "\u1680"]
    + [chr(cp) for cp in range(0x2000, 0x200A + 1)]
    + ["\u2028", "\u2029", "\u202f", "\u205f", "\u3000"]
)


def contains_whitespace(s: str) -> bool:
    return not WHITESPACE.isdisjoint(s)


def make_window_predicate(include_whitespace: bool) -> Callable[[str], bool]:
    """
    Return predicate(window) -> bool deciding whether a window is counted.

    - include_whitespace=True  -> every window is eligible
    - include_whitespace=False -> windows containing any White_Space
      character are rejected
    """
    if include_whitespace:
        return lambda window: True
    return lambda window: not contains_whitespace(window)
