"""Input handling: opening sources and decoding bytes to characters."""

from charngram.io.decode import iter_chars
from charngram.io.source import open_input

__all__ = ["iter_chars", "open_input"]
