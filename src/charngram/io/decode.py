# charngram/io/decode.py
from __future__ import annotations

import codecs
import gzip
import logging
import zlib
from typing import BinaryIO, Callable, Iterator, Optional

from charngram.config import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING
from charngram.errors import DecodingError

logger = logging.getLogger(__name__)


def iter_chars(
    stream: BinaryIO,
    encoding: str = DEFAULT_ENCODING,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_chunk: Optional[Callable[[int], None]] = None,
) -> Iterator[str]:
    """
    Lazily decode a binary stream into single characters (code points).

    Bytes are fed in chunk_size blocks to a strict incremental decoder, which
    holds back an incomplete multi-byte sequence until the next block arrives,
    so a character is never split across two yielded values.

    Args:
        stream: Binary file-like object (read(size) -> bytes)
        encoding: Codec name understood by the codecs module
        chunk_size: Number of bytes requested per read
        on_chunk: Optional callback receiving the byte length of each block read

    Yields:
        One-character strings, in input order

    Raises:
        DecodingError: on any byte sequence invalid under encoding, including a
            truncated sequence at end of input. The absolute byte offset of the
            offending bytes is attached.
    """
    decoder = codecs.getincrementaldecoder(encoding)(errors="strict")
    consumed = 0  # bytes handed to the decoder before the current block

    while True:
        try:
            block = stream.read(chunk_size)
        except (gzip.BadGzipFile, EOFError, zlib.error) as exc:
            # Corrupt or truncated compressed input
            raise DecodingError(consumed, "gzip", reason=str(exc) or None) from exc

        final = not block
        pending, _ = decoder.getstate()
        try:
            text = decoder.decode(block, final=final)
        except UnicodeDecodeError as exc:
            # exc.start indexes into (pending + block)
            offset = consumed - len(pending) + exc.start
            logger.debug("Decode failure at byte %d: %s", offset, exc.reason)
            raise DecodingError(offset, encoding, reason=exc.reason) from exc

        if block:
            consumed += len(block)
            if on_chunk is not None:
                on_chunk(len(block))

        yield from text

        if final:
            logger.debug("Decoded %d bytes of %s input", consumed, encoding)
            return
