# tests/io/test_decode.py
from __future__ import annotations

import gzip
import io

import pytest

from charngram.errors import DecodingError
from charngram.io.decode import iter_chars


class ChunkedStream:
    """Binary stream that returns at most `step` bytes per read."""

    def __init__(self, data: bytes, step: int):
        self._buf = io.BytesIO(data)
        self.step = step
        self.reads = 0

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        return self._buf.read(min(size, self.step) if size > 0 else self.step)


def test_decodes_ascii():
    assert list(iter_chars(io.BytesIO(b"abc"))) == ["a", "b", "c"]


def test_empty_input_yields_nothing():
    assert list(iter_chars(io.BytesIO(b""))) == []


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 5, 1024])
def test_multibyte_characters_never_split(chunk_size):
    text = "héllo wörld 😀 日本"
    chars = list(iter_chars(io.BytesIO(text.encode("utf-8")), chunk_size=chunk_size))
    assert chars == list(text)
    assert all(len(c) == 1 for c in chars)


def test_is_lazy():
    stream = ChunkedStream(b"abcdef", step=2)
    it = iter_chars(stream, chunk_size=2)
    assert next(it) == "a"
    assert stream.reads == 1


def test_invalid_byte_raises_with_offset():
    data = b"ab\xffcd"
    with pytest.raises(DecodingError) as ei:
        list(iter_chars(io.BytesIO(data)))
    assert ei.value.offset == 2
    assert ei.value.encoding == "utf-8"
    assert isinstance(ei.value.__cause__, UnicodeDecodeError)


def test_offset_is_absolute_across_chunks():
    # 'é' is two bytes; the bad byte sits at absolute offset 7
    data = "abcdeé".encode("utf-8") + b"\xff"
    with pytest.raises(DecodingError) as ei:
        list(iter_chars(io.BytesIO(data), chunk_size=4))
    assert ei.value.offset == 7


def test_truncated_sequence_at_end_raises():
    data = "ab".encode("utf-8") + "é".encode("utf-8")[:1]
    with pytest.raises(DecodingError) as ei:
        list(iter_chars(io.BytesIO(data)))
    assert ei.value.offset == 2


def test_characters_before_error_are_yielded_lazily():
    it = iter_chars(io.BytesIO(b"ok\xfe"), chunk_size=2)
    assert next(it) == "o"
    assert next(it) == "k"
    with pytest.raises(DecodingError):
        next(it)


def test_alternate_encoding():
    data = "ça".encode("latin-1")
    assert list(iter_chars(io.BytesIO(data), "latin-1")) == ["ç", "a"]


def test_on_chunk_reports_bytes_read():
    seen = []
    list(iter_chars(io.BytesIO(b"abcdefg"), chunk_size=3, on_chunk=seen.append))
    assert seen == [3, 3, 1]


def test_corrupt_gzip_raises_decoding_error(tmp_path):
    p = tmp_path / "bad.gz"
    p.write_bytes(b"not gzip at all")
    with gzip.open(p, "rb") as fh:
        with pytest.raises(DecodingError) as ei:
            list(iter_chars(fh))
    assert ei.value.encoding == "gzip"


def test_corrupt_gzip_body_raises_decoding_error(tmp_path):
    text = "".join(f"line {i}: the quick brown fox\n" for i in range(500))
    good = gzip.compress(text.encode("utf-8"))
    # Keep the 10-byte header intact, flip bits in the deflate stream.
    # latin-1 accepts any byte, so only the decompressor can fail.
    bad = good[:10] + bytes(b ^ 0xFF for b in good[10:40]) + good[40:]
    p = tmp_path / "body.gz"
    p.write_bytes(bad)
    with gzip.open(p, "rb") as fh:
        with pytest.raises(DecodingError) as ei:
            list(iter_chars(fh, "latin-1"))
    assert ei.value.encoding == "gzip"
