# tests/test_config.py
import argparse
import logging
from pathlib import Path

import pytest

from charngram.config import NgramConfig


def _ns(**overrides):
    base = dict(
        n=2,
        as_fraction=False,
        as_percent=False,
        include_whitespace=False,
        json=False,
        filename=None,
        encoding="utf-8",
        progress=False,
        verbose=False,
        log_file=None,
    )
    base.update(overrides)
    return argparse.Namespace(**base)


def test_defaults():
    cfg = NgramConfig(n=3)
    assert cfg.output_format == "counts"
    assert cfg.include_whitespace is False
    assert cfg.reads_stdin
    assert cfg.source_label == "<stdin>"


def test_is_frozen():
    cfg = NgramConfig(n=1)
    with pytest.raises(Exception):
        cfg.n = 2  # type: ignore[misc]


@pytest.mark.parametrize("n", [0, -3, True, "2"])
def test_rejects_bad_n(n):
    with pytest.raises(ValueError):
        NgramConfig(n=n)


@pytest.mark.parametrize("encoding", ["base64", "hex", "zlib", "rot13"])
def test_rejects_non_text_encodings(encoding):
    with pytest.raises(ValueError, match="does not decode bytes to text"):
        NgramConfig(n=1, encoding=encoding)


@pytest.mark.parametrize("encoding", ["utf-8", "latin-1", "utf-16", "utf-8-sig", "cp1252"])
def test_accepts_text_encodings(encoding):
    assert NgramConfig(n=1, encoding=encoding).encoding == encoding


def test_rejects_unknown_format_and_encoding():
    with pytest.raises(ValueError, match="output_format"):
        NgramConfig(n=1, output_format="xml")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="encoding"):
        NgramConfig(n=1, encoding="no-such-codec")


@pytest.mark.parametrize(
    "flags, expected",
    [
        ({}, "counts"),
        ({"as_fraction": True}, "fraction"),
        ({"as_percent": True}, "percent"),
        ({"json": True}, "json"),
        ({"json": True, "as_percent": True}, "json"),
    ],
)
def test_from_args_output_format(flags, expected):
    assert NgramConfig.from_args(_ns(**flags)).output_format == expected


def test_from_args_dash_means_stdin():
    assert NgramConfig.from_args(_ns(filename=Path("-"))).filename is None


def test_from_args_file_and_logging():
    cfg = NgramConfig.from_args(
        _ns(filename=Path("x.txt"), verbose=True, include_whitespace=True)
    )
    assert cfg.filename == Path("x.txt")
    assert cfg.source_label == "x.txt"
    assert cfg.include_whitespace is True
    assert cfg.log_level == logging.DEBUG
