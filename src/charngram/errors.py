# charngram/errors.py
"""Exception types raised by the n-gram pipeline."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

__all__ = [
    "NgramError",
    "InputOpenError",
    "DecodingError",
    "OutputWriteError",
]


class NgramError(Exception):
    """Base class for fatal pipeline errors; carries a process exit code."""

    exit_code: int = 1


class InputOpenError(NgramError):
    """The named input source could not be opened."""

    exit_code = 3

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot open {str(self.path)!r}: {reason}")


class DecodingError(NgramError):
    """A byte sequence in the input is not valid under the expected encoding."""

    exit_code = 1

    def __init__(
        self,
        offset: int,
        encoding: str,
        reason: Optional[str] = None,
    ) -> None:
        self.offset = offset
        self.encoding = encoding
        self.reason = reason
        msg = f"invalid {encoding} data at byte offset {offset}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class OutputWriteError(NgramError):
    """Writing results failed for a reason other than a closed pipe."""

    exit_code = 4
