"""Error kinds raised while summarizing a column."""

from __future__ import annotations

from typing import Literal, Tuple

ErrorKind = Literal[
    "InputNotFound",
    "ParseError",
    "ColumnNotFound",
    "CastError",
    "InsufficientData",
    "OutputWriteError",
]
ERROR_KINDS: Tuple[ErrorKind, ...] = (
    "InputNotFound",
    "ParseError",
    "ColumnNotFound",
    "CastError",
    "InsufficientData",
    "OutputWriteError",
)


class SummaryError(Exception):
    """Fatal failure of a summary run, tagged with one of ``ERROR_KINDS``."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        if kind not in ERROR_KINDS:
            raise ValueError(f"Unknown error kind '{kind}'")
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


__all__ = ["ERROR_KINDS", "ErrorKind", "SummaryError"]
