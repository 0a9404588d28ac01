"""Shared data records for column statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DataSummary:
    """Mean and sample variance (divisor n - 1) of a single column."""

    mean: float
    variance: float
    count: int = 0
