"""Mean and sample variance of one CSV column."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import numpy as np

from src.datahub.errors import SummaryError
from src.datahub.loader import load_table, select_numeric_column
from .records import DataSummary

MIN_OBSERVATIONS = 2


def compute_summary(values: Union[np.ndarray, Sequence[float]]) -> DataSummary:
    """Compute the arithmetic mean and Bessel-corrected variance of ``values``.

    Args:
        values: One-dimensional sequence of observations.

    Returns:
        DataSummary with ``mean = sum(x) / n`` and ``variance = sum((x - mean)^2) / (n - 1)``.

    Raises:
        SummaryError: ``InsufficientData`` when fewer than two observations are given.
    """

    arr = np.asarray(values, dtype=np.float64).reshape(-1)
    count = int(arr.shape[0])
    if count < MIN_OBSERVATIONS:
        raise SummaryError(
            "InsufficientData",
            f"Sample variance needs at least {MIN_OBSERVATIONS} observations, got {count}",
        )

    mean = float(arr.sum() / count)
    deviations = arr - mean
    variance = float(np.dot(deviations, deviations) / (count - 1))
    return DataSummary(mean=mean, variance=variance, count=count)


def process_data(file_path: Union[str, Path], column_name: str) -> DataSummary:
    """Load ``file_path``, summarize ``column_name`` and print both statistics."""
    frame = load_table(file_path)
    values = select_numeric_column(frame, column_name)
    summary = compute_summary(values)

    print(f"Mean of '{column_name}': {summary.mean}")
    print(f"Variance of '{column_name}': {summary.variance}")
    return summary


__all__ = ["MIN_OBSERVATIONS", "compute_summary", "process_data"]
