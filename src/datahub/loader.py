"""Read a CSV file and pull one column out as a float64 array."""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

from .errors import SummaryError

PathLike = Union[str, Path]


def load_table(file_path: PathLike) -> pd.DataFrame:
    """Materialize the whole CSV file, using the header row for column names."""
    path = Path(file_path)
    if not path.exists():
        raise SummaryError("InputNotFound", f"Could not read CSV file '{path}': file does not exist")
    if not path.is_file():
        raise SummaryError("InputNotFound", f"Could not read CSV file '{path}': not a regular file")

    try:
        return pd.read_csv(path, header=0, encoding="utf-8")
    except PermissionError as exc:
        raise SummaryError("InputNotFound", f"Could not read CSV file '{path}': {exc.strerror}") from exc
    except pd.errors.EmptyDataError as exc:
        raise SummaryError("ParseError", f"Failed to parse '{path}': file is empty") from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise SummaryError("ParseError", f"Failed to parse '{path}': {exc}") from exc


def select_numeric_column(frame: pd.DataFrame, column_name: str) -> np.ndarray:
    """Return ``column_name`` cast to float64, rejecting any cell that is not a number."""
    if column_name not in frame.columns:
        available = ", ".join(str(name) for name in frame.columns)
        raise SummaryError("ColumnNotFound", f"Column '{column_name}' not found (available: {available})")

    series = frame[column_name]
    try:
        numeric = pd.to_numeric(series, errors="raise")
    except (ValueError, TypeError) as exc:
        raise SummaryError("CastError", f"Failed to cast column '{column_name}' to Float64: {exc}") from exc

    missing = numeric.isna()
    if missing.any():
        first_row = int(np.flatnonzero(missing.to_numpy())[0])
        raise SummaryError(
            "CastError",
            f"Failed to cast column '{column_name}' to Float64: "
            f"{int(missing.sum())} empty cell(s), first at data row {first_row + 1}",
        )

    return numeric.to_numpy(dtype=np.float64)


__all__ = ["load_table", "select_numeric_column"]
