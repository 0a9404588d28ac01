from .config import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_ROOT
from .errors import ERROR_KINDS, ErrorKind, SummaryError
from .loader import load_table, select_numeric_column

__all__ = [
    "DEFAULT_INPUT_PATH",
    "DEFAULT_OUTPUT_ROOT",
    "ERROR_KINDS",
    "ErrorKind",
    "SummaryError",
    "load_table",
    "select_numeric_column",
]
