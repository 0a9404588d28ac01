"""Static defaults for input discovery and chart output."""

from __future__ import annotations

from pathlib import Path

# Default locations used by the Typer CLI; callers may override these.
DEFAULT_INPUT_PATH = Path("data/large_dataset.csv")
DEFAULT_OUTPUT_ROOT = Path("output")

# ---------------------------------------------------------------------------
# Chart layout.

CHART_WIDTH = 800
CHART_HEIGHT = 600
CHART_HEADROOM = 1.2
CHART_SLUG_SUFFIX = "_summary_chart"


__all__ = [
    "DEFAULT_INPUT_PATH",
    "DEFAULT_OUTPUT_ROOT",
    "CHART_WIDTH",
    "CHART_HEIGHT",
    "CHART_HEADROOM",
    "CHART_SLUG_SUFFIX",
]
