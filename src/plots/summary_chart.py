"""Two-bar chart of a column's mean and sample variance."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from src.datahub.config import CHART_HEADROOM, CHART_HEIGHT, CHART_WIDTH, DEFAULT_OUTPUT_ROOT
from src.datahub.errors import SummaryError
from src.metrics.records import DataSummary
from .save_config import ChartDestination

STATISTIC_SLOTS = {"Mean": 1, "Variance": 2}
STATISTIC_COLORS = {"Mean": "red", "Variance": "blue"}
BAR_WIDTH = 0.5


def summary_axis_range(summary: DataSummary) -> Tuple[float, float]:
    """Return the y-axis range ``(low, high)`` for the summary bars.

    The top sits 20% above the taller bar. A non-positive top falls back to 1.0,
    and a negative mean pulls the bottom down so its bar stays on the canvas.
    """
    high = CHART_HEADROOM * max(summary.mean, summary.variance)
    if high <= 0:
        high = 1.0
    low = min(0.0, CHART_HEADROOM * summary.mean)
    return low, high


def build_summary_figure(summary: DataSummary, column_name: str) -> go.Figure:
    df = pd.DataFrame(
        {
            "statistic": list(STATISTIC_SLOTS),
            "slot": list(STATISTIC_SLOTS.values()),
            "value": [summary.mean, summary.variance],
        }
    )

    fig = px.bar(
        df,
        x="slot",
        y="value",
        color="statistic",
        color_discrete_map=STATISTIC_COLORS,
        title=f"Statistical Summary of '{column_name}'",
        labels={"slot": "Statistic", "value": "Value", "statistic": "Statistic"},
    )
    fig.update_traces(width=BAR_WIDTH, marker_line_width=0)
    fig.update_xaxes(
        range=[0, 3],
        tickmode="array",
        tickvals=list(STATISTIC_SLOTS.values()),
        ticktext=list(STATISTIC_SLOTS),
        showgrid=False,
    )
    fig.update_yaxes(range=list(summary_axis_range(summary)), showgrid=False)
    fig.update_layout(
        width=CHART_WIDTH,
        height=CHART_HEIGHT,
        paper_bgcolor="white",
        plot_bgcolor="white",
        title_font_size=40,
        legend=dict(title_text="", bordercolor="black", borderwidth=1),
        margin=dict(l=60, r=10, t=80, b=60),
    )
    return fig


def write_figure_svg(fig: go.Figure, destination: ChartDestination) -> Path:
    """Export ``fig`` as SVG through Kaleido, overwriting any previous chart."""
    destination.ensure_dir()
    target = destination.svg_path
    try:
        fig.write_image(str(target), format="svg", width=CHART_WIDTH, height=CHART_HEIGHT, engine="kaleido")
    except (OSError, ValueError, RuntimeError) as exc:
        raise SummaryError("OutputWriteError", f"Could not write chart '{target}': {exc}") from exc
    return target


def create_charts(
    summary: DataSummary,
    column_name: str,
    output_root: Path = DEFAULT_OUTPUT_ROOT,
) -> Path:
    """Render the summary chart to ``<output_root>/<column>_summary_chart.svg``."""
    fig = build_summary_figure(summary, column_name)
    target = write_figure_svg(fig, ChartDestination.for_column(output_root, column_name))
    print(f"Chart saved to {target}")
    return target


__all__ = [
    "BAR_WIDTH",
    "STATISTIC_COLORS",
    "STATISTIC_SLOTS",
    "build_summary_figure",
    "create_charts",
    "summary_axis_range",
    "write_figure_svg",
]
