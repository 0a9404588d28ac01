"""Chart rendering for column summaries."""

from .save_config import ChartDestination
from .summary_chart import build_summary_figure, create_charts, summary_axis_range, write_figure_svg

__all__ = [
    "ChartDestination",
    "build_summary_figure",
    "create_charts",
    "summary_axis_range",
    "write_figure_svg",
]
