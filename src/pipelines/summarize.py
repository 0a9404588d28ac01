"""End-to-end run: CSV column → summary record → chart file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from src.datahub.config import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_ROOT
from src.metrics.summary import process_data
from src.plots.save_config import ChartDestination
from src.plots.summary_chart import create_charts


@dataclass(frozen=True)
class RunConfig:
    """Immutable view of the command-line options for one run."""

    input_path: Path
    column: str
    output_root: Path = DEFAULT_OUTPUT_ROOT

    @classmethod
    def from_options(
        cls,
        column: str,
        input_path: Optional[Union[str, Path]] = None,
        output_root: Optional[Union[str, Path]] = None,
    ) -> "RunConfig":
        """Translate CLI options into a normalized config."""
        return cls(
            input_path=Path(input_path) if input_path is not None else DEFAULT_INPUT_PATH,
            column=column,
            output_root=Path(output_root) if output_root is not None else DEFAULT_OUTPUT_ROOT,
        )

    @property
    def chart_destination(self) -> ChartDestination:
        return ChartDestination.for_column(self.output_root, self.column)


def run_summary(config: RunConfig) -> Path:
    """
    Summarize one column and chart it. Any failure raises ``SummaryError`` before later steps run.
    """
    config.chart_destination.ensure_dir()

    print(f"[summary] Reading column '{config.column}' from {config.input_path}")
    summary = process_data(config.input_path, config.column)
    chart_path = create_charts(summary, config.column, output_root=config.output_root)
    print(f"[summary] Analysis complete ({summary.count} observations).")
    return chart_path


__all__ = ["RunConfig", "run_summary"]
