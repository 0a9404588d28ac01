"""Where a rendered chart lands on disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from src.datahub.config import CHART_SLUG_SUFFIX
from src.datahub.errors import SummaryError


@dataclass(frozen=True)
class ChartDestination:
    """Resolved destination for saving a single chart."""

    directory: Path
    slug: str

    @classmethod
    def for_column(cls, output_root: Path, column_name: str) -> "ChartDestination":
        return cls(directory=Path(output_root), slug=f"{column_name}{CHART_SLUG_SUFFIX}")

    def ensure_dir(self) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SummaryError(
                "OutputWriteError", f"Could not create output directory '{self.directory}': {exc}"
            ) from exc

    @property
    def svg_path(self) -> Path:
        return self.directory / f"{self.slug}.svg"


__all__ = ["ChartDestination"]
