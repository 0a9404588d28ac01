"""Shared fixtures for the column summary tests."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Any

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import plotly.graph_objects as go

REFERENCE_VALUES = [10, 20, 15, 30, 25, 35, 45, 40, 50, 55]


@pytest.fixture
def fake_export(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    """Replace Plotly's Kaleido export with a stub that records calls and writes a tiny SVG."""
    calls: list[dict[str, Any]] = []

    def _write_image(fig: go.Figure, file: Any, *args: Any, **kwargs: Any) -> None:
        calls.append({"file": str(file), "title": fig.layout.title.text, **kwargs})
        Path(file).write_text('<svg xmlns="http://www.w3.org/2000/svg"></svg>', encoding="utf-8")

    monkeypatch.setattr(go.Figure, "write_image", _write_image)
    return calls


@pytest.fixture
def values_csv(tmp_path: Path) -> Path:
    """CSV with a numeric ``value`` column, a float ``price`` column and a text ``label`` column."""
    rows = ["id,value,label,price"]
    for idx, value in enumerate(REFERENCE_VALUES, start=1):
        rows.append(f"{idx},{value},item{idx},{value * 1.5}")
    path = tmp_path / "values.csv"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path
