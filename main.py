from pathlib import Path

import typer

from src.datahub import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_ROOT, SummaryError
from src.pipelines import RunConfig, run_summary

app = typer.Typer(add_completion=False)


@app.command()
def summarize(
    input_path: Path = typer.Option(
        DEFAULT_INPUT_PATH,
        "--input",
        help="CSV file to read (first row must be a header).",
    ),
    column: str = typer.Option(
        ...,
        "--column",
        help="Exact header name of the numeric column to summarize.",
    ),
    output_root: Path = typer.Option(
        DEFAULT_OUTPUT_ROOT,
        "--output-root",
        help="Directory where the summary chart is written.",
    ),
) -> None:
    """
    Compute the mean and sample variance of one CSV column and save them as an SVG bar chart.
    """
    config = RunConfig.from_options(column=column, input_path=input_path, output_root=output_root)
    try:
        run_summary(config)
    except SummaryError as exc:
        typer.secho(f"[error] {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
