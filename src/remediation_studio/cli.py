from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import typer

from .analysis import quality_issues, quality_score
from .config import Settings
from .errors import StudioError
from .export import ExportFormat, ExportKind
from .log import setup_logging
from .models import FileHandle
from .preview import build_preview, preview_frame
from .remediation import preview_lines
from .studio import Studio

app = typer.Typer(add_completion=False, help="Data Remediation Studio (simulated data-quality workflow)")

APP_SCRIPT = Path(__file__).resolve().parents[2] / "app" / "app.py"


@app.command()
def ui(
    port: int = typer.Option(8501, "--port", help="Port for the Streamlit server"),
    script: Path = typer.Option(APP_SCRIPT, "--script", help="Path to the Streamlit app script"),
):
    """
    Launch the Streamlit UI (`streamlit run app/app.py`).
    """
    if not script.exists():
        typer.echo(f"ERROR: Streamlit app not found: {script}", err=True)
        raise typer.Exit(code=2)
    cmd = [sys.executable, "-m", "streamlit", "run", str(script), "--server.port", str(port)]
    try:
        completed = subprocess.run(cmd, check=False)
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)
    raise typer.Exit(code=completed.returncode)


@app.command()
def demo(
    file: str = typer.Option("customers.csv", "--file", help="Name of the (pretend) uploaded file"),
    fmt: ExportFormat = typer.Option(ExportFormat.CSV, "--format", help="Export format", case_sensitive=False),
    fast: bool = typer.Option(True, "--fast/--no-fast", help="Skip the simulated delays (default: on)"),
):
    """
    Walk through upload, analysis, summary, remediation and export headless.

    Nothing is read from or written to disk; the file name only feeds the
    preview caption and the export filename.
    """
    try:
        settings = Settings.instant() if fast else Settings.from_env()
        setup_logging(settings.log_level)
        studio = Studio(settings=settings)

        typer.echo("== 1. Upload")
        studio.select_file(FileHandle(name=file))
        table = build_preview(studio.state.selected_file)
        if table is not None:
            typer.echo(table.caption)
            typer.echo(preview_frame(table).to_string(index=False))

        typer.echo("\n== 2. Analysis")
        progress: list[int] = []
        outcome = studio.run_analysis(on_progress=progress.append)
        if not outcome.ok or studio.state.analysis_result is None:
            typer.echo(f"ERROR: analysis did not complete: {outcome.error}")
            raise typer.Exit(code=1)
        result = studio.state.analysis_result
        typer.echo("Progress: " + " ".join(f"{p}%" for p in progress))
        typer.echo(f"Rows: {result.total_rows:,}  Columns: {result.total_columns}  Duplicates: {result.duplicate_rows}")
        typer.echo(f"Quality score: {quality_score(result)}%")
        for issue in quality_issues(result):
            typer.echo(f"- {issue.message} [{issue.badge}]")

        typer.echo("\n== 3. AI Quality Summary")
        studio.refresh_summary()
        typer.echo(studio.summary.summary)

        typer.echo("\n== 4. Remediation")
        applied = studio.apply_remediation()
        typer.echo("Applied: " + ", ".join(o.label for o in applied))
        for line in preview_lines(result):
            typer.echo(f"- {line}")

        typer.echo("\n== 5. Export")
        for kind in (ExportKind.DATA, ExportKind.REPORT):
            name = studio.export_file(kind, fmt)
            typer.echo(f"{kind.value}: {name}")
    except StudioError as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=1)
