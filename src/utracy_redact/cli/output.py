"""Terminal output for redaction runs.

Plain-text summaries go to stdout so they can be piped; errors are
rendered with Rich on stderr.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from utracy_redact.models.report import RedactionReport

err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def render_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def render_summary(report: RedactionReport) -> None:
    """Print the human-readable result of a run.

    Dry runs list the function of every srcloc that would be redacted;
    real runs report the count and the final output path.
    """
    count = report.redacted_count
    if report.dry_run:
        if count == 0:
            typer.echo("Dry run: no source locations would be redacted.")
        else:
            typer.echo(f"Dry run: would redact {count} source locations:")
            for function in report.redacted_functions:
                typer.echo(f"  {function}")
        return

    if count == 0:
        typer.echo("No source locations were redacted.")
    else:
        typer.echo(f"Redacted {count} source locations.")
    typer.echo(f"Output: {report.output_path}")


def output_json(report: RedactionReport) -> None:
    typer.echo(report.model_dump_json(indent=2))
