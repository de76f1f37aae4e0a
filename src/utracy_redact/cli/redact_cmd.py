"""utracy-redact -- blank secret source locations in a .utracy trace.

Resolves the output destination, runs the single-pass pipeline
(directly, through a temp file for --in-place, or read-only for
--dry-run), and reports what was redacted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from utracy_redact import __version__
from utracy_redact.cli.output import (
    configure_logging,
    output_json,
    render_error,
    render_summary,
)
from utracy_redact.errors import InputNotFoundError, RedactError
from utracy_redact.models.config import RedactConfig, load_config
from utracy_redact.models.report import RedactionReport
from utracy_redact.pipeline import redact_file, redact_stream
from utracy_redact.storage.output import AtomicReplace, open_input, resolve_output_path


def execute_redaction(
    input_path: Path,
    output: Path | None,
    *,
    in_place: bool,
    dry_run: bool,
    file_markers: list[str],
    fn_markers: list[str],
    config: RedactConfig,
) -> RedactionReport:
    """Run one redaction and describe the result.

    Raises:
        RedactError: On any validation, path or I/O failure.
    """
    if not input_path.exists():
        raise InputNotFoundError(input_path)

    options = dict(
        file_markers=file_markers,
        fn_markers=fn_markers,
        buffer_size=config.buffer_size,
    )

    if dry_run:
        redacted = redact_file(input_path, None, dry_run=True, **options)
        return RedactionReport(
            input_path=str(input_path),
            dry_run=True,
            in_place=in_place,
            redacted_functions=redacted,
        )

    if in_place:
        with AtomicReplace(input_path, config.buffer_size) as pending:
            with open_input(input_path, config.buffer_size) as reader:
                redacted = redact_stream(reader, pending.handle, dry_run=False, **options)
            pending.commit()
        output_path = input_path
    else:
        output_path = resolve_output_path(input_path, output, suffix=config.output_suffix)
        redacted = redact_file(input_path, output_path, dry_run=False, **options)

    return RedactionReport(
        input_path=str(input_path),
        output_path=str(output_path),
        in_place=in_place,
        redacted_functions=redacted,
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"utracy-redact {__version__}")
        raise typer.Exit()


def redact(
    input_path: Path = typer.Argument(..., help="Path to the input .utracy file"),
    output: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        metavar="PATH",
        help="Output path (default: <stem>.redacted.utracy in the same dir)",
    ),
    in_place: bool = typer.Option(
        False, "--in-place", help="Overwrite the input file in-place (excludes --output)"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print what would be redacted without writing any output"
    ),
    file_markers: Optional[list[str]] = typer.Option(
        None,
        "--file-marker",
        metavar="SUBSTR",
        help="Substring matched against the srcloc file path (case-insensitive, repeatable)",
    ),
    fn_markers: Optional[list[str]] = typer.Option(
        None,
        "--fn-marker",
        metavar="SUBSTR",
        help="Substring matched against the srcloc function name (case-insensitive, repeatable)",
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", metavar="PATH", help="Config file (default: nearest utracy-redact.yaml)"
    ),
    format_json: bool = typer.Option(False, "--json", help="Output a JSON report to stdout"),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Log each redacted srcloc"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Rewrite the srcloc table of a .utracy file, replacing name/function/file
    with <redacted> for every srcloc that matches a file or function marker.
    """
    configure_logging(verbose)

    if output is not None and in_place:
        render_error("--output and --in-place are mutually exclusive")
        raise typer.Exit(code=1)

    try:
        config = load_config(config_path)
        report = execute_redaction(
            input_path,
            output,
            in_place=in_place,
            dry_run=dry_run,
            # Command-line markers replace the configured lists.
            file_markers=list(file_markers) if file_markers else config.file_markers,
            fn_markers=list(fn_markers) if fn_markers else config.fn_markers,
            config=config,
        )
    except RedactError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1)

    if format_json:
        output_json(report)
    else:
        render_summary(report)
