"""utracy-redact CLI entry point."""

import typer

from utracy_redact.cli.redact_cmd import redact

app = typer.Typer(
    name="utracy-redact",
    help="Redact secret source locations from .utracy profiler traces",
    add_completion=False,
)

app.command()(redact)


if __name__ == "__main__":
    app()
