"""
Main CLI application.

Entry point for zengin-lint command.
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

import zengin_lint
from zengin_lint.cli.context import CliContext, ExitCode, get_exit_code, resolve_max_bytes
from zengin_lint.cli.output import OutputFormat, get_output_adapter
from zengin_lint.logging_config import setup_logging

# Create main app
app = typer.Typer(
    name="zengin-lint",
    help="Zengin transfer file validator",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"zengin-lint {zengin_lint.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Zengin transfer file validator."""
    pass


# =============================================================================
# Validate Command
# =============================================================================


@app.command()
def validate(
    file: Annotated[Path, typer.Argument(help="Zengin CSV file to validate")],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Profile YAML file"),
    ] = None,
    fail_on: Annotated[
        str,
        typer.Option("--fail-on", help="Severity level that triggers failure: error, warning"),
    ] = "error",
    output: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write output to file"),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress non-error output"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log engine progress to stderr"),
    ] = False,
    max_bytes: Annotated[
        int | None,
        typer.Option(
            "--max-bytes",
            help="Maximum input size in bytes (0 = unlimited). "
            "Defaults to ZENGIN_LINT_MAX_BYTES or 16MiB.",
        ),
    ] = None,
) -> None:
    """Validate a Zengin transfer file."""
    from zengin_lint.core.files import validate_file
    from zengin_lint.core.rules import ConfigError, load_profile

    try:
        max_bytes_value = resolve_max_bytes(max_bytes)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(ExitCode.CONFIG) from None

    ctx = CliContext(
        format=format,
        output_file=output,
        color=color,
        quiet=quiet,
        verbose=verbose,
        config_file=config,
        fail_on=fail_on,
        max_bytes=max_bytes_value,
    )

    if ctx.verbose:
        setup_logging(logging.DEBUG)

    # Get output adapter before doing any work
    try:
        output_format = OutputFormat(ctx.format)
    except ValueError:
        typer.echo(f"Unknown format: {ctx.format}", err=True)
        typer.echo("Available formats: terminal, json", err=True)
        raise typer.Exit(ExitCode.USAGE) from None

    if ctx.fail_on.lower() not in ("error", "warning"):
        typer.echo(f"Unknown severity for --fail-on: {ctx.fail_on}", err=True)
        raise typer.Exit(ExitCode.USAGE)

    profile = None
    if ctx.config_file is not None:
        try:
            profile = load_profile(ctx.config_file)
        except ConfigError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(ExitCode.CONFIG) from None

    report = validate_file(file, profile, max_bytes=ctx.max_bytes)

    adapter = get_output_adapter(output_format, color=ctx.color)
    rendered = adapter.render_report(report, file=str(file))

    # Write to file or stdout
    if ctx.output_file:
        ctx.output_file.write_text(rendered, encoding="utf-8")
        if not ctx.quiet:
            typer.echo(f"Output written to {ctx.output_file}")
    elif not (ctx.quiet and report.valid):
        typer.echo(rendered)

    has_io_error = any(d.code.startswith("ZGN-IO-") for d in report.diagnostics)
    has_error = report.error_count > 0
    has_warning = report.warning_count > 0

    exit_code = get_exit_code(has_io_error, has_error, has_warning, ctx.fail_on)
    raise typer.Exit(exit_code)


# =============================================================================
# Utility Commands
# =============================================================================


@app.command("rules")
def list_rules() -> None:
    """List diagnostic codes."""
    from zengin_lint.core.parser import DIAGNOSTIC_CODES

    typer.echo("Diagnostic codes:\n")
    for code, description in DIAGNOSTIC_CODES.items():
        typer.secho(f"  {code}", bold=True, nl=False)
        typer.echo(f"  {description}")


@app.command()
def explain(
    code: Annotated[str, typer.Argument(help="Diagnostic code to explain, e.g., ZGN-DAT-006")],
) -> None:
    """Explain a diagnostic code."""
    from zengin_lint.core.parser import get_diagnostic_description

    description = get_diagnostic_description(code.upper())
    if description is None:
        typer.echo(f"Diagnostic code not found: {code}", err=True)
        raise typer.Exit(ExitCode.USAGE)

    typer.secho(f"\n{code.upper()}", bold=True)
    typer.echo(f"  {description}")


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    run()
