"""
Main CLI application.

Entry point for simplecsv command.
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, Annotated, Any

import typer
from click.core import ParameterSource

import simplecsv
from simplecsv.cli.context import ExitCode, exit_code_for
from simplecsv.cli.output import OutputAdapter, OutputFormat, get_output_adapter
from simplecsv.core.parser.errors import ConfigurationError, CsvError, Location, ParserError

if TYPE_CHECKING:
    from simplecsv.core.parser.models import Dialect

# Spellings accepted for characters that are awkward to type on a shell
CHAR_ALIASES = {
    "\\t": "\t",
    "tab": "\t",
    "space": " ",
    "\\\\": "\\",
}

# Create main app
app = typer.Typer(
    name="simplecsv",
    help="Configurable CSV tokenizer",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"simplecsv {simplecsv.__version__}")
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
    """Configurable CSV tokenizer."""
    pass


def _char_option(value: str | None) -> str | None:
    if value is None:
        return None
    return CHAR_ALIASES.get(value, value)


def _build_dialect(
    name: str,
    dialect_file: Path | None,
    overrides: dict[str, Any],
    no_quote: bool,
    no_escape: bool,
) -> Dialect:
    """Resolve the named preset and apply command line overrides."""
    from simplecsv.core.dialects import get_dialect, get_registry

    if dialect_file is not None:
        get_registry().load_file(dialect_file)

    dialect = get_dialect(name)
    changes = {k: v for k, v in overrides.items() if v is not None}
    if no_quote:
        changes["quotechar"] = None
    if no_escape:
        changes["escapechar"] = None
    return dialect.replace(**changes) if changes else dialect


def _fail(adapter: OutputAdapter, report: ParserError, code: ExitCode) -> typer.Exit:
    typer.echo(adapter.render_error(report), err=True)
    return typer.Exit(code)


# =============================================================================
# Parse Command
# =============================================================================


@app.command()
def parse(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="CSV file to parse", exists=True, dir_okay=False)],
    dialect_name: Annotated[
        str,
        typer.Option("--dialect", "-d", help="Dialect preset (see 'simplecsv dialects')"),
    ] = "default",
    dialect_file: Annotated[
        Path | None,
        typer.Option("--dialect-file", help="YAML file with extra dialect presets"),
    ] = None,
    separator: Annotated[
        str | None,
        typer.Option("--separator", "-s", help="Field separator (use '\\t' or 'tab' for TAB)"),
    ] = None,
    quote: Annotated[
        str | None,
        typer.Option("--quote", help="Quote character"),
    ] = None,
    no_quote: Annotated[
        bool,
        typer.Option("--no-quote", help="Disable quoting"),
    ] = False,
    escape: Annotated[
        str | None,
        typer.Option("--escape", help="Escape character"),
    ] = None,
    no_escape: Annotated[
        bool,
        typer.Option("--no-escape", help="Disable escaping"),
    ] = False,
    strict_quotes: Annotated[
        bool | None,
        typer.Option("--strict-quotes/--no-strict-quotes", help="Keep only text between quotes"),
    ] = None,
    trim: Annotated[
        bool | None,
        typer.Option("--trim/--no-trim", help="Trim whitespace around fields"),
    ] = None,
    allow_unbalanced: Annotated[
        bool | None,
        typer.Option(
            "--allow-unbalanced/--no-allow-unbalanced",
            help="Accept records that end inside quotes",
        ),
    ] = None,
    retain_outer_quotes: Annotated[
        bool | None,
        typer.Option("--retain-outer-quotes/--strip-outer-quotes", help="Keep field quotes"),
    ] = None,
    retain_escapes: Annotated[
        bool | None,
        typer.Option("--retain-escapes/--drop-escapes", help="Keep escape characters"),
    ] = None,
    always_quote: Annotated[
        bool | None,
        typer.Option("--always-quote/--no-always-quote", help="Wrap every field in quotes"),
    ] = None,
    doubled_quotes: Annotated[
        bool | None,
        typer.Option(
            "--doubled-quotes/--no-doubled-quotes",
            help='Read "" inside quotes as one literal quote',
        ),
    ] = None,
    record: Annotated[
        int | None,
        typer.Option("--record", "-n", help="Print only this record (1-based)"),
    ] = None,
    skip: Annotated[
        int,
        typer.Option("--skip", help="Skip this many leading records", min=0),
    ] = 0,
    limit: Annotated[
        int | None,
        typer.Option("--limit", help="Print at most this many records", min=1),
    ] = None,
    encoding: Annotated[
        str | None,
        typer.Option("--encoding", "-e", help="File encoding (detected if omitted)"),
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: terminal, json"),
    ] = "terminal",
    output: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write output to file"),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug messages to stderr"),
    ] = False,
) -> None:
    """Parse a CSV file and print its records."""
    from simplecsv.core.parser import parse_file

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        output_format = OutputFormat(format)
    except ValueError:
        typer.echo(f"Unknown format: {format}", err=True)
        typer.echo("Available formats: terminal, json", err=True)
        raise typer.Exit(ExitCode.USAGE) from None

    adapter = get_output_adapter(output_format, color=color)

    if record is not None and record <= 0:
        typer.echo(f"The record number must be greater than zero: {record}", err=True)
        raise typer.Exit(ExitCode.USAGE)

    flags = {
        "strict_quotes": ("strict_quotes", strict_quotes),
        "trim_whitespace": ("trim", trim),
        "allow_unbalanced_quotes": ("allow_unbalanced", allow_unbalanced),
        "retain_outer_quotes": ("retain_outer_quotes", retain_outer_quotes),
        "retain_escape_chars": ("retain_escapes", retain_escapes),
        "always_quote_output": ("always_quote", always_quote),
        "allow_doubled_escaped_quotes": ("doubled_quotes", doubled_quotes),
    }
    overrides: dict[str, Any] = {
        "separator": _char_option(separator),
        "quotechar": _char_option(quote),
        "escapechar": _char_option(escape),
    }
    # only flags given on the command line override the preset
    for field, (param, value) in flags.items():
        if ctx.get_parameter_source(param) is ParameterSource.COMMANDLINE:
            overrides[field] = value

    try:
        dialect = _build_dialect(dialect_name, dialect_file, overrides, no_quote, no_escape)
    except ConfigurationError as e:
        raise _fail(adapter, e.to_report(), ExitCode.CONFIG) from None
    except OSError as e:
        typer.echo(f"Error reading dialect file: {e}", err=True)
        raise typer.Exit(ExitCode.CONFIG) from None

    if record is not None:
        skip += record - 1
        limit = 1

    records: list[list[str]] = []
    try:
        for fields in parse_file(file, dialect, encoding=encoding, skip_records=skip):
            records.append(fields)
            if limit is not None and len(records) >= limit:
                break
    except CsvError as e:
        raise _fail(adapter, e.to_report(file=str(file)), exit_code_for(e)) from None
    except (OSError, UnicodeError, LookupError) as e:
        report = ParserError.fatal(
            code="SCSV-IO-001",
            title="Input could not be read",
            message=str(e),
            location=Location(file=str(file)),
        )
        raise _fail(adapter, report, ExitCode.FATAL) from None

    if record is not None and not records:
        typer.echo(f"Record {record} not found in {file}", err=True)
        raise typer.Exit(ExitCode.ERROR)

    rendered = adapter.render_records(records, first_record_no=skip + 1)

    if output:
        output.write_text(rendered + "\n", encoding="utf-8")
    else:
        typer.echo(rendered)

    raise typer.Exit(ExitCode.SUCCESS)


# =============================================================================
# Utility Commands
# =============================================================================


@app.command("dialects")
def list_dialects(
    dialect_file: Annotated[
        Path | None,
        typer.Option("--dialect-file", help="YAML file with extra dialect presets"),
    ] = None,
) -> None:
    """List available dialect presets."""
    from simplecsv.core.dialects import get_registry

    registry = get_registry()
    if dialect_file is not None:
        try:
            registry.load_file(dialect_file)
        except ConfigurationError as e:
            typer.echo(str(e.to_report(file=str(dialect_file))), err=True)
            raise typer.Exit(ExitCode.CONFIG) from None

    typer.echo("Available dialects:\n")
    for name in registry.names():
        preset = registry.presets[name]
        d = preset.dialect
        typer.secho(f"  {name}", bold=True)
        if preset.label:
            typer.echo(f"    {preset.label}")
        typer.echo(
            f"    separator={d.separator!r} quote={d.quotechar!r} escape={d.escapechar!r}"
        )
        typer.echo()


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    run()
