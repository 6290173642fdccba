"""
Main CLI entry point using Typer.

This module defines the command-line interface for picoschema using Typer.
It provides two commands: convert and check.
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from picoschema.utils import setup_logging

from .commands import check_command, convert_command


app = typer.Typer(
    name="picoschema",
    help="picoschema - compact schema shorthand to JSON Schema",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("convert")
def convert(
    source: Annotated[
        Path,
        typer.Argument(help="Path to a YAML or JSON picoschema document", exists=True, file_okay=True, dir_okay=False)
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Path to save the JSON Schema")
    ] = None,
    canonical: Annotated[
        bool,
        typer.Option("--canonical", help="Sort required lists for stable comparison")
    ] = False,
    indent: Annotated[
        int,
        typer.Option("--indent", help="JSON indentation", min=0)
    ] = 2,
    check: Annotated[
        bool,
        typer.Option("--check", help="Validate the result against the JSON Schema meta-schema")
    ] = False,
) -> None:
    """
    Translate a picoschema document into JSON Schema.

    Example:
        picoschema convert person.yaml --output person.schema.json
    """
    convert_command(
        source=source,
        output_path=output,
        canonical=canonical,
        indent=indent,
        check=check
    )


@app.command("check")
def check(
    source: Annotated[
        Path,
        typer.Argument(help="Path to a YAML or JSON picoschema document", exists=True, file_okay=True, dir_okay=False)
    ],
    show_schema: Annotated[
        bool,
        typer.Option("--show-schema", help="Display the generated schema")
    ] = False,
) -> None:
    """
    Translate a document and validate the result against the meta-schema.

    Example:
        picoschema check person.yaml --show-schema
    """
    check_command(source=source, show_schema=show_schema)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    log_level: Annotated[
        str,
        typer.Option("--log-level", envvar="PICOSCHEMA_LOG_LEVEL", help="Logging level")
    ] = "WARNING",
) -> None:
    """
    picoschema - compact schema shorthand to JSON Schema.
    """
    if version:
        from picoschema import __version__
        typer.echo(f"picoschema version {__version__}")
        raise typer.Exit()

    setup_logging(log_level)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()
