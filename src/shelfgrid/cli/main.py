"""Typer CLI for shelving design analysis."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from shelfgrid.application import AnalyzeDesignCommand
from shelfgrid.application.config import (
    ConfigError,
    config_to_params,
    dump_design,
    load_config,
)
from shelfgrid.cli.commands import validate_command
from shelfgrid.domain import DEFAULT_DESIGN, MAX_GRID_SIZE
from shelfgrid.infrastructure import (
    DesignSummaryFormatter,
    JsonExporter,
    PartsListFormatter,
    SheetLayoutFormatter,
)

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="shelfgrid",
    help="Compile modular shelving designs into cut parts and sheet layouts.",
)

app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON design file"),
    ],
    sheets: Annotated[
        bool,
        typer.Option("--sheets/--no-sheets", help="Include sheet cutting layouts"),
    ] = True,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log layout and packing decisions"),
    ] = False,
) -> None:
    """Analyze a design: dimensions, parts, estimate, warnings and sheets."""
    _configure_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format '{output_format}'. Use one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        params = config_to_params(load_config(config_file))
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    analysis = AnalyzeDesignCommand().execute(params, include_sheets=sheets)

    if output_format == "json":
        typer.echo(JsonExporter().export(analysis))
        return

    typer.echo(
        DesignSummaryFormatter().format(
            analysis.dimensions, analysis.estimate, analysis.warnings
        )
    )
    typer.echo()
    typer.echo(PartsListFormatter().format(analysis.parts))
    if analysis.hardware:
        typer.echo()
        typer.echo("DOOR HARDWARE")
        for location in analysis.hardware:
            typer.echo(
                f'  {location.part_id}: {location.hardware_type.value} at '
                f'x={location.x:.3f}", y={location.y:.3f}" '
                f'(dia {location.diameter:g}")'
            )
    if analysis.sheet_layouts is not None:
        typer.echo()
        typer.echo(SheetLayoutFormatter().format(analysis.sheet_layouts))


@app.command()
def init(
    output_file: Annotated[
        Path,
        typer.Argument(help="Where to write the design file"),
    ],
    rows: Annotated[
        int,
        typer.Option("--rows", "-r", min=1, max=MAX_GRID_SIZE, help="Grid rows"),
    ] = DEFAULT_DESIGN.rows,
    cols: Annotated[
        int,
        typer.Option("--cols", "-c", min=1, max=MAX_GRID_SIZE, help="Grid columns"),
    ] = DEFAULT_DESIGN.cols,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Write a default design file to start from."""
    if output_file.exists() and not force:
        typer.echo(
            f"Error: {output_file} already exists (use --force to overwrite)", err=True
        )
        raise typer.Exit(code=1)

    params = replace(DEFAULT_DESIGN, rows=rows, cols=cols)
    output_file.write_text(dump_design(params) + "\n", encoding="utf-8")
    typer.echo(f"Wrote {rows}x{cols} design to {output_file}")


if __name__ == "__main__":
    app()
