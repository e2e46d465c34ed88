"""Typer CLI for booth packing lists."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from packlista.application import BoothInput, PacklistaOutput, get_factory
from packlista.application.config import (
    ConfigError,
    config_to_booth_input,
    config_to_storages,
    load_config,
    merge_config_with_cli,
)
from packlista.cli.commands import validate_command
from packlista.domain import StorageUnit

OUTPUT_FORMATS = ("text", "walls", "json", "all")

DEFAULT_WALL_SHAPE = "straight"
DEFAULT_WALL_HEIGHT = 2.5


app = typer.Typer(
    name="packlista",
    help="Compute packing lists for modular trade-show booth walls.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _render(output: PacklistaOutput, output_format: str) -> str:
    factory = get_factory()
    result = output.result
    assert result is not None

    if output_format == "json":
        return factory.get_json_exporter().export_string(result, output.warnings)
    if output_format == "walls":
        return factory.get_wall_formatter().format(result)

    report = factory.get_report_formatter().format(result)
    if output_format == "all":
        return report + "\n\n" + factory.get_wall_formatter().format(result)
    return report


@app.command()
def compute(
    config_file: Annotated[
        Path | None,
        typer.Argument(help="Path to JSON booth configuration file"),
    ] = None,
    wall_shape: Annotated[
        str | None,
        typer.Option("--shape", "-s", help="Wall shape: straight, l, u"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Floor width in meters (back wall length)"),
    ] = None,
    depth: Annotated[
        float | None,
        typer.Option("--depth", "-d", help="Floor depth in meters (side wall length)"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Wall height in meters"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, walls, json, all"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to this file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log algorithm details to stderr"),
    ] = False,
) -> None:
    """Compute the packing list for a booth.

    The booth is read from a configuration file, from options, or from
    both; options override configuration values.

    Examples:
        packlista compute --shape u --width 4 --depth 3 --height 3
        packlista compute booth.json
        packlista compute booth.json --height 3.5 --format all
        packlista compute booth.json --format json --output packlista.json
    """
    _configure_logging(verbose)

    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Error: Unknown format '{output_format}'", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    storages: list[StorageUnit] = []
    if config_file is not None:
        try:
            config = load_config(config_file)
            config = merge_config_with_cli(
                config,
                wall_shape=wall_shape,
                floor_width=width,
                floor_depth=depth,
                wall_height=height,
            )
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

        booth_input = config_to_booth_input(config)
        storages = config_to_storages(config)
    else:
        # CLI-only mode: require width and depth
        if width is None or depth is None:
            typer.echo(
                "Error: --width and --depth are required when no configuration file is given",
                err=True,
            )
            raise typer.Exit(code=1)

        booth_input = BoothInput(
            wall_shape=(wall_shape or DEFAULT_WALL_SHAPE).lower(),
            floor_width=width,
            floor_depth=depth,
            wall_height=height if height is not None else DEFAULT_WALL_HEIGHT,
        )

    command = get_factory().create_packlista_command()
    output = command.execute(booth_input, storages)

    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    for warning in output.warnings:
        typer.echo(f"Warning: {warning}", err=True)

    content = _render(output, output_format)
    if output_file is not None:
        output_file.write_text(content + "\n", encoding="utf-8")
        typer.echo(f"Packing list written to {output_file}")
    else:
        typer.echo(content)


if __name__ == "__main__":
    app()
