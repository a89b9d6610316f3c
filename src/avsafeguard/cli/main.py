"""Typer CLI for home-theater design analysis."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError

from avsafeguard.application.config import (
    ConfigError,
    ProjectConfiguration,
    config_to_project,
    default_configuration,
    load_config,
    merge_config_with_cli,
)
from avsafeguard.cli.commands import display_load_error, validate_command
from avsafeguard.domain import ProjectValidationError
from avsafeguard.domain.services.analysis import ProjectAnalyzer
from avsafeguard.infrastructure import JsonExporter, ReportFormatter, SummaryFormatter

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("summary", "json", "report")


app = typer.Typer(
    name="avsafeguard",
    help="Analyze home-theater designs against CEDIA/CTA-CEB23 guidance.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


def _load_or_exit(config_file: Path) -> ProjectConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _emit(content: str, output_file: Path | None, label: str) -> None:
    if output_file is None:
        typer.echo(content)
        return
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(content + "\n", encoding="utf-8")
    typer.echo(f"{label} written to: {output_file}")


@app.command()
def analyze(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    length: Annotated[
        float | None,
        typer.Option("--length", help="Room length in feet"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", help="Room width in feet"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Room height in feet"),
    ] = None,
    screen_size: Annotated[
        float | None,
        typer.Option("--screen-size", help="Screen diagonal in inches"),
    ] = None,
    aspect_ratio: Annotated[
        str | None,
        typer.Option("--aspect-ratio", help="Screen aspect ratio: 16:9, 2.35:1, 2.40:1"),
    ] = None,
    bottom_edge: Annotated[
        float | None,
        typer.Option("--bottom-edge", help="Screen bottom edge height in inches"),
    ] = None,
    masking: Annotated[
        str | None,
        typer.Option("--masking", help="Masking: fixed-240, motorized, 16:9-no-masking"),
    ] = None,
    walls: Annotated[
        str | None,
        typer.Option(
            "--walls",
            help="Wall construction: drywall, treated-drywall, mlv-drywall, hybrid, concrete",
        ),
    ] = None,
    standard: Annotated[
        str | None,
        typer.Option("--standard", help="Content standard: SDR, HDR"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: summary, json, report"),
    ] = "summary",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Analyze a theater project.

    Without --config the default two-row project is analyzed. Any room or
    screen option given on the command line overrides the file value.

    Examples:
        avsafeguard analyze --config theater.json
        avsafeguard analyze --config theater.json --walls drywall --format json
        avsafeguard analyze --width 12 --screen-size 150
    """
    _configure_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format: {output_format}. Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    if config_file is not None:
        config = _load_or_exit(config_file)
    else:
        logger.debug("No configuration file given, using the default project")
        config = default_configuration()

    try:
        config = merge_config_with_cli(
            config,
            length=length,
            width=width,
            height=height,
            screen_size=screen_size,
            aspect_ratio=aspect_ratio,
            bottom_edge_height=bottom_edge,
            masking=masking,
            wall_construction=walls,
            content_standard=standard,
        )
    except PydanticValidationError as e:
        typer.echo("Errors:", err=True)
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            typer.echo(f"  {location}: {err['msg']}", err=True)
        raise typer.Exit(code=1)

    project = config_to_project(config)
    try:
        result = ProjectAnalyzer().analyze(project)
    except ProjectValidationError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        content = JsonExporter().export(result)
    elif output_format == "report":
        content = ReportFormatter().format(project, result)
    else:
        content = SummaryFormatter().format(result)

    _emit(content, output_file, "Analysis")


@app.command()
def report(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the markdown report to a file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Generate a markdown design report for a project file.

    Example:
        avsafeguard report theater.json --output theater-report.md
    """
    _configure_logging(verbose)

    config = _load_or_exit(config_file)
    project = config_to_project(config)
    try:
        result = ProjectAnalyzer().analyze(project)
    except ProjectValidationError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    _emit(ReportFormatter().format(project, result), output_file, "Report")


if __name__ == "__main__":
    app()
