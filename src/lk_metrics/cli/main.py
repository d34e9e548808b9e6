"""lk-metrics command-line interface."""

import sys
from pathlib import Path

import typer
from loguru import logger

from .. import __version__
from ..analysis import compute_declaration_set_metrics
from ..analysis.reporters import ConsoleReporter, render_json
from ..config.defaults import get_default_weights_path
from ..config.weights import ComplexityWeights
from ..core.exceptions import LKMetricsError
from ..core.file_discovery import FileDiscovery
from ..parsers.csharp import CSharpDeclarationReader
from .output import console, print_error, print_info, print_success

app = typer.Typer(
    name="lk-metrics",
    help="📐 Lorenz & Kidd object-oriented metrics for C# code",
    no_args_is_help=True,
)


def setup_logging(verbose: bool) -> None:
    """Route loguru output to stderr at the requested level."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def version_callback(value: bool) -> None:
    if value:
        console.print(f"lk-metrics {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """📐 Lorenz & Kidd object-oriented metrics for C# code."""


@app.command()
def analyze(
    path: Path = typer.Argument(
        ...,
        help="C# file or directory to analyze",
        exists=True,
        readable=True,
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write metrics as JSON to this file",
    ),
    weights_file: Path | None = typer.Option(
        None,
        "--weights",
        "-w",
        help="YAML file with complexity weights (default: <path>/.lk-metrics.yaml)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print metrics as JSON to stdout",
    ),
    top: int | None = typer.Option(
        None,
        "--top",
        help="Only show the N most complex classes",
        min=1,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Compute class metrics for every class declared under PATH.

    [bold cyan]Examples:[/bold cyan]

    [green]Summary table:[/green]
        $ lk-metrics analyze src/

    [green]Export to JSON:[/green]
        $ lk-metrics analyze src/ --output metrics.json

    [green]Custom weights:[/green]
        $ lk-metrics analyze src/ --weights weights.yaml
    """
    setup_logging(verbose)

    try:
        if weights_file is None:
            root = path if path.is_dir() else path.parent
            weights_file = get_default_weights_path(root)
        weights = ComplexityWeights.load(weights_file)

        reader = CSharpDeclarationReader()
        discovery = FileDiscovery(path, set(reader.get_supported_extensions()))
        declarations = reader.read_directory(path, discovery)
        class_infos = compute_declaration_set_metrics(declarations, weights)
    except LKMetricsError as e:
        logger.error(f"Analysis failed: {e}")
        print_error(f"Analysis failed: {e}")
        raise typer.Exit(1)

    if output is not None:
        render_json(class_infos, output)

    if json_output:
        typer.echo(render_json(class_infos))
        return

    reporter = ConsoleReporter(console)
    reporter.print_summary(class_infos)
    reporter.print_classes(class_infos, top=top)
    if output is not None:
        print_success(f"Metrics written to {output}")
    if not declarations.classes:
        print_info(f"No classes found in {len(declarations.source_files)} files")


@app.command()
def weights(
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the default weights to this YAML file",
    ),
) -> None:
    """Show (or save) the default complexity weights."""
    defaults = ComplexityWeights()
    if output is not None:
        defaults.save(output)
        print_success(f"Default weights written to {output}")
        return

    for name, value in defaults.to_dict().items():
        console.print(f"{name}: {value}")


if __name__ == "__main__":
    app()
