"""CLI application entry point for TextTango.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from texttango import __version__
from texttango.cli.output import (
    console,
    create_progress,
    print_error,
    print_font_info,
    print_header,
    print_step,
    print_success,
    print_texts,
)
from texttango.config import (
    BaseKind,
    BaseSpec,
    LoggingConfig,
    SupportKind,
    TextSettings,
    sync_pair_configs,
)
from texttango.core import GenerationPipeline, GenerationResult
from texttango.exceptions import (
    AssemblyError,
    ConfigurationError,
    ExportError,
    FontLoadError,
    NoPrintableGeometryError,
    TextTangoError,
)
from texttango.io import FontLibrary, write_stl
from texttango.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="texttango",
    help="Combine two texts into one 3D-printable solid that reads differently from each side.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]TextTango[/bold blue] v{__version__}")
        raise typer.Exit()


def build_settings(
    text1: str,
    text2: str,
    font: Path,
    font_size: float,
    spacing: float,
    base: BaseSpec,
    supports: bool,
    support_kind: SupportKind,
    support_height: float,
    support_radius: float,
    auto_bridges: bool,
    logging_config: LoggingConfig,
) -> TextSettings:
    """Build run settings from CLI arguments.

    Returns:
        Settings with one pair entry per position

    Raises:
        pydantic.ValidationError: If a value is out of range
    """
    settings = TextSettings(
        text1=text1,
        text2=text2,
        font=str(font),
        font_size=font_size,
        spacing=spacing,
        base=base,
        support_enabled=supports,
        support_kind=support_kind,
        support_height=support_height,
        support_radius=support_radius,
        logging=logging_config,
    )
    settings = sync_pair_configs(settings)

    if auto_bridges:
        configs = [
            pair.model_copy(update={"bridge": pair.bridge.model_copy(update={"enabled": True})})
            for pair in settings.pair_configs
        ]
        settings = settings.model_copy(update={"pair_configs": configs})

    return settings


@app.command()
def generate(
    text1: Annotated[
        str,
        typer.Argument(help="Text read from the left diagonal", show_default=False),
    ],
    text2: Annotated[
        str,
        typer.Argument(help="Text read from the right diagonal", show_default=False),
    ],
    font: Annotated[
        Path,
        typer.Option("--font", "-f", help="Path to a TTF/OTF font file", show_default=False),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output STL path"),
    ] = Path("texttango.stl"),
    font_size: Annotated[
        float,
        typer.Option("--font-size", "-s", help="Glyph size in model units", min=1.0, max=1000.0),
    ] = 20.0,
    spacing: Annotated[
        float,
        typer.Option("--spacing", help="Gap between pairs as a multiple of font size", min=0.0, max=5.0),
    ] = 0.15,
    base_kind: Annotated[
        BaseKind,
        typer.Option("--base", "-b", help="Base plate shape", case_sensitive=False),
    ] = BaseKind.RECTANGLE,
    base_height: Annotated[
        float,
        typer.Option("--base-height", help="Base plate thickness (0 disables the base)", min=0.0),
    ] = 2.0,
    base_padding: Annotated[
        float,
        typer.Option("--base-padding", help="Extra base size per axis", min=0.0),
    ] = 4.0,
    corner_radius: Annotated[
        float,
        typer.Option("--corner-radius", help="Base corner radius", min=0.0),
    ] = 2.0,
    embed_depth: Annotated[
        float,
        typer.Option("--embed-depth", help="How far the letters sink into the base"),
    ] = 0.5,
    supports: Annotated[
        bool,
        typer.Option("--supports", help="Add a support pillar under every pair"),
    ] = False,
    support_kind: Annotated[
        SupportKind,
        typer.Option("--support-kind", help="Support pillar shape", case_sensitive=False),
    ] = SupportKind.CYLINDER,
    support_height: Annotated[
        float,
        typer.Option("--support-height", help="Support pillar height", min=0.1),
    ] = 5.0,
    support_radius: Annotated[
        float,
        typer.Option("--support-radius", help="Support radius (or half-width)", min=0.1),
    ] = 3.0,
    auto_bridges: Annotated[
        bool,
        typer.Option("--auto-bridges", help="Join stacked pieces of a pair with connectors"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate an STL that reads TEXT1 from one diagonal and TEXT2 from the other.

    Example:
        texttango YES NO --font Roboto-Bold.ttf -o yes_no.stl
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not font.exists() or not font.is_file():
        print_error(
            f"Font file not found: {font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        settings = build_settings(
            text1=text1,
            text2=text2,
            font=font,
            font_size=font_size,
            spacing=spacing,
            base=BaseSpec(
                kind=base_kind,
                height=base_height,
                padding=base_padding,
                corner_radius=corner_radius,
                embed_depth=embed_depth,
            ),
            supports=supports,
            support_kind=support_kind,
            support_height=support_height,
            support_radius=support_radius,
            auto_bridges=auto_bridges,
            logging_config=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level,
            ),
        )
    except ValueError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    logger = None
    if log_file is not None:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

    fonts = FontLibrary()
    try:
        if not quiet:
            print_step("Loading font")
        reader = fonts.get(str(font))
        if not quiet:
            print_font_info(str(font), reader.family_name, reader.format, reader.units_per_em)
            print_step("Generating")
            print_texts(settings.text1, settings.text2, settings.position_count)

        pipeline = GenerationPipeline(fonts, logger=logger)
        result = _run(pipeline, settings, quiet)

        if not quiet:
            print_step("Exporting")
        write_stl(result.mesh, output)

        if not quiet:
            print_success(
                output_path=str(output),
                file_size=_format_file_size(output),
                total_time_s=result.compute_time,
                triangles=result.mesh.triangle_count,
                bounds=result.bounds,
                stats=result.stats,
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except ConfigurationError as e:
        print_error(f"Invalid setting '{e.field}'", details=e.reason)
        raise typer.Exit(code=1)
    except NoPrintableGeometryError as e:
        print_error("Nothing to print", details=str(e))
        raise typer.Exit(code=1)
    except AssemblyError as e:
        print_error(f"Assembly failed during {e.stage}", details=e.reason)
        raise typer.Exit(code=1)
    except ExportError as e:
        print_error(f"Could not write STL: {e.reason}")
        raise typer.Exit(code=1)
    except TextTangoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    finally:
        fonts.clear()


def _run(pipeline: GenerationPipeline, settings: TextSettings, quiet: bool) -> GenerationResult:
    """Run the pipeline, with a progress bar unless quiet."""
    if quiet:
        return pipeline.generate(settings)

    with create_progress() as progress:
        task_id = progress.add_task("Generating", total=settings.position_count, pair="")

        def update_progress(completed: int, _total: int, pair: str, _success: bool) -> None:
            progress.update(task_id, completed=completed, pair=pair)

        return pipeline.generate(settings, progress_callback=update_progress)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"

    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
