"""CLI interface for lottie-to-png."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .animation_pipeline import convert_animation, default_frames_directory
from .constants import DEFAULT_FPS, DEFAULT_HEIGHT, DEFAULT_QUALITY, DEFAULT_THREADS, DEFAULT_WIDTH
from .output import supported_output_formats
from .render import RenderError
from .source import SUPPORTED_SOURCE_EXTENSIONS

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    source: Path = typer.Argument(
        ...,
        help=f"Lottie animation file ({', '.join(SUPPORTED_SOURCE_EXTENSIONS)})",
    ),
    output_dir: Path = typer.Argument(
        None,
        help="Directory for the PNG frames (default: <source name>.png next to the source)",
    ),
    width: int = typer.Option(
        DEFAULT_WIDTH,
        "--width",
        "-w",
        envvar="WIDTH",
        help="Frame width in pixels",
    ),
    height: int = typer.Option(
        DEFAULT_HEIGHT,
        "--height",
        "-h",
        envvar="HEIGHT",
        help="Frame height in pixels",
    ),
    fps: float = typer.Option(
        DEFAULT_FPS,
        "--fps",
        envvar="FPS",
        help="Output frame rate (0 keeps the animation's own rate)",
    ),
    threads: int = typer.Option(
        DEFAULT_THREADS,
        "--threads",
        "-t",
        envvar="THREADS",
        help="Render threads (0 uses one per CPU)",
    ),
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help=f"Also assemble the frames into an animation ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    output_format: str = typer.Option(
        None,
        "--format",
        "-f",
        envvar="FORMAT",
        help=f"Default animation format when --output is not given ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    quality: int = typer.Option(
        DEFAULT_QUALITY,
        "--quality",
        envvar="QUALITY",
        help="Animated output quality (1-100)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every worker",
    ),
) -> None:
    """
    Render a Lottie animation to a numbered PNG sequence.

    Frames are flattened onto a white background and written as
    000.png, 001.png, ... so an animated-image encoder can pick them up.

    Examples:
      # Native frame rate, one thread per CPU
      lottie-to-png sticker.tgs

      # 25 fps, 4 threads, plus a GIF built from the frames
      lottie-to-png anim.json frames/ --fps 25 --threads 4 --output anim.gif

      # Frames plus sticker.webp, as FORMAT=webp would
      lottie-to-png sticker.tgs --format webp
    """
    _configure_logging(verbose)
    try:
        if width <= 0 or height <= 0:
            raise CLIError(f"Width and height must be positive, got {width}x{height}")
        if fps < 0:
            raise CLIError(f"FPS must not be negative, got {fps}")
        if threads < 0:
            raise CLIError(f"Thread count must not be negative, got {threads}")
        if not source.is_file():
            raise CLIError(f"File not found: {source}")

        if not out and output_format:
            out = _default_output_path(source, output_format)

        frames_dir = output_dir or default_frames_directory(source)
        _convert(source, frames_dir, width, height, fps, threads, out, quality)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _default_output_path(source: Path, output_format: str) -> str:
    """Animated output beside the source, named after it."""
    fmt = output_format.lower()
    if fmt not in supported_output_formats():
        raise CLIError(f"Invalid format '{output_format}'. Choose from: {', '.join(supported_output_formats())}")
    return str(source.with_suffix(f".{fmt}"))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _convert(
    source: Path,
    frames_dir: Path,
    width: int,
    height: int,
    fps: float,
    threads: int,
    output_path: str | None,
    quality: int,
) -> None:
    """Run one conversion and report the outcome."""
    console.print(f"[bold blue]Converting {source}...[/bold blue]")
    try:
        result = convert_animation(
            source,
            frames_dir,
            width=width,
            height=height,
            fps=fps,
            workers=threads,
            output_path=output_path,
            quality=quality,
        )
    except (RenderError, ValueError) as e:
        raise CLIError(f"Failed to convert '{source}': {e}")

    render = result.render
    console.print(
        f"[green]✓[/green] {render.frame_count} frames "
        f"({render.params.output_frame_rate:g} fps, {width}x{height}) saved to {frames_dir}"
    )
    if result.output_path is not None:
        ext = result.output_path.suffix[1:].upper()
        console.print(f"[green]✓[/green] {ext} saved to {result.output_path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
