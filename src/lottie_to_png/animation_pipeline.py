"""Shared conversion orchestration used by the CLI."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .constants import DEFAULT_FPS, DEFAULT_QUALITY, DEFAULT_THREADS
from .output import frame_duration_ms, load_frame_images, resolve_output_provider
from .render import AnimationLoader, RenderResult, load_animation, new_cache_key, render_frames
from .source import load_animation_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one animation file."""

    render: RenderResult
    output_path: Path | None = None


def default_frames_directory(source_path: str | Path) -> Path:
    """Frame directory used when none is given: ``<source stem>.png`` beside the source."""
    path = Path(source_path)
    return path.with_name(f"{path.stem}.png")


def convert_animation(
    source_path: str | Path,
    output_dir: str | Path,
    *,
    width: int,
    height: int,
    fps: float = DEFAULT_FPS,
    workers: int = DEFAULT_THREADS,
    output_path: str | None = None,
    quality: int = DEFAULT_QUALITY,
    loader: AnimationLoader = load_animation,
) -> ConversionResult:
    """
    Render an animation file to PNG frames and optionally assemble them.

    Args:
        source_path: Lottie file (.json, .tgs or .lottie)
        output_dir: Directory receiving the PNG frames
        width: Frame width in pixels
        height: Frame height in pixels
        fps: Output frame rate, 0 keeps the native rate
        workers: Render threads, 0 uses one per CPU
        output_path: Animated image to build from the frames (.gif or .webp)
        quality: Encoder quality for the animated image
        loader: Factory for decoder handles

    Returns:
        ConversionResult with the rendered frames and the animated output path
    """
    # Resolve the provider first so a bad extension fails before rendering
    provider = resolve_output_provider(output_path, quality=quality) if output_path else None

    source = load_animation_source(source_path)
    cache_key = new_cache_key()
    logger.info("Rendering %s into %s", source_path, output_dir)
    result = render_frames(
        source,
        width,
        height,
        output_dir,
        fps,
        workers,
        cache_key=cache_key,
        loader=loader,
    )
    logger.info("Rendered %d frames with %d workers", result.frame_count, result.worker_count)

    if provider is None:
        return ConversionResult(render=result)

    duration = frame_duration_ms(result.params.output_frame_rate)
    encoded = provider.encode(load_frame_images(result.frame_paths), frame_duration=duration)
    provider.write(encoded)
    logger.info("Wrote %s", provider.path)
    return ConversionResult(render=result, output_path=Path(provider.path))
