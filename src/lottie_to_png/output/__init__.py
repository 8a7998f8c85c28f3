"""Output providers that assemble rendered frames into animated images."""

from dataclasses import dataclass
from pathlib import Path

from ..constants import DEFAULT_QUALITY
from .base import OutputProvider, frame_duration_ms, load_frame_images
from .gif_provider import GifOutputProvider
from .webp_provider import WebPOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    provider_class: type[OutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "gif": OutputFormatSpec(
        extension=".gif",
        provider_class=GifOutputProvider,
    ),
    "webp": OutputFormatSpec(
        extension=".webp",
        provider_class=WebPOutputProvider,
    ),
}


def resolve_output_provider(
    file_path: str,
    quality: int = DEFAULT_QUALITY,
) -> OutputProvider:
    """
    Resolve the appropriate output provider based on file extension.

    Args:
        file_path: Output file path (extension determines format)
        quality: Encoder quality passed to the provider

    Returns:
        An OutputProvider instance

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(file_path).suffix.lower()
    spec = _output_spec_from_extension(ext)
    return spec.provider_class(file_path, quality=quality)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


def _output_spec_from_extension(ext: str) -> OutputFormatSpec:
    output_format = ext.removeprefix(".")
    spec = _OUTPUT_FORMATS.get(output_format)
    if spec is not None:
        return spec
    supported = ", ".join(spec.extension for spec in _OUTPUT_FORMATS.values())
    raise ValueError(f"Unsupported output format: {ext}. Supported formats: {supported}")


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "GifOutputProvider",
    "WebPOutputProvider",
    "frame_duration_ms",
    "load_frame_images",
    "resolve_output_provider",
    "supported_output_formats",
]
