"""Base class for animated output providers."""

from io import BytesIO
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Iterator

from PIL import Image

from ..constants import DEFAULT_QUALITY


class OutputProvider(ABC):
    """Abstract base class for animated output providers."""

    def __init__(self, path: str = "", quality: int = DEFAULT_QUALITY):
        """
        Initialize the provider with an output file path.

        Args:
            path: Path to the output file
            quality: Encoder quality, 1 (smallest) to 100 (best)
        """
        if not 1 <= quality <= 100:
            raise ValueError(f"Quality must be between 1 and 100, got {quality}")
        self.path = path
        self.quality = quality

    @abstractmethod
    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        """
        Encode frames into the output format.

        Args:
            frames: Iterator of frames in display order
            frame_duration: Frame duration in milliseconds

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """
        Write encoded data to a file.

        Args:
            data: Encoded data to write
        """
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)


class PillowSequenceOutputProvider(OutputProvider, ABC):
    """Template output provider for Pillow-supported animated image formats."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``gif`` or ``webp``)."""
        raise NotImplementedError

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        frame_list = list(frames)
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=max(1, frame_duration),
            loop=0,
            **self.save_options,
        )
        return buffer.getvalue()

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}


def load_frame_images(frame_paths: Iterable[Path]) -> Iterator[Image.Image]:
    """Yield rendered frames from disk in the given order."""
    for frame_path in frame_paths:
        with Image.open(frame_path) as image:
            yield image.convert("RGB")


def frame_duration_ms(fps: float) -> int:
    """Per-frame display time in milliseconds for a frame rate."""
    if fps <= 0:
        raise ValueError(f"Frame rate must be positive, got {fps}")
    return max(1, round(1000 / fps))
