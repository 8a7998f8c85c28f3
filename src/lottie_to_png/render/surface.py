"""Reusable pixel buffers that animation frames are rendered into."""

from dataclasses import dataclass, field

from ..constants import BYTES_PER_PIXEL
from .errors import SurfaceAllocationError


@dataclass
class RasterSurface:
    """
    A caller-owned RGBA pixel buffer.

    Pixels are 4 bytes (R, G, B, A), row-major, top to bottom. One surface
    is allocated per worker and reused for every frame that worker renders.
    """

    width: int
    height: int
    buffer: bytearray = field(repr=False)

    @property
    def stride(self) -> int:
        """Bytes per row."""
        return self.width * BYTES_PER_PIXEL

    @property
    def size_in_bytes(self) -> int:
        return self.stride * self.height

    @classmethod
    def allocate(cls, width: int, height: int) -> "RasterSurface":
        """
        Allocate a zeroed surface.

        Args:
            width: Surface width in pixels
            height: Surface height in pixels

        Raises:
            ValueError: If either dimension is not positive
            SurfaceAllocationError: If the buffer cannot be allocated
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface dimensions must be positive, got {width}x{height}")
        try:
            buffer = bytearray(width * height * BYTES_PER_PIXEL)
        except MemoryError as exc:
            raise SurfaceAllocationError(
                f"Unable to allocate a {width}x{height} raster surface"
            ) from exc
        return cls(width=width, height=height, buffer=buffer)

    def write_pixels(self, data: bytes) -> None:
        """Replace the surface contents with ``data`` (RGBA, same size)."""
        if len(data) != self.size_in_bytes:
            raise ValueError(
                f"Pixel data is {len(data)} bytes, surface holds {self.size_in_bytes}"
            )
        self.buffer[:] = data
