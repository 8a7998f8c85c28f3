"""Tests for raster surfaces."""

import pytest

from lottie_to_png.render import RasterSurface, SurfaceAllocationError
from lottie_to_png.render import surface as surface_module


def test_allocate_creates_zeroed_rgba_buffer():
    surface = RasterSurface.allocate(3, 2)

    assert surface.stride == 12
    assert surface.size_in_bytes == 24
    assert surface.buffer == bytearray(24)


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-2, 4)])
def test_allocate_rejects_non_positive_dimensions(width, height):
    with pytest.raises(ValueError, match="must be positive"):
        RasterSurface.allocate(width, height)


def test_write_pixels_reuses_the_same_buffer():
    """Writing a frame should fill the existing buffer rather than replace it."""
    surface = RasterSurface.allocate(1, 1)
    buffer = surface.buffer

    surface.write_pixels(b"\x01\x02\x03\x04")

    assert surface.buffer is buffer
    assert buffer == bytearray(b"\x01\x02\x03\x04")


def test_write_pixels_rejects_wrong_size():
    surface = RasterSurface.allocate(2, 2)

    with pytest.raises(ValueError, match="surface holds 16"):
        surface.write_pixels(b"\x00" * 4)


def test_out_of_memory_raises_surface_allocation_error(monkeypatch):
    def no_memory(size):
        raise MemoryError

    monkeypatch.setattr(surface_module, "bytearray", no_memory, raising=False)

    with pytest.raises(SurfaceAllocationError, match="4x4"):
        RasterSurface.allocate(4, 4)
