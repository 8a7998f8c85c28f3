"""PNG encoding of composited frames."""

from os import PathLike

import numpy as np
from PIL import Image

from ..constants import BYTES_PER_PIXEL, OUTPUT_BYTES_PER_PIXEL
from .errors import EncodeError


def pack_rgb(buffer: bytes | bytearray, width: int, height: int) -> bytes:
    """Re-pack 4-byte RGBA pixels into 3-byte RGB pixels, dropping alpha."""
    expected = width * height * BYTES_PER_PIXEL
    if len(buffer) < expected:
        raise EncodeError(f"Buffer holds {len(buffer)} bytes, {width}x{height} RGBA needs {expected}")
    pixels = np.frombuffer(buffer, dtype=np.uint8, count=expected).reshape(-1, BYTES_PER_PIXEL)
    return np.ascontiguousarray(pixels[:, :OUTPUT_BYTES_PER_PIXEL]).tobytes()


def write_png(
    buffer: bytes | bytearray,
    width: int,
    height: int,
    out_file_path: str | PathLike[str],
) -> None:
    """
    Write an opaque RGBA buffer as an RGB PNG file.

    The buffer is expected to be composited already; its alpha channel is
    discarded.

    Args:
        buffer: RGBA pixel buffer, row-major
        width: Image width in pixels
        height: Image height in pixels
        out_file_path: Destination file

    Raises:
        EncodeError: If the image cannot be built or the file cannot be written
    """
    rgb = pack_rgb(buffer, width, height)
    try:
        image = Image.frombytes("RGB", (width, height), rgb)
    except ValueError as exc:
        raise EncodeError(f"PNG export failed: unable to create image: {exc}") from exc

    try:
        out_file = open(out_file_path, "wb")
    except OSError as exc:
        raise EncodeError(f"PNG export failed: cannot open '{out_file_path}': {exc}") from exc

    with out_file:
        try:
            image.save(out_file, format="PNG")
        except (OSError, ValueError) as exc:
            raise EncodeError(f"PNG export failed: cannot write '{out_file_path}': {exc}") from exc
