"""Flattening of transparent frames onto an opaque white background."""

import numpy as np

from ..constants import BYTES_PER_PIXEL


def apply_white_background(buffer: bytearray, width: int, height: int) -> None:
    """
    Composite an RGBA buffer over solid white, in place.

    Every pixel ends up with alpha 255. Fully transparent pixels become
    white, fully opaque pixels keep their color and partially transparent
    ones are blended as ``c * a/255 + 255 * (1 - a/255)``, rounded down.

    Args:
        buffer: Writable RGBA pixel buffer, row-major
        width: Width in pixels
        height: Height in pixels
    """
    expected = width * height * BYTES_PER_PIXEL
    if len(buffer) < expected:
        raise ValueError(f"Buffer holds {len(buffer)} bytes, {width}x{height} RGBA needs {expected}")

    pixels = np.frombuffer(buffer, dtype=np.uint8, count=expected).reshape(-1, BYTES_PER_PIXEL)
    alpha = pixels[:, 3:4].astype(np.uint32)
    color = pixels[:, :3].astype(np.uint32)
    # Exact integer form of the float blend; a == 0 and a == 255 fall out of it
    pixels[:, :3] = (color * alpha + 255 * (255 - alpha)) // 255
    pixels[:, 3] = 255
