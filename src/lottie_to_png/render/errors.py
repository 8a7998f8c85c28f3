"""Errors raised by the frame rendering engine."""


class RenderError(Exception):
    """Base exception for failures that abort a conversion."""
    pass


class AnimationLoadError(RenderError):
    """The animation source could not be decoded."""
    pass


class SurfaceAllocationError(RenderError):
    """A raster buffer could not be allocated."""
    pass


class EncodeError(RenderError):
    """A frame could not be written as an image file."""
    pass
