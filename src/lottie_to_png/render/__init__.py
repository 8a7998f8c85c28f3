"""Parallel frame rendering and compositing engine."""

from .compositor import apply_white_background
from .decoder import AnimationHandle, AnimationLoader, RlottieAnimation, load_animation, new_cache_key
from .dispatcher import (
    RenderResult,
    frame_file_name,
    partition_frame_indices,
    render_frames,
    resolve_worker_count,
)
from .encoder import pack_rgb, write_png
from .errors import AnimationLoadError, EncodeError, RenderError, SurfaceAllocationError
from .sampler import FrameSampleParameters, sample_source_frames, source_frame_for
from .surface import RasterSurface

__all__ = [
    "AnimationHandle",
    "AnimationLoader",
    "AnimationLoadError",
    "EncodeError",
    "FrameSampleParameters",
    "RasterSurface",
    "RenderError",
    "RenderResult",
    "RlottieAnimation",
    "SurfaceAllocationError",
    "apply_white_background",
    "frame_file_name",
    "load_animation",
    "new_cache_key",
    "pack_rgb",
    "partition_frame_indices",
    "render_frames",
    "resolve_worker_count",
    "sample_source_frames",
    "source_frame_for",
    "write_png",
]
