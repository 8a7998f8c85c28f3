"""Parallel rendering of an animation into a directory of PNG frames."""

import logging
import math
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from ..constants import FRAME_FILE_EXTENSION, FRAME_NAME_MIN_DIGITS
from .compositor import apply_white_background
from .decoder import AnimationLoader, load_animation
from .encoder import write_png
from .errors import AnimationLoadError
from .sampler import FrameSampleParameters, source_frame_for
from .surface import RasterSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    """Frames produced by one conversion."""

    frame_paths: tuple[Path, ...]
    worker_count: int
    params: FrameSampleParameters

    @property
    def frame_count(self) -> int:
        return len(self.frame_paths)


def resolve_worker_count(requested: int) -> int:
    """Turn a requested worker count into an actual one (0 = one per CPU)."""
    if requested < 0:
        raise ValueError(f"Worker count must not be negative, got {requested}")
    if requested == 0:
        return os.cpu_count() or 1
    return requested


def partition_frame_indices(frame_count: int, worker_count: int, worker_index: int) -> range:
    """Output indices assigned to one worker: ``i, i + n, i + 2n, ...``."""
    return range(worker_index, frame_count, worker_count)


def frame_file_name(index: int, frame_count: int) -> str:
    """
    File name for an output frame.

    Names are zero-padded to three digits. Conversions with 1000 or more
    frames pad every name to the width of the largest index instead, so
    names stay unique and sort in frame order.
    """
    digits = max(FRAME_NAME_MIN_DIGITS, len(str(max(frame_count - 1, 0))))
    return f"{index:0{digits}d}{FRAME_FILE_EXTENSION}"


def render_frames(
    source: str,
    width: int,
    height: int,
    output_directory: str | os.PathLike[str],
    fps: float = 0.0,
    worker_count: int = 0,
    *,
    cache_key: str,
    loader: AnimationLoader = load_animation,
) -> RenderResult:
    """
    Render every sampled frame of an animation to ``output_directory``.

    The source is decoded once to read its frame count and frame rate,
    then ``worker_count`` threads each load their own handle with the same
    cache key and render a strided share of the output frames. The call
    returns only after every worker has finished; if any frame fails, the
    remaining workers stop and the first error is raised.

    Args:
        source: Animation document text
        width: Frame width in pixels
        height: Frame height in pixels
        output_directory: Directory the PNG frames are written to
        fps: Output frame rate, 0 keeps the native rate
        worker_count: Number of worker threads, 0 uses one per CPU
        cache_key: Key handed to the probe and every worker handle of this conversion
        loader: Factory for decoder handles

    Returns:
        RenderResult describing the written frames

    Raises:
        AnimationLoadError: If the source cannot be decoded
        SurfaceAllocationError: If a worker cannot allocate its buffer
        EncodeError: If a frame cannot be written
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Frame dimensions must be positive, got {width}x{height}")
    if not math.isfinite(fps) or fps < 0:
        raise ValueError(f"Output frame rate must be finite and not negative, got {fps}")

    probe = loader(source, cache_key)
    try:
        params = FrameSampleParameters.compute(probe.total_frames, probe.frame_rate, fps)
    except ValueError as exc:
        raise AnimationLoadError(f"can not load lottie animation: {exc}") from exc
    finally:
        probe.close()
    logger.debug(
        "Probed animation: %d frames at %.3f fps, rendering %d frames at %.3f fps (step %.4f)",
        params.source_frame_count,
        params.source_frame_rate,
        params.output_frame_count,
        params.output_frame_rate,
        params.step,
    )

    workers = resolve_worker_count(worker_count)
    out_dir = Path(output_directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    frame_paths = tuple(
        out_dir / frame_file_name(j, params.output_frame_count)
        for j in range(params.output_frame_count)
    )

    abort = threading.Event()

    def run_worker(worker_index: int) -> None:
        indices = partition_frame_indices(params.output_frame_count, workers, worker_index)
        if not indices:
            return
        logger.debug("Worker %d starting (%d frames)", worker_index, len(indices))
        try:
            rendered = _render_share(
                source, cache_key, loader, width, height, params, indices, frame_paths, abort
            )
        except Exception:
            abort.set()
            logger.exception("Worker %d failed", worker_index)
            raise
        logger.debug("Worker %d finished (%d frames)", worker_index, rendered)

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="render") as executor:
        futures = [executor.submit(run_worker, i) for i in range(workers)]
    # Leaving the executor joined every worker
    for future in futures:
        error = future.exception()
        if error is not None:
            raise error

    return RenderResult(frame_paths=frame_paths, worker_count=workers, params=params)


def _render_share(
    source: str,
    cache_key: str,
    loader: AnimationLoader,
    width: int,
    height: int,
    params: FrameSampleParameters,
    indices: range,
    frame_paths: tuple[Path, ...],
    abort: threading.Event,
) -> int:
    """Sample, render, composite and encode one worker's frames."""
    rendered = 0
    handle = loader(source, cache_key)
    try:
        surface = RasterSurface.allocate(width, height)
        for j in indices:
            if abort.is_set():
                break
            handle.render_sync(source_frame_for(params, j), surface)
            apply_white_background(surface.buffer, width, height)
            write_png(surface.buffer, width, height, frame_paths[j])
            rendered += 1
    finally:
        handle.close()
    return rendered
