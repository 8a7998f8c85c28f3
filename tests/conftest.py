"""Shared fixtures: a fake decoder standing in for rlottie."""

import threading
import time

import pytest

from lottie_to_png.render import AnimationLoadError, RasterSurface


class FakeAnimation:
    """AnimationHandle that paints each frame with a solid, frame-dependent color."""

    def __init__(self, registry: "FakeLoader"):
        self._registry = registry
        self.closed = False

    @property
    def total_frames(self) -> int:
        return self._registry.total_frames

    @property
    def frame_rate(self) -> float:
        return self._registry.frame_rate

    def render_sync(self, frame_index: int, surface: RasterSurface) -> None:
        if frame_index in self._registry.failing_frames:
            raise RuntimeError(f"render failed at frame {frame_index}")
        if self._registry.render_delay:
            time.sleep(self._registry.render_delay)
        self._registry.record_render(frame_index)
        pixel = bytes((frame_index % 256, 10, 20, self._registry.alpha))
        surface.write_pixels(pixel * (surface.width * surface.height))

    def close(self) -> None:
        self.closed = True


class FakeLoader:
    """AnimationLoader recording every handle it hands out."""

    def __init__(self, total_frames: int = 30, frame_rate: float = 30.0, alpha: int = 255):
        self.total_frames = total_frames
        self.frame_rate = frame_rate
        self.alpha = alpha
        self.failing_frames: set[int] = set()
        self.render_delay = 0.0
        self.fail_load = False
        self.calls: list[tuple[str, str]] = []
        self.handles: list[FakeAnimation] = []
        self.rendered: list[int] = []
        self._lock = threading.Lock()

    def __call__(self, source: str, cache_key: str) -> FakeAnimation:
        with self._lock:
            self.calls.append((source, cache_key))
            if self.fail_load:
                raise AnimationLoadError("can not load lottie animation")
            handle = FakeAnimation(self)
            self.handles.append(handle)
            return handle

    def record_render(self, frame_index: int) -> None:
        with self._lock:
            self.rendered.append(frame_index)


@pytest.fixture
def fake_loader() -> FakeLoader:
    return FakeLoader()


@pytest.fixture
def make_loader():
    return FakeLoader
