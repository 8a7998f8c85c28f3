"""Decoder interface and the rlottie-backed implementation."""

import uuid
from typing import Callable, Protocol

from PIL import Image
from rlottie_python import LottieAnimation

from .errors import AnimationLoadError
from .surface import RasterSurface


class AnimationHandle(Protocol):
    """
    A decoder instance bound to one animation source.

    Handles are not shared between threads; every worker loads its own.
    """

    @property
    def total_frames(self) -> int: ...

    @property
    def frame_rate(self) -> float: ...

    def render_sync(self, frame_index: int, surface: RasterSurface) -> None:
        """Render one source frame into ``surface`` as straight RGBA."""
        ...

    def close(self) -> None: ...


AnimationLoader = Callable[[str, str], AnimationHandle]


def new_cache_key() -> str:
    """Create a decoder cache key unique to one conversion."""
    return uuid.uuid4().hex


class RlottieAnimation:
    """AnimationHandle backed by rlottie."""

    def __init__(self, animation: LottieAnimation):
        self._animation = animation
        self._total_frames = int(animation.lottie_animation_get_totalframe())
        self._frame_rate = float(animation.lottie_animation_get_framerate())

    @classmethod
    def load(cls, source: str, cache_key: str) -> "RlottieAnimation":
        """
        Decode a Lottie JSON document.

        Args:
            source: Lottie JSON text
            cache_key: Conversion key; rlottie-python keeps rlottie's model
                cache disabled and exposes no key, so it is not used here

        Raises:
            AnimationLoadError: If rlottie cannot decode the source
        """
        try:
            animation = LottieAnimation.from_data(source)
        except (OSError, RuntimeError, ValueError) as exc:
            raise AnimationLoadError(f"can not load lottie animation: {exc}") from exc

        handle = cls(animation)
        if handle.total_frames <= 0 or handle.frame_rate <= 0:
            handle.close()
            raise AnimationLoadError(
                "can not load lottie animation: "
                f"{handle.total_frames} frames at {handle.frame_rate} fps"
            )
        return handle

    @property
    def total_frames(self) -> int:
        return self._total_frames

    @property
    def frame_rate(self) -> float:
        return self._frame_rate

    def render_sync(self, frame_index: int, surface: RasterSurface) -> None:
        raw = self._animation.lottie_animation_render(
            frame_num=frame_index,
            width=surface.width,
            height=surface.height,
            bytes_per_line=surface.stride,
        )
        # rlottie emits premultiplied ARGB32, i.e. BGRA bytes on little-endian hosts
        frame = Image.frombuffer(
            "RGBA", (surface.width, surface.height), raw, "raw", "BGRa", surface.stride, 1
        )
        surface.write_pixels(frame.tobytes())

    def close(self) -> None:
        self._animation.lottie_animation_destroy()


def load_animation(source: str, cache_key: str) -> AnimationHandle:
    """Default AnimationLoader."""
    return RlottieAnimation.load(source, cache_key)
