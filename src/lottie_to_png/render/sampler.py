"""Mapping of output frames onto source animation frames."""

import math
from dataclasses import dataclass

# Products like 24 * (71 / 24) land a hair below the whole number they represent
_FRAME_COUNT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class FrameSampleParameters:
    """Sampling parameters derived once per conversion."""

    source_frame_count: int
    source_frame_rate: float
    output_frame_rate: float
    duration: float
    step: float
    output_frame_count: int

    @classmethod
    def compute(
        cls,
        source_frame_count: int,
        source_frame_rate: float,
        output_frame_rate: float = 0.0,
    ) -> "FrameSampleParameters":
        """
        Derive sampling parameters for a target frame rate.

        Args:
            source_frame_count: Number of frames in the source animation
            source_frame_rate: Native frame rate of the source animation
            output_frame_rate: Requested output rate, 0 keeps the native rate

        Raises:
            ValueError: If a rate is not finite, the source rate is not positive or
                the output rate is negative
        """
        if source_frame_rate <= 0:
            raise ValueError(f"Source frame rate must be positive, got {source_frame_rate}")
        if source_frame_count < 0:
            raise ValueError(f"Source frame count must not be negative, got {source_frame_count}")
        if not math.isfinite(source_frame_rate) or not math.isfinite(output_frame_rate):
            raise ValueError(
                f"Frame rates must be finite, got {source_frame_rate} and {output_frame_rate}"
            )
        if output_frame_rate < 0:
            raise ValueError(f"Output frame rate must not be negative, got {output_frame_rate}")
        if output_frame_rate == 0:
            output_frame_rate = source_frame_rate

        duration = source_frame_count / source_frame_rate
        step = source_frame_rate / output_frame_rate
        output_frame_count = math.floor(output_frame_rate * duration + _FRAME_COUNT_TOLERANCE)
        return cls(
            source_frame_count=source_frame_count,
            source_frame_rate=source_frame_rate,
            output_frame_rate=output_frame_rate,
            duration=duration,
            step=step,
            output_frame_count=output_frame_count,
        )


def source_frame_for(params: FrameSampleParameters, output_index: int) -> int:
    """Nearest source frame for one output frame (round half up, clamped)."""
    frame = math.floor(output_index * params.step + 0.5)
    return max(0, min(frame, params.source_frame_count - 1))


def sample_source_frames(params: FrameSampleParameters) -> list[int]:
    """Source frame for every output frame, in output order."""
    return [source_frame_for(params, j) for j in range(params.output_frame_count)]
