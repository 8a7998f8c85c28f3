"""GIF output provider."""

from .base import PillowSequenceOutputProvider


class GifOutputProvider(PillowSequenceOutputProvider):
    """Output provider for GIF format."""

    @property
    def output_format(self) -> str:
        return "gif"

    @property
    def save_options(self) -> dict[str, object]:
        # Frames are opaque, so no transparency index is reserved
        return {"optimize": self.quality < 100, "disposal": 1}
