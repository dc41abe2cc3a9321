"""Read frame delays and loop counts from animated images with Pillow."""

from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from .constants import (
    CLAMPED_FRAME_DELAY_MS,
    MILLISECONDS_PER_SECOND,
    MINIMUM_UNCLAMPED_FRAME_DELAY_MS,
)
from .timing import FrameTiming, timing_for_delays


class AnimationReadError(Exception):
    """Raised when an animated image cannot be opened or read."""
    pass


@dataclass(frozen=True)
class AnimationInfo:
    """Timing details of an animated image."""

    frame_delays: tuple[float, ...]
    loops: int | None
    timing: FrameTiming

    @property
    def frame_count(self) -> int:
        return len(self.frame_delays)


def clamp_frame_delay(delay_ms: float | None) -> float:
    """
    Convert a stored frame delay in milliseconds to seconds.

    Delays that are missing or no longer than 10ms are shown for 100ms,
    which is how browsers play legacy GIFs.
    """
    if delay_ms is None or delay_ms <= MINIMUM_UNCLAMPED_FRAME_DELAY_MS:
        delay_ms = CLAMPED_FRAME_DELAY_MS
    return delay_ms / MILLISECONDS_PER_SECOND


def read_animation_info(source: str | Path | Image.Image) -> AnimationInfo:
    """
    Read the per-frame delays and loop count of an animated image.

    Args:
        source: Path to a GIF, WebP or APNG file, or an already opened image

    Returns:
        AnimationInfo with the delays, loop count and a matching timing

    Raises:
        AnimationReadError: If the file cannot be opened or decoded
    """
    if isinstance(source, Image.Image):
        return _read_image(source)

    try:
        with Image.open(source) as image:
            return _read_image(image)
    except FileNotFoundError:
        raise AnimationReadError(f"File '{source}' not found")
    except (OSError, EOFError) as e:
        raise AnimationReadError(f"Could not read animation from '{source}': {e}")


def _read_image(image: Image.Image) -> AnimationInfo:
    frame_count = getattr(image, "n_frames", 1)
    frame_delays: list[float] = []
    for frame_index in range(frame_count):
        image.seek(frame_index)
        frame_delays.append(clamp_frame_delay(image.info.get("duration")))

    loop = image.info.get("loop")
    loops = loop if isinstance(loop, int) and loop > 0 else None
    delays = tuple(frame_delays)
    return AnimationInfo(frame_delays=delays, loops=loops, timing=timing_for_delays(delays))
