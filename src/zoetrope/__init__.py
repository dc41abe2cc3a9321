"""Wall-clock synchronized frame timing for animated images."""

from .animator import FrameAnimator
from .image_timing import AnimationInfo, AnimationReadError, read_animation_info
from .playback import PlaybackFrame, iter_playback
from .timing import (
    ConstantFrameTiming,
    FrameSchedule,
    FrameTiming,
    InvalidFrameDelayError,
    VariableFrameTiming,
    create_timing,
    timing_for_delays,
)

__all__ = [
    "FrameAnimator",
    "FrameTiming",
    "FrameSchedule",
    "ConstantFrameTiming",
    "VariableFrameTiming",
    "InvalidFrameDelayError",
    "create_timing",
    "timing_for_delays",
    "AnimationInfo",
    "AnimationReadError",
    "read_animation_info",
    "PlaybackFrame",
    "iter_playback",
]
