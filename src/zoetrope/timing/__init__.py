"""Frame timing strategies."""

import math
from typing import Sequence

from ._quantize import round_to_millisecond
from .base import FrameSchedule, FrameTiming
from .constant import ConstantFrameSchedule, ConstantFrameTiming
from .variable import InvalidFrameDelayError, VariableFrameSchedule, VariableFrameTiming

TIMING_TYPES: dict[str, type[FrameTiming]] = {
    "constant": ConstantFrameTiming,
    "variable": VariableFrameTiming,
}


def supported_timing_names() -> tuple[str, ...]:
    """Return supported timing strategy names in deterministic order."""
    return tuple(TIMING_TYPES.keys())


def timing_for_delays(frame_delays: Sequence[float]) -> FrameTiming:
    """
    Pick the cheapest timing that reproduces the given per-frame delays.

    Equal delays get a constant rate timing; anything else needs a variable one.

    Args:
        frame_delays: Seconds each frame is shown for, in display order

    Returns:
        A ``ConstantFrameTiming`` or ``VariableFrameTiming``
    """
    if not frame_delays:
        return ConstantFrameTiming(frame_count=1, duration=0.0)

    first = frame_delays[0]
    if all(delay == first for delay in frame_delays):
        if not math.isfinite(first) or first < 0:
            raise InvalidFrameDelayError(0, first)
        return ConstantFrameTiming(
            frame_count=len(frame_delays),
            duration=round_to_millisecond(first * len(frame_delays)),
        )
    return VariableFrameTiming(frame_delays)


def create_timing(
    name: str,
    *,
    frame_delays: Sequence[float] | None = None,
    frame_count: int | None = None,
    duration: float | None = None,
) -> FrameTiming:
    """Create a timing by strategy name from whichever inputs it needs."""
    if name not in TIMING_TYPES:
        available = ", ".join(supported_timing_names())
        raise ValueError(f"Unknown timing '{name}'. Available: {available}")

    if name == "variable":
        if frame_delays is None:
            raise ValueError("Variable timing requires frame delays")
        return VariableFrameTiming(frame_delays)

    if frame_count is None or duration is None:
        raise ValueError("Constant timing requires a frame count and a duration")
    return ConstantFrameTiming(frame_count=frame_count, duration=duration)


__all__ = [
    "FrameTiming",
    "FrameSchedule",
    "ConstantFrameTiming",
    "ConstantFrameSchedule",
    "VariableFrameTiming",
    "VariableFrameSchedule",
    "InvalidFrameDelayError",
    "TIMING_TYPES",
    "supported_timing_names",
    "timing_for_delays",
    "create_timing",
]
