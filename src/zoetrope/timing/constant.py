"""Constant frame rate timing."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..clock import elapsed_microseconds
from ._quantize import to_microseconds
from .base import FrameSchedule, FrameTiming


@dataclass(frozen=True)
class ConstantFrameTiming(FrameTiming):
    """
    Frames played back at a constant rate, each shown for ``duration / frame_count``.

    Lookups run on whole microseconds, the resolution of ``datetime``, so the
    schedule can emit exactly the instants at which the frame changes.
    """

    frame_count: int
    duration: float

    @property
    def frame_duration(self) -> float | None:
        """Length of time each frame is shown, ``None`` when there is nothing to animate."""
        if self.duration <= 0 or self.frame_count <= 1:
            return None
        return self.duration / self.frame_count

    @property
    def duration_us(self) -> int:
        """Loop duration in whole microseconds."""
        return to_microseconds(self.duration)

    @property
    def can_animate(self) -> bool:
        return self.frame_duration is not None and self.duration_us > 0

    def frame_index(self, elapsed_time: float) -> int:
        if not self.can_animate:
            return 0
        duration_us = self.duration_us
        elapsed_within_loop_us = to_microseconds(elapsed_time) % duration_us
        return elapsed_within_loop_us * self.frame_count // duration_us

    def schedule(
        self,
        loop_start: datetime,
        paused: bool = False,
        start: datetime | None = None,
    ) -> "ConstantFrameSchedule":
        return ConstantFrameSchedule(self, loop_start, paused=paused, start=start)


class ConstantFrameSchedule(FrameSchedule):
    """
    Frame changes every ``frame_duration`` seconds, counted from the anchor.

    Step ``k`` (counted across loops) begins at the first microsecond at or
    after ``k * duration / frame_count``, which is where ``frame_index``
    moves on to frame ``k % frame_count``.
    """

    timing: ConstantFrameTiming

    def __init__(
        self,
        timing: ConstantFrameTiming,
        loop_start: datetime,
        paused: bool = False,
        start: datetime | None = None,
    ):
        super().__init__(timing, loop_start, paused)
        self._step = 0
        self._last_emitted_us = 0
        if self._exhausted:
            return

        start = loop_start if start is None else start
        elapsed_us = elapsed_microseconds(loop_start, start)
        self._step = elapsed_us * timing.frame_count // timing.duration_us + 1
        self._last_emitted_us = elapsed_us

    def _boundary_us(self, step: int) -> int:
        return -(-step * self.timing.duration_us // self.timing.frame_count)

    def _advance(self) -> datetime:
        while True:
            boundary_us = self._boundary_us(self._step)
            self._step += 1
            # Frames shorter than a microsecond share a boundary with the next one
            if boundary_us > self._last_emitted_us:
                self._last_emitted_us = boundary_us
                return self.loop_start + timedelta(microseconds=boundary_us)
