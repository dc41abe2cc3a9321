"""Variable frame rate timing built from per-frame delays."""

import math
from bisect import bisect_right
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable

from ..clock import elapsed_seconds
from ._quantize import round_to_millisecond, to_milliseconds
from .base import FrameSchedule, FrameTiming


class InvalidFrameDelayError(ValueError):
    """Raised when a frame delay is negative or not a finite number."""

    def __init__(self, index: int, delay: float):
        super().__init__(f"Frame {index} has invalid delay {delay!r}; delays must be finite and >= 0")
        self.index = index
        self.delay = delay


@dataclass(frozen=True, init=False)
class VariableFrameTiming(FrameTiming):
    """
    Frames played back with an individual display time for each frame.

    Offsets and the loop duration are rounded to whole milliseconds when the
    timing is built, and lookups compare at the same resolution, so frames at
    loop boundaries are chosen the same way on every platform.
    """

    frame_offsets: tuple[float, ...]
    duration: float
    _offsets_ms: tuple[int, ...] = field(repr=False, compare=False)
    _visible_frame_count: int = field(repr=False, compare=False)

    def __init__(self, frame_delays: Iterable[float]):
        """
        Build frame offsets from the delays of each frame in display order.

        Args:
            frame_delays: Seconds each frame is shown for

        Raises:
            InvalidFrameDelayError: If a delay is negative or not finite
        """
        offsets: list[float] = []
        frame_time = 0.0
        for index, delay in enumerate(frame_delays):
            if not math.isfinite(delay) or delay < 0:
                raise InvalidFrameDelayError(index, delay)
            offsets.append(round_to_millisecond(frame_time))
            frame_time += delay

        object.__setattr__(self, "frame_offsets", tuple(offsets))
        object.__setattr__(self, "duration", round_to_millisecond(frame_time))
        offsets_ms = tuple(to_milliseconds(offset) for offset in offsets)
        object.__setattr__(self, "_offsets_ms", offsets_ms)
        # Frames sharing an offset show only the last of them; frames starting at the loop end never show
        visible = {offset for offset in offsets_ms if offset < to_milliseconds(self.duration)}
        object.__setattr__(self, "_visible_frame_count", len(visible))

    @property
    def frame_count(self) -> int:
        return len(self.frame_offsets)

    @property
    def can_animate(self) -> bool:
        """Whether at least two frames get a millisecond or more of display time."""
        return self._visible_frame_count > 1

    @property
    def duration_ms(self) -> int:
        """Loop duration in whole milliseconds."""
        return to_milliseconds(self.duration)

    @property
    def frame_delays(self) -> tuple[float, ...]:
        """Display time of each frame after millisecond rounding."""
        ends = self.frame_offsets[1:] + (self.duration,)
        return tuple(
            round_to_millisecond(end - offset) for offset, end in zip(self.frame_offsets, ends)
        )

    def frame_index(self, elapsed_time: float) -> int:
        """
        Return the frame whose offset is the last one at or before ``elapsed_time``.

        Elapsed time and duration are rounded to whole milliseconds before
        wrapping, matching how the offsets were built.
        """
        if not self.can_animate:
            return 0
        elapsed_within_loop_ms = to_milliseconds(elapsed_time) % self.duration_ms
        return self._frame_index_ms(elapsed_within_loop_ms)

    def _frame_index_ms(self, elapsed_within_loop_ms: int) -> int:
        if elapsed_within_loop_ms >= self.duration_ms:
            return 0
        return max(bisect_right(self._offsets_ms, elapsed_within_loop_ms) - 1, 0)

    def schedule(
        self,
        loop_start: datetime,
        paused: bool = False,
        start: datetime | None = None,
    ) -> "VariableFrameSchedule":
        return VariableFrameSchedule(self, loop_start, paused=paused, start=start)


class VariableFrameSchedule(FrameSchedule):
    """
    Steps through frame offsets one frame at a time, wrapping at loop ends.

    The cursor is the current loop's start (milliseconds after the anchor)
    and the index of the frame currently shown. It is rebuilt from elapsed
    time, so a schedule first polled mid-loop resumes on the right frame.
    """

    timing: VariableFrameTiming

    def __init__(
        self,
        timing: VariableFrameTiming,
        loop_start: datetime,
        paused: bool = False,
        start: datetime | None = None,
    ):
        super().__init__(timing, loop_start, paused)
        self._loop_start_ms = 0
        self._frame_index = 0
        self._last_emitted_ms: int | None = None
        if self._exhausted:
            return

        start = loop_start if start is None else start
        elapsed_ms = to_milliseconds(elapsed_seconds(loop_start, start))
        loops_completed = elapsed_ms // timing.duration_ms
        self._loop_start_ms = loops_completed * timing.duration_ms
        self._frame_index = timing._frame_index_ms(elapsed_ms - self._loop_start_ms)
        self._last_emitted_ms = elapsed_ms

    def _advance(self) -> datetime:
        while True:
            offset_ms = self._step()
            # Zero-length frames share an instant with the frame after them
            if self._last_emitted_ms is None or offset_ms > self._last_emitted_ms:
                self._last_emitted_ms = offset_ms
                return self.loop_start + timedelta(milliseconds=offset_ms)

    def _step(self) -> int:
        if self._frame_index >= self.timing.frame_count - 1:
            self._loop_start_ms += self.timing.duration_ms
            self._frame_index = 0
            return self._loop_start_ms
        self._frame_index += 1
        return self._loop_start_ms + self.timing._offsets_ms[self._frame_index]
