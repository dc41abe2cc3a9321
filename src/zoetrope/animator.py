"""Animator that decides which frame to show at a wall-clock instant."""

from datetime import datetime, timedelta
from itertools import takewhile
from typing import Iterator

from .clock import elapsed_seconds, floor_to_tenth_of_second, utc_now
from .constants import EPOCH
from .timing.base import FrameTiming


class FrameAnimator:
    """Maps wall-clock instants to frame indices for one animated artifact."""

    def __init__(
        self,
        timing: FrameTiming,
        start: datetime = EPOCH,
        paused: bool = False,
        stopped: bool = False,
        loops: int | None = None,
    ):
        """
        Initialize animator.

        Args:
            timing: When each frame should be shown
            start: Instant the first loop began; animators sharing timing and start play in sync
            paused: Whether frame-change wake-ups should stop
            stopped: Whether to show only the first frame
            loops: How many loops to play before freezing on the last frame, None to loop forever
        """
        self.timing = timing
        self.start = start
        self.paused = paused
        self.stopped = stopped
        self.loops = loops

    @classmethod
    def starting_now(
        cls,
        timing: FrameTiming,
        now: datetime | None = None,
        paused: bool = False,
        loops: int | None = None,
    ) -> "FrameAnimator":
        """Create an animator anchored at the start of the current tenth of a second."""
        start = floor_to_tenth_of_second(now or utc_now())
        return cls(timing, start=start, paused=paused, loops=loops)

    @property
    def can_animate(self) -> bool:
        return self.timing.can_animate

    @property
    def loop_end(self) -> datetime | None:
        """Instant the final loop ends, if the loop count is limited."""
        if self.loops is None:
            return None
        return self.start + timedelta(seconds=self.timing.duration * self.loops)

    def has_reached_loop_limit(self, at: datetime) -> bool:
        loop_end = self.loop_end
        return loop_end is not None and at >= loop_end

    def frame_index(self, at: datetime) -> int:
        """Return the frame to show at the given instant; frame 0 until the first loop begins."""
        if not self.can_animate or self.stopped or at < self.start:
            return 0
        if self.has_reached_loop_limit(at):
            return self.timing.frame_count - 1
        return self.timing.frame_index(elapsed_seconds(self.start, at))

    def is_idle(self, at: datetime) -> bool:
        """Whether no further frame changes will be requested from ``at`` on."""
        return (
            not self.can_animate
            or self.paused
            or self.stopped
            or self.has_reached_loop_limit(at)
        )

    def schedule(self, now: datetime) -> Iterator[datetime]:
        """
        Yield the instants after ``now`` at which the shown frame changes.

        Empty when the animation is idle. Before ``start`` the first frame is
        held, so the first entry is the first change of the first loop. With a
        loop limit the schedule ends once the last frame of the final loop is
        showing.
        """
        schedule = self.timing.schedule(self.start, paused=self.is_idle(now), start=max(now, self.start))
        loop_end = self.loop_end
        if loop_end is None:
            return schedule
        return takewhile(lambda instant: instant < loop_end, schedule)
