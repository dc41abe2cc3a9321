"""Base interfaces for frame timings and their frame-change schedules."""

from abc import ABC, abstractmethod
from datetime import datetime
from itertools import islice
from typing import Iterator


class FrameTiming(ABC):
    """
    Abstract base class for frame timing strategies.

    A timing is an immutable value describing one loop of an animation.
    Subclasses expose ``duration`` (seconds per loop) and ``frame_count``.
    Instances are safe to share between consumers; schedules are not.
    """

    duration: float
    frame_count: int

    @property
    def can_animate(self) -> bool:
        """Whether there is more than one frame and time to show them in."""
        return self.duration > 0 and self.frame_count > 1

    @abstractmethod
    def frame_index(self, elapsed_time: float) -> int:
        """
        Return the frame to display after ``elapsed_time`` seconds.

        Args:
            elapsed_time: Seconds since the loop anchor, wrapped modulo ``duration``

        Returns:
            Index of the visible frame, ``0`` when the timing cannot animate
        """
        raise NotImplementedError

    @abstractmethod
    def schedule(
        self,
        loop_start: datetime,
        paused: bool = False,
        start: datetime | None = None,
    ) -> "FrameSchedule":
        """
        Create a lazy schedule of the instants at which the visible frame changes.

        Args:
            loop_start: Anchor instant at which frame 0 of the first loop begins
            paused: If True, the schedule is empty
            start: Instant polling begins from; defaults to ``loop_start``

        Returns:
            A fresh iterator of frame-change instants strictly after ``start``
        """
        raise NotImplementedError


class FrameSchedule(ABC):
    """Pull-based iterator of frame-change instants with its own cursor."""

    def __init__(self, timing: FrameTiming, loop_start: datetime, paused: bool = False):
        self.timing = timing
        self.loop_start = loop_start
        self.paused = paused
        self._exhausted = paused or not timing.can_animate

    def __iter__(self) -> Iterator[datetime]:
        return self

    def __next__(self) -> datetime:
        if self._exhausted:
            raise StopIteration
        return self._advance()

    @abstractmethod
    def _advance(self) -> datetime:
        """Move the cursor to the next frame change and return its instant."""
        raise NotImplementedError

    def take(self, count: int) -> list[datetime]:
        """Return up to ``count`` upcoming instants, advancing the cursor."""
        return list(islice(self, count))
