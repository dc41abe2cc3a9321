"""Polling playback loop that wakes up only when the shown frame changes."""

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterator

from .animator import FrameAnimator
from .clock import elapsed_seconds, utc_now


@dataclass(frozen=True)
class PlaybackFrame:
    """A frame index together with the instant it was sampled at."""

    instant: datetime
    frame_index: int


def iter_playback(
    animator: FrameAnimator,
    clock: Callable[[], datetime] = utc_now,
    sleep: Callable[[float], None] = time.sleep,
    max_updates: int | None = None,
) -> Iterator[PlaybackFrame]:
    """
    Yield the frame to show now, then again each time it changes.

    Stops when the animator has no further frame changes or after
    ``max_updates`` frames. Stop iterating to cancel playback.

    Args:
        animator: The animator to sample
        clock: Source of the current instant
        sleep: Blocks for the given number of seconds
        max_updates: Maximum number of frames to yield, None for no limit
    """
    if max_updates is not None and max_updates <= 0:
        return

    now = clock()
    yielded = 0
    yield PlaybackFrame(now, animator.frame_index(now))
    yielded += 1

    for wake_at in animator.schedule(now):
        if max_updates is not None and yielded >= max_updates:
            break
        delay = elapsed_seconds(clock(), wake_at)
        if delay > 0:
            sleep(delay)
        yield PlaybackFrame(wake_at, animator.frame_index(wake_at))
        yielded += 1
