"""Tests for FrameAnimator."""

from datetime import datetime, timedelta, timezone
from itertools import islice

import pytest

from zoetrope import ConstantFrameTiming, FrameAnimator, VariableFrameTiming

ANCHOR = datetime(2024, 1, 1, tzinfo=timezone.utc)


def at(seconds: float) -> datetime:
    return ANCHOR + timedelta(seconds=seconds)


class TestFrameAnimator:
    """Tests for frame selection and wake-ups driven by wall-clock instants."""

    @pytest.fixture
    def timing(self) -> VariableFrameTiming:
        return VariableFrameTiming([1, 2, 3])

    def test_frame_index_follows_timing(self, timing: VariableFrameTiming) -> None:
        animator = FrameAnimator(timing, start=ANCHOR)

        assert animator.frame_index(at(0.5)) == 0
        assert animator.frame_index(at(2)) == 1
        assert animator.frame_index(at(10)) == 2

    def test_animators_with_same_start_are_in_sync(self, timing: VariableFrameTiming) -> None:
        """Independent animators sharing timing and start show the same frame."""
        first = FrameAnimator(timing, start=ANCHOR)
        second = FrameAnimator(VariableFrameTiming([1, 2, 3]), start=ANCHOR)

        for seconds in (0.0, 0.7, 1.0, 2.5, 3.0, 5.99, 6.0, 1234.5):
            assert first.frame_index(at(seconds)) == second.frame_index(at(seconds))

    def test_default_start_is_unix_epoch(self, timing: VariableFrameTiming) -> None:
        animator = FrameAnimator(timing)

        assert animator.start == datetime(1970, 1, 1, tzinfo=timezone.utc)
        # 2024-01-01 is a whole number of six second loops after the epoch
        assert animator.frame_index(ANCHOR) == 0
        assert animator.frame_index(at(1)) == 1

    def test_schedule_is_rooted_at_start(self, timing: VariableFrameTiming) -> None:
        animator = FrameAnimator(timing, start=ANCHOR)
        schedule = animator.schedule(at(4))

        assert [next(schedule), next(schedule)] == [at(6), at(7)]

    def test_loop_limit_freezes_on_last_frame(self, timing: VariableFrameTiming) -> None:
        animator = FrameAnimator(timing, start=ANCHOR, loops=2)

        assert not animator.has_reached_loop_limit(at(11.9))
        assert animator.has_reached_loop_limit(at(12))
        assert animator.frame_index(at(11.5)) == 2
        assert animator.frame_index(at(12)) == 2
        assert animator.frame_index(at(13)) == 2
        assert animator.frame_index(at(600)) == 2

    def test_loop_limit_ends_schedule(self, timing: VariableFrameTiming) -> None:
        """The schedule stops once the last frame of the final loop is showing."""
        animator = FrameAnimator(timing, start=ANCHOR, loops=2)

        assert list(animator.schedule(ANCHOR)) == [at(1), at(3), at(6), at(7), at(9)]
        assert list(animator.schedule(at(10))) == []
        assert list(animator.schedule(at(12))) == []

    def test_paused_animator_has_no_wake_ups(self, timing: VariableFrameTiming) -> None:
        animator = FrameAnimator(timing, start=ANCHOR, paused=True)

        assert list(animator.schedule(at(1.5))) == []
        assert animator.frame_index(at(1.5)) == 1

    def test_stopped_animator_shows_first_frame(self, timing: VariableFrameTiming) -> None:
        animator = FrameAnimator(timing, start=ANCHOR, stopped=True)

        assert animator.frame_index(at(4)) == 0
        assert list(animator.schedule(at(4))) == []


@pytest.mark.parametrize(
    "timing",
    [
        ConstantFrameTiming(frame_count=1, duration=3.0),
        ConstantFrameTiming(frame_count=5, duration=0.0),
        VariableFrameTiming([]),
    ],
)
def test_unanimatable_timing_shows_first_frame(timing) -> None:
    animator = FrameAnimator(timing, start=ANCHOR, loops=1)

    assert not animator.can_animate
    assert animator.frame_index(at(7)) == 0
    assert list(animator.schedule(at(7))) == []


def test_constant_timing_loop_limit() -> None:
    animator = FrameAnimator(ConstantFrameTiming(frame_count=4, duration=2.0), start=ANCHOR, loops=1)

    assert list(animator.schedule(ANCHOR)) == [at(0.5), at(1.0), at(1.5)]
    assert animator.frame_index(at(2.0)) == 3


@pytest.mark.parametrize("microseconds", [100_000, 140_000, 150_001, 199_999])
def test_starting_now_snaps_down_to_tenth_of_second(microseconds: int) -> None:
    """Anchors taken from "now" are shared by animators created within the same tenth."""
    timing = ConstantFrameTiming(frame_count=10, duration=1.0)
    now = ANCHOR + timedelta(microseconds=microseconds)

    animator = FrameAnimator.starting_now(timing, now=now, loops=3)

    assert animator.start == ANCHOR + timedelta(microseconds=100_000)
    assert animator.loops == 3
    assert animator.frame_index(now) == 0
    assert next(iter(animator.schedule(now))) == ANCHOR + timedelta(microseconds=200_000)


def test_first_frame_is_held_until_start() -> None:
    """An animator whose first loop has not begun shows frame 0 and wakes at its first change."""
    animator = FrameAnimator(VariableFrameTiming([1, 2, 3]), start=ANCHOR)

    assert animator.frame_index(at(-0.5)) == 0
    assert animator.frame_index(at(-4)) == 0
    assert list(islice(animator.schedule(at(-4)), 2)) == [at(1), at(3)]
