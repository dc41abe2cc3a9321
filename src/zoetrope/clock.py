"""Wall-clock helpers shared by timings, animators, and playback."""

from datetime import datetime, timedelta, timezone

from .constants import EPOCH, MICROSECONDS_PER_SECOND, START_ROUNDING_STEPS_PER_SECOND

ONE_MICROSECOND = timedelta(microseconds=1)


def utc_now() -> datetime:
    """Return the current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def elapsed_seconds(since: datetime, until: datetime) -> float:
    """Seconds from ``since`` to ``until``; negative when ``until`` is earlier."""
    return (until - since).total_seconds()


def elapsed_microseconds(since: datetime, until: datetime) -> int:
    """Exact whole microseconds from ``since`` to ``until``."""
    return (until - since) // ONE_MICROSECOND


def floor_to_tenth_of_second(instant: datetime) -> datetime:
    """Snap an instant down to the start of its tenth of a Unix second."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    step = MICROSECONDS_PER_SECOND // START_ROUNDING_STEPS_PER_SECOND
    since_epoch = elapsed_microseconds(EPOCH, instant)
    snapped = EPOCH + timedelta(microseconds=since_epoch - since_epoch % step)
    return snapped.astimezone(instant.tzinfo)
