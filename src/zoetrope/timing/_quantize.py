"""Integer quantization of seconds shared by the timings and their schedules."""

import math

from ..constants import MICROSECONDS_PER_SECOND, MILLISECONDS_PER_SECOND


def _round_half_away_from_zero(scaled: float) -> int:
    if scaled >= 0:
        return math.floor(scaled + 0.5)
    return -math.floor(-scaled + 0.5)


def to_milliseconds(seconds: float) -> int:
    """Round seconds to whole milliseconds, halves away from zero."""
    return _round_half_away_from_zero(seconds * MILLISECONDS_PER_SECOND)


def to_microseconds(seconds: float) -> int:
    """Round seconds to whole microseconds, halves away from zero."""
    return _round_half_away_from_zero(seconds * MICROSECONDS_PER_SECOND)


def round_to_millisecond(seconds: float) -> float:
    """Round seconds to the nearest millisecond, keeping seconds as the unit."""
    return to_milliseconds(seconds) / MILLISECONDS_PER_SECOND
