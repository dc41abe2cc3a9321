"""Global constants for the application."""

from datetime import datetime, timezone

# Timing precision
MILLISECONDS_PER_SECOND = 1000  # Frame offsets and lookups are quantized to whole milliseconds
MICROSECONDS_PER_SECOND = 1_000_000  # Resolution of datetime instants and constant-rate lookups

# Default loop anchor; consumers sharing it play in sync
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
START_ROUNDING_STEPS_PER_SECOND = 10  # "Now" anchors snap down to tenths of a Unix second

# Frame delay clamping (milliseconds), matching browser handling of legacy GIFs
MINIMUM_UNCLAMPED_FRAME_DELAY_MS = 10  # Delays at or below this are treated as unset
CLAMPED_FRAME_DELAY_MS = 100  # Delay substituted for unset or too-short frames

# CLI defaults
DEFAULT_SCHEDULE_COUNT = 10  # Number of upcoming frame changes to print
START_ENV_VAR = "ZOETROPE_START"
SCHEDULE_COUNT_ENV_VAR = "ZOETROPE_SCHEDULE_COUNT"
