# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""Wall-clock sampling in the reference epoch domain."""

import time

from .datetime import EPOCH_DELTA_SECONDS

_NANOSECONDS_PER_SECOND = 1_000_000_000
_NANOSECONDS_PER_MICROSECOND = 1_000
_MICROSECONDS_PER_SECOND = 1_000_000.0


def _read_wall_clock() -> tuple[int, int]:
    """Read the wall clock.

    Returns:
        The whole seconds and the microseconds elapsed since the UNIX epoch.
    """
    seconds, nanoseconds = divmod(time.time_ns(), _NANOSECONDS_PER_SECOND)
    return seconds, nanoseconds // _NANOSECONDS_PER_MICROSECOND


def seconds_since_reference_date() -> float:
    """Return the seconds elapsed between the reference epoch and now.

    The whole seconds are moved to the reference epoch before the fraction is
    added, so the result keeps microsecond precision.

    Returns:
        The current time as an offset from the reference epoch.
    """
    seconds, microseconds = _read_wall_clock()
    return (seconds - EPOCH_DELTA_SECONDS) + microseconds / _MICROSECONDS_PER_SECOND
