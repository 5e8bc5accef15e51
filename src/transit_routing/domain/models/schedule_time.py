"""Time-of-day arithmetic for scheduled departures.

Schedules only know times of day. The search works with absolute offsets
measured from the start of the day the search begins on, so that a
departure taken after midnight can be told apart from one taken earlier
the same day.
"""

from datetime import time, timedelta

ONE_DAY = timedelta(days=1)


def time_of_day_offset(value: time) -> timedelta:
    """Return the offset of a time of day from midnight."""
    return timedelta(
        hours=value.hour,
        minutes=value.minute,
        seconds=value.second,
        microseconds=value.microsecond,
    )


def cyclic_gap(start: time, end: time) -> timedelta:
    """Return the time from ``start`` until the next ``end``, in ``[0, 24h)``.

    An ``end`` numerically earlier than ``start`` is taken to be on the
    following day, so 23:50 -> 00:10 is twenty minutes, never negative.
    """
    gap = time_of_day_offset(end) - time_of_day_offset(start)
    if gap < timedelta(0):
        gap += ONE_DAY
    return gap


def next_occurrence(scheduled: time, earliest: timedelta) -> timedelta:
    """Return the absolute offset of the first ``scheduled`` at or after ``earliest``.

    The departure is placed on the same day as ``earliest``; if its time of
    day is numerically earlier than ``earliest``'s, it is moved 24h later.
    """
    day_start = ONE_DAY * (earliest // ONE_DAY)
    candidate = day_start + time_of_day_offset(scheduled)
    if candidate < earliest:
        candidate += ONE_DAY
    return candidate


def is_departure_feasible(
    scheduled: time, earliest_ready: timedelta, window_end: timedelta | None = None
) -> bool:
    """Check whether a scheduled departure can still be caught.

    Args:
        scheduled: Scheduled departure time of day.
        earliest_ready: Absolute offset at which the traveller is ready to board.
        window_end: Exclusive absolute offset the departure must happen before.
            ``None`` means no upper bound.

    Returns:
        True if the next occurrence of the departure at or after
        ``earliest_ready`` falls before ``window_end``.
    """
    departs_at = next_occurrence(scheduled, earliest_ready)
    return window_end is None or departs_at < window_end


def format_duration(duration: timedelta) -> str:
    """Format a duration as '<hours>h <minutes>min'."""
    total_minutes = int(duration.total_seconds()) // 60
    return f"{total_minutes // 60}h {total_minutes % 60}min"
