"""Tests for time-of-day arithmetic."""

from datetime import time, timedelta

from transit_routing.domain.models.schedule_time import (
    cyclic_gap,
    format_duration,
    is_departure_feasible,
    next_occurrence,
    time_of_day_offset,
)


def test_time_of_day_offset() -> None:
    """Given a time of day, when converting, then the offset from midnight is returned."""
    assert time_of_day_offset(time(7, 45, 30)) == timedelta(hours=7, minutes=45, seconds=30)


def test_cyclic_gap_across_midnight_is_never_negative() -> None:
    """Given an arrival at 23:50 and a departure at 00:10, when computing the wait, then it is 20 minutes."""
    assert cyclic_gap(time(23, 50), time(0, 10)) == timedelta(minutes=20)


def test_cyclic_gap_same_day() -> None:
    """Given two times on the same day, when computing the gap, then it is their difference."""
    assert cyclic_gap(time(8, 0), time(9, 15)) == timedelta(hours=1, minutes=15)
    assert cyclic_gap(time(8, 0), time(8, 0)) == timedelta(0)


def test_next_occurrence_same_day() -> None:
    """Given a departure later in the day, when placing it, then it stays on the same day."""
    assert next_occurrence(time(6, 0), timedelta(hours=5, minutes=30)) == timedelta(hours=6)


def test_next_occurrence_moves_earlier_time_to_next_day() -> None:
    """Given a departure numerically earlier than the ready time, when placing it, then it is 24h later."""
    assert next_occurrence(time(6, 0), timedelta(hours=7)) == timedelta(hours=30)


def test_next_occurrence_after_ready_time_crossed_midnight() -> None:
    """Given a ready time already past midnight, when placing a late departure, then it is on the following evening."""
    ready = timedelta(hours=24, minutes=5)

    assert next_occurrence(time(0, 10), ready) == timedelta(hours=24, minutes=10)
    assert next_occurrence(time(23, 55), ready) == timedelta(hours=47, minutes=55)


def test_departure_infeasible_when_it_falls_outside_the_day_window() -> None:
    """Given ready at 07:00 and a window ending 05:00 next day, when checking 06:00, then it is infeasible."""
    window_end = timedelta(hours=29)

    assert not is_departure_feasible(time(6, 0), timedelta(hours=7), window_end)


def test_departure_feasible_when_ready_before_it() -> None:
    """Given ready at 05:30, when checking a 06:00 departure, then it is feasible."""
    window_end = timedelta(hours=29)

    assert is_departure_feasible(time(6, 0), timedelta(hours=5, minutes=30), window_end)


def test_departure_without_window_is_always_catchable_eventually() -> None:
    """Given no window, when checking an earlier departure, then tomorrow's run is feasible."""
    assert is_departure_feasible(time(6, 0), timedelta(hours=7))


def test_departure_exactly_at_ready_time_is_feasible() -> None:
    """Given a departure exactly at the ready time, when checking, then it is feasible."""
    assert is_departure_feasible(time(8, 15), timedelta(hours=8, minutes=15), timedelta(hours=9))


def test_format_duration() -> None:
    """Given a duration, when formatting, then hours and minutes are shown."""
    assert format_duration(timedelta(hours=2, minutes=5)) == "2h 5min"
    assert format_duration(timedelta(0)) == "0h 0min"
