"""Tests for itinerary aggregate maintenance."""

from datetime import time, timedelta

import pytest

from transit_routing.domain.models import (
    City,
    Departure,
    Itinerary,
    Segment,
    Station,
    TransportMode,
)


def make_segment(
    origin_id: str,
    destination_id: str,
    departs: str,
    arrives: str,
    fare: float,
    mode: TransportMode = TransportMode.BUS,
) -> Segment:
    """Create a segment between two stations, each in its own city."""
    departure_time = time.fromisoformat(departs)
    arrival_time = time.fromisoformat(arrives)
    departure = Departure(
        mode=mode,
        origin_id=origin_id,
        destination_id=destination_id,
        departure_time=departure_time,
        arrival_time=arrival_time,
        fare=fare,
    )
    origin = Station(id=origin_id, city=City(id=hash(origin_id), row=0, col=0), mode=mode)
    destination = Station(
        id=destination_id, city=City(id=hash(destination_id), row=0, col=1), mode=mode
    )
    return Segment.from_departure(departure, origin, destination)


def test_empty_itinerary_has_zero_aggregates() -> None:
    """Given a new itinerary, when reading aggregates, then everything is zero or absent."""
    itinerary = Itinerary()

    assert itinerary.is_empty
    assert len(itinerary) == 0
    assert itinerary.total_fare == 0.0
    assert itinerary.transfers == 0
    assert itinerary.total_duration == timedelta(0)
    assert itinerary.start_time is None
    assert itinerary.end_time is None
    assert itinerary.last_station is None
    assert itinerary.route_key() == ()


def test_first_segment_sets_start_and_duration() -> None:
    """Given an empty itinerary, when appending a segment, then start, end and duration come from it."""
    itinerary = Itinerary()

    itinerary.append(make_segment("A", "B", "08:00", "09:30", 12.0))

    assert itinerary.start_time == time(8, 0)
    assert itinerary.end_time == time(9, 30)
    assert itinerary.total_duration == timedelta(hours=1, minutes=30)
    assert itinerary.total_fare == 12.0
    assert itinerary.transfers == 0
    assert itinerary.last_station is not None
    assert itinerary.last_station.id == "B"


def test_following_segments_add_waiting_time_and_transfers() -> None:
    """Given two segments, when appended, then waiting time and one transfer are accounted for."""
    itinerary = Itinerary()

    itinerary.append(make_segment("A", "B", "08:00", "09:00", 5.0))
    itinerary.append(make_segment("B", "C", "09:30", "10:00", 2.5))

    assert itinerary.transfers == 1
    assert itinerary.total_fare == pytest.approx(7.5)
    assert itinerary.total_duration == timedelta(hours=2)
    assert itinerary.start_time == time(8, 0)
    assert itinerary.end_time == time(10, 0)


def test_waiting_across_midnight_is_twenty_minutes() -> None:
    """Given an arrival at 23:50 and a 00:10 departure, when appended, then the wait is 20 minutes."""
    itinerary = Itinerary()

    itinerary.append(make_segment("A", "B", "23:00", "23:50", 1.0))
    itinerary.append(make_segment("B", "C", "00:10", "00:40", 1.0))

    assert itinerary.total_duration == timedelta(minutes=50 + 20 + 30)


def test_overnight_segment_duration_is_corrected() -> None:
    """Given a segment arriving after midnight, when appended first, then its duration is positive."""
    itinerary = Itinerary()

    itinerary.append(make_segment("A", "B", "23:30", "01:00", 1.0))

    assert itinerary.total_duration == timedelta(hours=1, minutes=30)


def test_incremental_and_bulk_construction_agree() -> None:
    """Given the same segments, when built one by one or in bulk, then aggregates are identical."""
    segments = [
        make_segment("A", "B", "06:10", "07:00", 3.2),
        make_segment("B", "C", "07:20", "08:05", 4.1),
        make_segment("C", "D", "23:55", "00:35", 7.7),
    ]
    incremental = Itinerary()
    for segment in segments:
        incremental.append(segment)

    prefix = Itinerary.from_segments(segments[:2]).copy()
    prefix.append(segments[2])

    for other in (Itinerary.from_segments(segments), prefix):
        assert other.segments == incremental.segments
        assert other.total_fare == incremental.total_fare
        assert other.transfers == incremental.transfers
        assert other.total_duration == incremental.total_duration
        assert other.start_time == incremental.start_time
        assert other.end_time == incremental.end_time


def test_copy_does_not_share_state() -> None:
    """Given a copied itinerary, when appending to the copy, then the original is unchanged."""
    original = Itinerary.from_segments([make_segment("A", "B", "08:00", "09:00", 5.0)])

    clone = original.copy()
    clone.append(make_segment("B", "C", "09:30", "10:00", 2.0))

    assert len(original) == 1
    assert original.total_fare == 5.0
    assert original.transfers == 0
    assert original.end_time == time(9, 0)
    assert len(clone) == 2


def test_route_key_uses_departure_stations() -> None:
    """Given segments, when reading the route key, then it lists departure station ids in order."""
    itinerary = Itinerary.from_segments(
        [
            make_segment("A", "B", "08:00", "09:00", 5.0),
            make_segment("B", "C", "09:30", "10:00", 2.0),
        ]
    )

    assert itinerary.route_key() == ("A", "B")


def test_same_route_ignores_timing() -> None:
    """Given two itineraries over the same stations at different times, when compared, then they share a route."""
    morning = Itinerary.from_segments([make_segment("A", "B", "08:00", "09:00", 5.0)])
    evening = Itinerary.from_segments([make_segment("A", "B", "18:00", "19:30", 6.0)])
    elsewhere = Itinerary.from_segments([make_segment("X", "B", "08:00", "09:00", 5.0)])

    assert morning.same_route_as(evening)
    assert not morning.same_route_as(elsewhere)


def test_string_summary_lists_segments() -> None:
    """Given an itinerary, when rendered as text, then the summary and each segment are shown."""
    itinerary = Itinerary.from_segments(
        [
            make_segment("A", "B", "08:00", "09:00", 5.0),
            make_segment("B", "C", "09:30", "10:00", 2.0, mode=TransportMode.RAIL),
        ]
    )

    text = str(itinerary)

    assert text.startswith("Total time: 2h 0min, total fare: 7.00, transfers: 1")
    assert len(text.splitlines()) == 3
    assert "Rail" in text.splitlines()[2]


def test_format_duration_renders_hours_and_minutes() -> None:
    """Given an itinerary lasting 2h 5min, when formatting its duration, then hours and minutes are shown."""
    itinerary = Itinerary.from_segments(
        [
            make_segment("A", "B", "23:00", "00:30", 5.0),
            make_segment("B", "C", "00:45", "01:05", 2.0),
        ]
    )

    assert itinerary.format_duration() == "2h 5min"
