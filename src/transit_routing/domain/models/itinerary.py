"""Itinerary domain model."""

from collections.abc import Iterable, Iterator
from datetime import time, timedelta

from transit_routing.domain.models.schedule_time import cyclic_gap, format_duration
from transit_routing.domain.models.segment import Segment
from transit_routing.domain.models.station import Station


class Itinerary:
    """An ordered sequence of segments with incrementally maintained aggregates.

    Aggregates are updated on every append rather than recomputed:

    - total fare is the sum of segment fares,
    - transfers is the number of segments after the first,
    - total duration is the sum of segment durations plus, for every segment
      after the first, the waiting time since the previous arrival, folded
      into ``[0, 24h)`` so an arrival at 23:50 followed by a 00:10 departure
      waits twenty minutes.

    The caller is responsible for appending only segments that start where
    the itinerary currently ends.
    """

    def __init__(self) -> None:
        """Create an empty itinerary."""
        self._segments: list[Segment] = []
        self._start_time: time | None = None
        self._end_time: time | None = None
        self._total_fare = 0.0
        self._transfers = 0
        self._total_duration = timedelta(0)

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> "Itinerary":
        """Build an itinerary by appending the given segments in order."""
        itinerary = cls()
        for segment in segments:
            itinerary.append(segment)
        return itinerary

    def append(self, segment: Segment) -> None:
        """Append a segment and update the aggregates."""
        if not self._segments:
            self._start_time = segment.departure_time
            self._total_duration = segment.duration
            self._transfers = 0
        else:
            assert self._end_time is not None
            waiting = cyclic_gap(self._end_time, segment.departure_time)
            self._total_duration += waiting + segment.duration
            self._transfers += 1

        self._segments.append(segment)
        self._end_time = segment.arrival_time
        self._total_fare += segment.fare

    def copy(self) -> "Itinerary":
        """Return an independent copy; appending to it leaves this itinerary untouched."""
        clone = Itinerary()
        clone._segments = list(self._segments)
        clone._start_time = self._start_time
        clone._end_time = self._end_time
        clone._total_fare = self._total_fare
        clone._transfers = self._transfers
        clone._total_duration = self._total_duration
        return clone

    __copy__ = copy

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    @property
    def start_time(self) -> time | None:
        """Departure time of the first segment, None while empty."""
        return self._start_time

    @property
    def end_time(self) -> time | None:
        """Arrival time of the last segment, None while empty."""
        return self._end_time

    @property
    def total_fare(self) -> float:
        return self._total_fare

    @property
    def transfers(self) -> int:
        return self._transfers

    @property
    def total_duration(self) -> timedelta:
        return self._total_duration

    @property
    def is_empty(self) -> bool:
        return not self._segments

    @property
    def last_station(self) -> Station | None:
        """Station the itinerary currently ends at, None while empty."""
        if not self._segments:
            return None
        return self._segments[-1].destination

    def route_key(self) -> tuple[str, ...]:
        """Ordered departure-station ids; identifies the physical route regardless of timing."""
        return tuple(segment.origin.id for segment in self._segments)

    def same_route_as(self, other: "Itinerary") -> bool:
        """Check whether both itineraries follow the same physical route."""
        return self.route_key() == other.route_key()

    def format_duration(self) -> str:
        return format_duration(self._total_duration)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __str__(self) -> str:
        lines = [
            f"Total time: {self.format_duration()}, total fare: {self._total_fare:.2f}, "
            f"transfers: {self._transfers}"
        ]
        lines.extend(f"  {segment}" for segment in self._segments)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Itinerary(route={list(self.route_key())}, duration={self._total_duration}, "
            f"fare={self._total_fare:.2f}, transfers={self._transfers})"
        )
