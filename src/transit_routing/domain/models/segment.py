"""Segment domain model."""

from dataclasses import dataclass
from datetime import time, timedelta

from transit_routing.domain.models.departure import Departure
from transit_routing.domain.models.schedule_time import cyclic_gap
from transit_routing.domain.models.station import Station
from transit_routing.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class Segment:
    """A departure taken as part of an itinerary, bound to concrete stations and times."""

    departure: Departure
    origin: Station
    destination: Station
    departure_time: time
    arrival_time: time

    @classmethod
    def from_departure(
        cls, departure: Departure, origin: Station, destination: Station
    ) -> "Segment":
        """Bind a departure using its scheduled times."""
        return cls(
            departure=departure,
            origin=origin,
            destination=destination,
            departure_time=departure.departure_time,
            arrival_time=departure.arrival_time,
        )

    @property
    def duration(self) -> timedelta:
        """Time on board; an arrival earlier in the day than the departure is an overnight run."""
        return cyclic_gap(self.departure_time, self.arrival_time)

    @property
    def mode(self) -> TransportMode:
        return self.departure.mode

    @property
    def fare(self) -> float:
        return self.departure.fare

    @property
    def origin_city_name(self) -> str:
        return self.origin.city.name

    @property
    def destination_city_name(self) -> str:
        return self.destination.city.name

    def __str__(self) -> str:
        return (
            f"{self.mode.display_name}: {self.origin_city_name} ({self.origin.id}) -> "
            f"{self.destination_city_name} ({self.destination.id}) | "
            f"{self.departure_time:%H:%M}-{self.arrival_time:%H:%M}, fare {self.fare:.2f}"
        )
