"""Departure domain model."""

from dataclasses import dataclass
from datetime import time, timedelta

from transit_routing.domain.models.schedule_time import cyclic_gap
from transit_routing.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class Departure:
    """Represents a scheduled departure between two stations (an edge template)."""

    mode: TransportMode
    origin_id: str
    destination_id: str
    departure_time: time
    arrival_time: time
    fare: float
    min_transfer_time: timedelta = timedelta(0)  # Carried from the timetable, informational

    @property
    def duration(self) -> timedelta:
        """Scheduled running time, corrected for runs past midnight."""
        return cyclic_gap(self.departure_time, self.arrival_time)
