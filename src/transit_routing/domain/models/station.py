"""Station domain model."""

from dataclasses import dataclass, field

from transit_routing.domain.models.city import City
from transit_routing.domain.models.departure import Departure
from transit_routing.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class Station:
    """Represents a bus or rail station and its outgoing departures."""

    id: str
    city: City = field(compare=False)  # Lookup-only back reference
    mode: TransportMode
    departures: tuple[Departure, ...] = field(default=(), compare=False)
