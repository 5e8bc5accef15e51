"""Search frontier label domain model."""

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta

from transit_routing.domain.models.criterion import Criterion, SortKey
from transit_routing.domain.models.itinerary import Itinerary
from transit_routing.domain.models.schedule_time import ONE_DAY
from transit_routing.domain.models.station import Station


@dataclass(eq=False)
class Label:
    """A partial itinerary ending at a station, as held in the search frontier.

    Two labels are the same entry when they refer to the same station. This
    is frontier bookkeeping only; itineraries are compared by route with
    ``Itinerary.same_route_as``.
    """

    station: Station
    itinerary: Itinerary = field(repr=False)
    arrival: timedelta  # Offset from the start of the day the search begins on
    criterion: Criterion

    @property
    def arrival_time(self) -> time:
        """Arrival as a time of day."""
        return (datetime.min + self.arrival % ONE_DAY).time()

    def sort_key(self) -> SortKey:
        return self.criterion.sort_key(self.itinerary)

    def __lt__(self, other: "Label") -> bool:
        return self.sort_key() < other.sort_key()  # type: ignore[operator]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self.station.id == other.station.id

    def __hash__(self) -> int:
        return hash(self.station.id)
