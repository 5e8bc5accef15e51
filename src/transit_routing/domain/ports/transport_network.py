"""Transport network port."""

from collections.abc import Iterable
from typing import Protocol

from transit_routing.domain.models.city import City
from transit_routing.domain.models.station import Station


class TransportNetwork(Protocol):
    """Port for reading an already built transport network.

    The network is read-only while a search runs.
    """

    def station_by_id(self, station_id: str) -> Station | None:
        """Find a station by its identifier."""
        ...

    def city_at(self, row: int, col: int) -> City | None:
        """Find the city at a grid position."""
        ...

    def all_stations(self) -> Iterable[Station]:
        """Enumerate every station of the network."""
        ...
