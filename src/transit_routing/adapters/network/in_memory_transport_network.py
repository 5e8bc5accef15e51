"""In-memory transport network adapter."""

import logging
from collections.abc import Iterable

from transit_routing.domain.models.city import City
from transit_routing.domain.models.station import Station
from transit_routing.domain.ports.transport_network import TransportNetwork

logger = logging.getLogger(__name__)


class InMemoryTransportNetwork(TransportNetwork):
    """Adapter holding a ready-built network: a grid of cities and an id -> station map.

    The network is populated once by whoever builds it and is only read by
    searches afterwards.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Initialize an empty grid of the given size."""
        if rows < 1 or cols < 1:
            raise ValueError(f"Network grid must be at least 1x1, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cities: dict[tuple[int, int], City] = {}
        self._stations: dict[str, Station] = {}

    @classmethod
    def from_stations(
        cls, rows: int, cols: int, stations: Iterable[Station]
    ) -> "InMemoryTransportNetwork":
        """Build a network from stations, registering their cities on the way."""
        network = cls(rows, cols)
        for station in stations:
            if network.city_at(station.city.row, station.city.col) is None:
                network.add_city(station.city)
            network.add_station(station)
        return network

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def add_city(self, city: City) -> None:
        """Place a city on the grid.

        Raises:
            ValueError: If the city lies outside the grid.
        """
        if not (0 <= city.row < self._rows and 0 <= city.col < self._cols):
            raise ValueError(
                f"City coordinates ({city.row}, {city.col}) out of bounds for "
                f"{self._rows}x{self._cols} grid"
            )
        self._cities[(city.row, city.col)] = city

    def add_station(self, station: Station) -> None:
        """Register a station.

        Raises:
            ValueError: If a station with the same id is already registered.
        """
        if station.id in self._stations:
            raise ValueError(f"Duplicate station id: {station.id}")
        self._stations[station.id] = station
        logger.debug(
            f"Registered station {station.id} in {station.city.name} "
            f"with {len(station.departures)} departure(s)"
        )

    def station_by_id(self, station_id: str) -> Station | None:
        """Find a station by its identifier."""
        return self._stations.get(station_id)

    def city_at(self, row: int, col: int) -> City | None:
        """Find the city at a grid position; None outside the grid."""
        return self._cities.get((row, col))

    def all_stations(self) -> Iterable[Station]:
        """Enumerate every station of the network."""
        return self._stations.values()

    def stations_in_city(self, city: City) -> list[Station]:
        """Return the stations located in a city."""
        return [station for station in self._stations.values() if station.city.id == city.id]
