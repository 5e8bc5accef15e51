"""Route search service."""

import heapq
import logging
from collections.abc import Callable, Iterator
from datetime import timedelta

from transit_routing.application.services.itinerary_bound import ItineraryBound
from transit_routing.application.services.route_ranking import rank_itineraries
from transit_routing.domain.contracts.integrity_reporter import IntegrityIssueReporterProtocol
from transit_routing.domain.models.city import City
from transit_routing.domain.models.criterion import Criterion
from transit_routing.domain.models.departure import Departure
from transit_routing.domain.models.integrity_issue import DataIntegrityIssue
from transit_routing.domain.models.itinerary import Itinerary
from transit_routing.domain.models.label import Label
from transit_routing.domain.models.schedule_time import (
    ONE_DAY,
    is_departure_feasible,
    next_occurrence,
)
from transit_routing.domain.models.search_settings import SearchSettings
from transit_routing.domain.models.segment import Segment
from transit_routing.domain.models.station import Station
from transit_routing.domain.ports.transport_network import TransportNetwork

logger = logging.getLogger(__name__)

START_OF_DAY = timedelta(0)


class RouteFinder:
    """Service for finding itineraries between two cities of a transport network.

    Runs a label-setting search ordered by the selected criterion. In
    single-best mode each station retains one itinerary and the first label
    popped in the destination city is optimal. In top-N mode each station
    retains a bounded number of itineraries, every label reaching the
    destination city is collected, and the results are ranked and
    deduplicated by physical route afterwards.
    """

    def __init__(
        self,
        network: TransportNetwork,
        settings: SearchSettings | None = None,
        reporter: IntegrityIssueReporterProtocol | None = None,
    ) -> None:
        """Initialize with a read-only network, search settings and an optional issue reporter."""
        self._network = network
        self._settings = settings or SearchSettings()
        self._reporter = reporter

    def find_best_route(
        self, start_city: City, end_city: City, criterion: str | Criterion
    ) -> Itinerary | None:
        """Find the best itinerary from ``start_city`` to ``end_city``.

        Raises:
            UnknownCriterionError: If ``criterion`` is not time, price or transfers.
        """
        parsed = Criterion.parse(criterion)
        logger.debug(f"Searching best route {start_city.name} -> {end_city.name} by {parsed.value}")

        search = self._new_search(end_city, parsed, capacity=1, result_cap=None)
        results = search.run(self.get_stations_in_city(start_city))
        if not results:
            logger.info(f"No route found from {start_city.name} to {end_city.name}")
            return None
        return results[0]

    def find_top_n_routes(
        self, start_city: City, end_city: City, criterion: str | Criterion, limit: int
    ) -> Iterator[Itinerary]:
        """Find up to ``limit`` itineraries on distinct routes, best first.

        The criterion is validated before the iterator is returned.

        Raises:
            UnknownCriterionError: If ``criterion`` is not time, price or transfers.
        """
        parsed = Criterion.parse(criterion)
        if limit < 1:
            logger.debug(f"Requested {limit} routes, returning none")
            return iter(())

        logger.debug(
            f"Searching top {limit} routes {start_city.name} -> {end_city.name} by {parsed.value}"
        )
        search = self._new_search(
            end_city,
            parsed,
            capacity=self._settings.retention_limit(limit),
            result_cap=self._settings.result_cap(limit),
        )
        collected = search.run(self.get_stations_in_city(start_city))
        ranked = rank_itineraries(collected, parsed, limit)
        logger.debug(f"Collected {len(collected)} itineraries, returning {len(ranked)}")
        return iter(ranked)

    def get_stations_in_city(self, city: City) -> list[Station]:
        """Return all stations located in ``city``."""
        return [station for station in self._network.all_stations() if station.city.id == city.id]

    def _new_search(
        self, end_city: City, criterion: Criterion, capacity: int, result_cap: int | None
    ) -> "_SearchRun":
        return _SearchRun(
            self._network,
            self._settings.transfer_buffer,
            self._report_dangling_departure,
            end_city,
            criterion,
            capacity,
            result_cap,
        )

    def _report_dangling_departure(self, station: Station, departure: Departure) -> None:
        issue = DataIntegrityIssue(
            station_id=station.id,
            destination_id=departure.destination_id,
            reason="departure leads to a station that is not in the network",
        )
        if self._reporter is not None:
            self._reporter.report(issue)
        else:
            logger.warning(
                f"Departure from {issue.station_id} to unknown station "
                f"{issue.destination_id} skipped"
            )


class _SearchRun:
    """State owned by a single search call: frontier, per-station bounds and results."""

    def __init__(
        self,
        network: TransportNetwork,
        transfer_buffer: timedelta,
        report: Callable[[Station, Departure], None],
        end_city: City,
        criterion: Criterion,
        capacity: int,
        result_cap: int | None,
    ) -> None:
        self._network = network
        self._transfer_buffer = transfer_buffer
        self._report = report
        self._end_city = end_city
        self._criterion = criterion
        self._capacity = capacity
        self._result_cap = result_cap
        self._frontier: list[Label] = []
        self._bounds: dict[str, ItineraryBound] = {}
        self._reported: set[tuple[str, str]] = set()

    def run(self, start_stations: list[Station]) -> list[Itinerary]:
        """Seed the frontier and expand until done.

        Returns:
            Itineraries that reached the destination city, in the order found.
        """
        for station in start_stations:
            self._admit(station, Itinerary(), START_OF_DAY)

        results: list[Itinerary] = []
        while self._frontier:
            label = heapq.heappop(self._frontier)
            if not self._bounds[label.station.id].retains(label.itinerary):
                continue  # superseded after it was queued

            if label.station.city.id == self._end_city.id:
                results.append(label.itinerary)
                if self._result_cap is None:
                    break
                if len(results) >= self._result_cap:
                    logger.debug(f"Result cap of {self._result_cap} reached, stopping search")
                    break
                continue

            self._expand(label)

        return results

    def _admit(self, station: Station, itinerary: Itinerary, arrival: timedelta) -> None:
        bound = self._bounds.get(station.id)
        if bound is None:
            bound = ItineraryBound(self._criterion, self._capacity)
            self._bounds[station.id] = bound
        if bound.offer(itinerary):
            heapq.heappush(self._frontier, Label(station, itinerary, arrival, self._criterion))

    def _expand(self, label: Label) -> None:
        itinerary = label.itinerary
        if itinerary.is_empty:
            buffer = timedelta(0)
            window_end = None
        else:
            buffer = self._transfer_buffer
            # The itinerary must not span more than one day from its first departure.
            window_end = label.arrival - itinerary.total_duration + ONE_DAY
        earliest_ready = label.arrival + buffer

        for departure in label.station.departures:
            next_station = self._network.station_by_id(departure.destination_id)
            if next_station is None:
                self._report_once(label.station, departure)
                continue

            if not is_departure_feasible(departure.departure_time, earliest_ready, window_end):
                continue
            departs_at = next_occurrence(departure.departure_time, earliest_ready)
            arrives_at = departs_at + departure.duration
            if window_end is not None and arrives_at >= window_end:
                continue

            extended = itinerary.copy()
            extended.append(Segment.from_departure(departure, label.station, next_station))
            self._admit(next_station, extended, arrives_at)

    def _report_once(self, station: Station, departure: Departure) -> None:
        key = (station.id, departure.destination_id)
        if key in self._reported:
            return
        self._reported.add(key)
        self._report(station, departure)
