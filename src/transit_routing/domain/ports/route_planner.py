"""Route planner port."""

from collections.abc import Iterator
from typing import Protocol

from transit_routing.domain.models.city import City
from transit_routing.domain.models.criterion import Criterion
from transit_routing.domain.models.itinerary import Itinerary


class RoutePlanner(Protocol):
    """Port for finding itineraries between two cities."""

    def find_best_route(
        self, start_city: City, end_city: City, criterion: str | Criterion
    ) -> Itinerary | None:
        """Find the best itinerary under a criterion.

        Args:
            start_city: City the journey starts in.
            end_city: City the journey ends in.
            criterion: One of "time", "price", "transfers" (case-insensitive).

        Returns:
            The best itinerary, or None if the cities are not connected.
        """
        ...

    def find_top_n_routes(
        self, start_city: City, end_city: City, criterion: str | Criterion, limit: int
    ) -> Iterator[Itinerary]:
        """Find up to ``limit`` distinct itineraries, best first.

        Args:
            start_city: City the journey starts in.
            end_city: City the journey ends in.
            criterion: One of "time", "price", "transfers" (case-insensitive).
            limit: Maximum number of itineraries to return.

        Returns:
            Iterator over itineraries following distinct physical routes.
        """
        ...
