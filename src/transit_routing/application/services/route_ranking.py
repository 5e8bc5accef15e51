"""Ranking of itineraries collected in top-N mode."""

import logging
from collections.abc import Iterable

from transit_routing.domain.models.criterion import Criterion
from transit_routing.domain.models.itinerary import Itinerary

logger = logging.getLogger(__name__)


def rank_itineraries(
    itineraries: Iterable[Itinerary], criterion: Criterion, limit: int
) -> list[Itinerary]:
    """Sort, deduplicate and truncate destination itineraries.

    Itineraries following the same physical route (same ordered departure
    stations) are duplicates; the better ranked one is kept.

    Args:
        itineraries: Itineraries that reached the destination city.
        criterion: Ordering to rank by.
        limit: Maximum number of itineraries to return.

    Returns:
        At most ``limit`` itineraries, best first, each on a distinct route.
    """
    if limit < 1:
        return []

    ranked = sorted(itineraries, key=criterion.sort_key)  # type: ignore[arg-type]
    seen_routes: set[tuple[str, ...]] = set()
    result: list[Itinerary] = []
    for itinerary in ranked:
        route_key = itinerary.route_key()
        if route_key in seen_routes:
            continue
        seen_routes.add(route_key)
        result.append(itinerary)
        if len(result) == limit:
            break

    dropped = len(ranked) - len(result)
    if dropped > 0:
        logger.debug(f"Dropped {dropped} duplicate or surplus itineraries while ranking")
    return result
