"""Per-station dominance bound for the route search."""

import bisect

from transit_routing.domain.models.criterion import Criterion
from transit_routing.domain.models.itinerary import Itinerary


class ItineraryBound:
    """Keeps the best itineraries known to reach one station, best first.

    Once ``capacity`` itineraries are retained, a candidate that is no better
    than the worst retained one is rejected; a better one evicts the worst.
    """

    def __init__(self, criterion: Criterion, capacity: int) -> None:
        """Initialize an empty bound for a criterion."""
        self._criterion = criterion
        self._capacity = capacity
        self._entries: list[Itinerary] = []

    def offer(self, itinerary: Itinerary) -> bool:
        """Offer a candidate itinerary.

        Returns:
            True if the candidate was retained.
        """
        sort_key = self._criterion.sort_key
        if len(self._entries) >= self._capacity:
            if sort_key(itinerary) >= sort_key(self._entries[-1]):  # type: ignore[operator]
                return False
            self._entries.pop()
        bisect.insort_right(self._entries, itinerary, key=sort_key)  # type: ignore[arg-type]
        return True

    def retains(self, itinerary: Itinerary) -> bool:
        """Check whether this exact itinerary object is still retained."""
        return any(entry is itinerary for entry in self._entries)

    @property
    def best(self) -> Itinerary | None:
        return self._entries[0] if self._entries else None

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self._capacity

    def __len__(self) -> int:
        return len(self._entries)
