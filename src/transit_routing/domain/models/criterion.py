"""Optimization criterion and the itinerary ordering it induces."""

from datetime import timedelta
from enum import Enum

from transit_routing.domain.models.itinerary import Itinerary

SortKey = tuple[timedelta, float, int] | tuple[float, timedelta, int] | tuple[int, timedelta, float]


class UnknownCriterionError(ValueError):
    """Raised when a search is requested with an unrecognized optimization criterion."""


class Criterion(str, Enum):
    """Optimization dimension selected for a search call.

    Each criterion orders itineraries lexicographically:

    ==========  ==============  ==============  ==========
    criterion   1st key         2nd key         3rd key
    ==========  ==============  ==============  ==========
    time        total duration  fare            transfers
    price       fare            total duration  transfers
    transfers   transfers       total duration  fare
    ==========  ==============  ==============  ==========
    """

    TIME = "time"
    PRICE = "price"
    TRANSFERS = "transfers"

    @classmethod
    def parse(cls, value: "str | Criterion") -> "Criterion":
        """Parse a criterion name case-insensitively.

        Raises:
            UnknownCriterionError: If the name is not one of time, price, transfers.
        """
        if isinstance(value, Criterion):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise UnknownCriterionError(
            f"Unknown optimization criterion: {value!r} (expected one of: time, price, transfers)"
        )

    def sort_key(self, itinerary: Itinerary) -> SortKey:
        """Return the lexicographic key ordering itineraries under this criterion."""
        if self is Criterion.TIME:
            return (itinerary.total_duration, itinerary.total_fare, itinerary.transfers)
        if self is Criterion.PRICE:
            return (itinerary.total_fare, itinerary.total_duration, itinerary.transfers)
        return (itinerary.transfers, itinerary.total_duration, itinerary.total_fare)


def compare_itineraries(
    first: Itinerary | None, second: Itinerary | None, criterion: Criterion
) -> int:
    """Three-way comparison of two itineraries under a criterion.

    A missing itinerary is strictly worse than any present one.

    Returns:
        Negative if ``first`` is better, positive if ``second`` is better, 0 on a tie.
    """
    if first is None and second is None:
        return 0
    if first is None:
        return 1
    if second is None:
        return -1

    first_key = criterion.sort_key(first)
    second_key = criterion.sort_key(second)
    if first_key < second_key:  # type: ignore[operator]
        return -1
    if first_key > second_key:  # type: ignore[operator]
        return 1
    return 0
