"""Domain layer - core route search models and ports."""

from transit_routing.domain.models import (
    City,
    Criterion,
    Departure,
    Itinerary,
    Segment,
    Station,
    TransportMode,
    UnknownCriterionError,
)
from transit_routing.domain.ports import (
    RoutePlanner,
    TransportNetwork,
)

__all__ = [
    "City",
    "Criterion",
    "Departure",
    "Itinerary",
    "RoutePlanner",
    "Segment",
    "Station",
    "TransportMode",
    "TransportNetwork",
    "UnknownCriterionError",
]
