"""Domain models for transit route search."""

from transit_routing.domain.models.city import City
from transit_routing.domain.models.criterion import (
    Criterion,
    UnknownCriterionError,
    compare_itineraries,
)
from transit_routing.domain.models.departure import Departure
from transit_routing.domain.models.integrity_issue import DataIntegrityIssue
from transit_routing.domain.models.itinerary import Itinerary
from transit_routing.domain.models.label import Label
from transit_routing.domain.models.search_settings import SearchSettings
from transit_routing.domain.models.segment import Segment
from transit_routing.domain.models.station import Station
from transit_routing.domain.models.transport_mode import TransportMode

__all__ = [
    "City",
    "Criterion",
    "DataIntegrityIssue",
    "Departure",
    "Itinerary",
    "Label",
    "SearchSettings",
    "Segment",
    "Station",
    "TransportMode",
    "UnknownCriterionError",
    "compare_itineraries",
]
