"""Adapters layer - configuration, network storage and reporting."""

from transit_routing.adapters.config import SearchConfig, SearchSettingsLoader
from transit_routing.adapters.network import InMemoryTransportNetwork
from transit_routing.adapters.reporting import (
    InMemoryIntegrityReporter,
    LoggingIntegrityReporter,
)

__all__ = [
    "InMemoryIntegrityReporter",
    "InMemoryTransportNetwork",
    "LoggingIntegrityReporter",
    "SearchConfig",
    "SearchSettingsLoader",
]
