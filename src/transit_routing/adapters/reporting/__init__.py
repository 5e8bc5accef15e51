"""Data integrity reporting adapters."""

from transit_routing.adapters.reporting.integrity_reporters import (
    InMemoryIntegrityReporter,
    LoggingIntegrityReporter,
)

__all__ = ["InMemoryIntegrityReporter", "LoggingIntegrityReporter"]
