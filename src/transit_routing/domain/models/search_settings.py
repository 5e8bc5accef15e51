"""Search settings domain model."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class SearchSettings:
    """Tunable knobs of the route search."""

    transfer_buffer: timedelta = timedelta(
        minutes=15
    )  # Minimum wait between an arrival and the next departure; waived before the first segment
    retention_factor: int = (
        2  # Top-N mode keeps up to retention_factor * N itineraries per station
    )
    result_cap_factor: int = (
        25  # Top-N mode stops after collecting result_cap_factor * N destination itineraries
    )

    def retention_limit(self, limit: int) -> int:
        """Number of itineraries retained per station when N itineraries are requested."""
        return max(1, self.retention_factor * limit)

    def result_cap(self, limit: int) -> int:
        """Number of destination itineraries collected before the search stops."""
        return max(limit, self.result_cap_factor * limit)
