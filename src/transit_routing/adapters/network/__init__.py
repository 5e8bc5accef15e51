"""Transport network adapters."""

from transit_routing.adapters.network.in_memory_transport_network import (
    InMemoryTransportNetwork,
)

__all__ = ["InMemoryTransportNetwork"]
