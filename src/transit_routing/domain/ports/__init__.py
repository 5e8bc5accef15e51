"""Ports (interfaces) for the ports-and-adapters architecture."""

from transit_routing.domain.ports.route_planner import RoutePlanner
from transit_routing.domain.ports.transport_network import TransportNetwork

__all__ = [
    "RoutePlanner",
    "TransportNetwork",
]
