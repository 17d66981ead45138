"""Coordinator dialogue package."""

from swarm_core.coordinator.directives import SpawnDirective, parse_spawn_directive
from swarm_core.coordinator.handler import Coordinator, format_report, wants_search
from swarm_core.coordinator.models import CoordinatorReply

__all__ = [
    "Coordinator",
    "CoordinatorReply",
    "SpawnDirective",
    "format_report",
    "parse_spawn_directive",
    "wants_search",
]
