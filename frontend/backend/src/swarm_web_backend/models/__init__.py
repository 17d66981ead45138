"""API models for the swarm web backend."""

from swarm_web_backend.models.agents import (
    AgentListResponse,
    AgentSummary,
    CleanupResponse,
    KillResponse,
    RoleSummary,
    SpawnRequest,
    SpawnResponse,
    TaskRequest,
    TaskResponse,
    TaskResultPayload,
)
from swarm_web_backend.models.base import ApiModel
from swarm_web_backend.models.commands import CommandRequest, CommandResponse
from swarm_web_backend.models.coordinator import CoordinatorRequest, CoordinatorResponse
from swarm_web_backend.models.swarm import (
    AgentSnapshotModel,
    FeedMessageModel,
    TaskSnapshotModel,
)

__all__ = [
    "AgentListResponse",
    "AgentSnapshotModel",
    "AgentSummary",
    "ApiModel",
    "CleanupResponse",
    "CommandRequest",
    "CommandResponse",
    "CoordinatorRequest",
    "CoordinatorResponse",
    "FeedMessageModel",
    "KillResponse",
    "RoleSummary",
    "SpawnRequest",
    "SpawnResponse",
    "TaskRequest",
    "TaskResponse",
    "TaskResultPayload",
    "TaskSnapshotModel",
]
