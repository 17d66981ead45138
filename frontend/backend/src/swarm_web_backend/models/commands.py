"""Command routing API models."""

from __future__ import annotations

from pydantic import Field

from swarm_web_backend.models.base import ApiModel
from swarm_web_backend.models.swarm import AgentSnapshotModel, TaskSnapshotModel


class CommandRequest(ApiModel):
    command: str = ""
    agents: list[AgentSnapshotModel] = Field(default_factory=list)
    tasks: list[TaskSnapshotModel] = Field(default_factory=list)


class CommandResponse(ApiModel):
    success: bool
    action: str
    target: str | None = None
    message: str
