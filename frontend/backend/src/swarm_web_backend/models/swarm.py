"""Swarm state snapshots sent by the UI with commands and coordinator turns."""

from __future__ import annotations

from pydantic import Field
from swarm_core import AgentSnapshot, FeedMessage, TaskSnapshot

from swarm_web_backend.models.base import ApiModel


class AgentSnapshotModel(ApiModel):
    id: str
    name: str
    status: str
    current_task: str | None = Field(default=None, alias="currentTask")

    def to_snapshot(self) -> AgentSnapshot:
        return AgentSnapshot(
            id=self.id, name=self.name, status=self.status, current_task=self.current_task
        )


class TaskSnapshotModel(ApiModel):
    id: str
    title: str
    status: str
    assigned_agents: list[str] = Field(default_factory=list, alias="assignedAgents")

    def to_snapshot(self) -> TaskSnapshot:
        return TaskSnapshot(
            id=self.id,
            title=self.title,
            status=self.status,
            assigned_agents=list(self.assigned_agents),
        )


class FeedMessageModel(ApiModel):
    sender: str
    text: str
    agent_name: str | None = Field(default=None, alias="agentName")

    def to_snapshot(self) -> FeedMessage:
        return FeedMessage(sender=self.sender, text=self.text, agent_name=self.agent_name)
