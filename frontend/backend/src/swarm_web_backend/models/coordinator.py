"""Master agent (coordinator) API models."""

from __future__ import annotations

from pydantic import Field

from swarm_web_backend.models.agents import AgentSummary, TaskResultPayload
from swarm_web_backend.models.base import ApiModel
from swarm_web_backend.models.swarm import (
    AgentSnapshotModel,
    FeedMessageModel,
    TaskSnapshotModel,
)


class CoordinatorRequest(ApiModel):
    message: str = ""
    agents: list[AgentSnapshotModel] = Field(default_factory=list)
    tasks: list[TaskSnapshotModel] = Field(default_factory=list)
    recent_messages: list[FeedMessageModel] = Field(default_factory=list, alias="recentMessages")


class CoordinatorResponse(ApiModel):
    response: str
    agent_used: AgentSummary | None = Field(default=None, alias="agentUsed")
    task_result: TaskResultPayload | None = Field(default=None, alias="taskResult")
    fallback: bool = False
    pending: bool = False
