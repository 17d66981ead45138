"""Agent, role and task execution API models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from swarm_web_backend.models.base import ApiModel

if TYPE_CHECKING:
    from swarm_core import AgentInstance, Role, TaskResult


class RoleSummary(ApiModel):
    id: str
    name: str
    description: str
    tools: list[str] = Field(default_factory=list)
    accent: str = ""

    @classmethod
    def from_role(cls, role: Role) -> RoleSummary:
        return cls(
            id=str(role.id),
            name=role.display_name,
            description=role.description,
            tools=list(role.tools),
            accent=role.ui_accent,
        )


class AgentSummary(ApiModel):
    id: str
    role: str
    name: str
    status: str
    current_task: str | None = Field(default=None, alias="currentTask")
    created_at: str = Field(alias="createdAt")
    last_active: str = Field(alias="lastActive")

    @classmethod
    def from_agent(cls, agent: AgentInstance) -> AgentSummary:
        return cls.model_validate(agent.to_dict())


class AgentListResponse(ApiModel):
    agents: list[AgentSummary] = Field(default_factory=list)
    available_roles: list[RoleSummary] = Field(default_factory=list, alias="availableRoles")


class SpawnRequest(ApiModel):
    role: str | None = None
    name: str | None = None


class SpawnResponse(ApiModel):
    success: bool = True
    agent: AgentSummary


class TaskRequest(ApiModel):
    """Run a task on an agent, or on an idle/new agent of a role."""

    task: str = ""
    agent_id: str | None = Field(default=None, alias="agentId")
    role: str | None = None


class TaskResultPayload(ApiModel):
    success: bool
    output: str
    sources: list[str] = Field(default_factory=list)
    tools_used: list[str] = Field(default_factory=list, alias="toolsUsed")
    error: str | None = None
    duration: int = 0

    @classmethod
    def from_result(cls, result: TaskResult) -> TaskResultPayload:
        return cls.model_validate(result.to_dict())


class TaskResponse(ApiModel):
    success: bool
    task: str
    agent: AgentSummary | None = None
    result: TaskResultPayload
    progress: list[str] = Field(default_factory=list)


class KillResponse(ApiModel):
    success: bool = True
    agent_id: str = Field(alias="agentId")


class CleanupResponse(ApiModel):
    removed: int
    remaining: int
