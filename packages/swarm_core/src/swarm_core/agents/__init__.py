"""Role catalog, agent models and the agent registry."""

from swarm_core.agents.models import AgentInstance, AgentStatus, TaskResult
from swarm_core.agents.registry import AgentRegistry, can_transition
from swarm_core.agents.roles import (
    ROLES,
    Role,
    RoleId,
    get_role,
    is_spawnable,
    list_spawnable_roles,
)

__all__ = [
    "ROLES",
    "AgentInstance",
    "AgentRegistry",
    "AgentStatus",
    "Role",
    "RoleId",
    "TaskResult",
    "can_transition",
    "get_role",
    "is_spawnable",
    "list_spawnable_roles",
]
