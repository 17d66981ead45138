from swarm_core.agents import (
    AgentInstance,
    AgentRegistry,
    AgentStatus,
    Role,
    RoleId,
    TaskResult,
    get_role,
    list_spawnable_roles,
)
from swarm_core.commands import CommandAction, CommandRouter, CommandType, apply_command
from swarm_core.config import Settings, load_settings
from swarm_core.coordinator import Coordinator, CoordinatorReply
from swarm_core.errors import (
    ModelClientError,
    ModelError,
    ModelMalformedError,
    ModelUnavailableError,
    RoleNotFoundError,
)
from swarm_core.execution import TaskExecutor
from swarm_core.llm import ModelClient
from swarm_core.runtime import SwarmRuntime
from swarm_core.snapshots import AgentSnapshot, FeedMessage, TaskSnapshot
from swarm_core.tools import ToolDefinition, ToolFindings, ToolRegistry, build_tool_registry

__all__ = [
    "AgentInstance",
    "AgentRegistry",
    "AgentSnapshot",
    "AgentStatus",
    "CommandAction",
    "CommandRouter",
    "CommandType",
    "Coordinator",
    "CoordinatorReply",
    "FeedMessage",
    "ModelClient",
    "ModelClientError",
    "ModelError",
    "ModelMalformedError",
    "ModelUnavailableError",
    "Role",
    "RoleId",
    "RoleNotFoundError",
    "Settings",
    "SwarmRuntime",
    "TaskExecutor",
    "TaskResult",
    "TaskSnapshot",
    "ToolDefinition",
    "ToolFindings",
    "ToolRegistry",
    "apply_command",
    "build_tool_registry",
    "get_role",
    "list_spawnable_roles",
    "load_settings",
]
