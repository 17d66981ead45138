"""Swarm runtime facade.

Builds the registry, tool adapters, model client, executor, command router and
coordinator once, and owns the HTTP clients they share. Construct one per
service and close it at shutdown.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from swarm_core.agents.models import TaskResult
from swarm_core.agents.registry import AgentRegistry
from swarm_core.agents.roles import RoleId, get_role, is_spawnable
from swarm_core.commands import CommandRouter
from swarm_core.config import Settings, load_settings
from swarm_core.coordinator import Coordinator
from swarm_core.execution import AGENT_NOT_FOUND, TaskExecutor
from swarm_core.llm import ModelClient
from swarm_core.tools import ToolRegistry, build_tool_registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from swarm_core.agents.models import AgentInstance

logger = logging.getLogger(__name__)


class SwarmRuntime:
    """Own the orchestration components for the lifetime of a service."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        registry: AgentRegistry | None = None,
        tools: ToolRegistry | None = None,
        model: ModelClient | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self._http: httpx.AsyncClient | None = None
        if tools is None:
            self._http = httpx.AsyncClient(timeout=self.settings.tool_timeout)
            tools = build_tool_registry(self.settings, self._http)
        self._owns_model = model is None
        self.registry = registry or AgentRegistry()
        self.tools = tools
        self.model = model or ModelClient(self.settings)
        self.executor = TaskExecutor(self.registry, self.tools, self.model, self.settings)
        self.router = CommandRouter(self.model, self.settings)
        self.coordinator = Coordinator(self.registry, self.executor, self.model, self.settings)
        logger.info(
            "Swarm runtime ready (model=%s, configured=%s, tools=%s)",
            self.settings.groq_model,
            self.model.is_configured,
            ", ".join(self.tools.names()) or "none",
        )

    async def aclose(self) -> None:
        """Close HTTP clients created by this runtime."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None
        if self._owns_model:
            await self.model.aclose()

    async def dispatch(
        self,
        task: str,
        *,
        agent_id: str | None = None,
        role: str | RoleId | None = None,
        on_progress: Callable[[str], None] | None = None,
    ) -> tuple[AgentInstance | None, TaskResult]:
        """Run a task on a given agent, or on an idle/new agent of a role.

        Without an agent id, an idle agent of the role (web-searcher by default)
        is reused, otherwise one is spawned. Roles that cannot be spawned,
        including the coordinator role, yield a failed result.
        """
        if agent_id is None:
            role = role or RoleId.WEB_SEARCHER
            if not is_spawnable(role):
                return None, TaskResult.failure(f"Invalid role: {role}")
            role_def = get_role(role)
            agent = self.registry.find_idle(role_def.id) or self.registry.spawn(role_def.id)
            agent_id = agent.id
        elif self.registry.get(agent_id) is None:
            return None, TaskResult.failure(AGENT_NOT_FOUND)

        result = await self.executor.execute(agent_id, task, on_progress)
        return self.registry.get(agent_id), result
