"""Coordinator ("master") dialogue handler.

Given a human message and the current swarm state, the coordinator either
answers directly or spawns an agent and runs a task on it. Without a model
credential it falls back to a keyword heuristic; with one, it asks the model
and follows any spawn directive found in the reply.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from swarm_core.agents.models import AgentStatus
from swarm_core.agents.roles import RoleId, list_spawnable_roles
from swarm_core.coordinator.directives import parse_spawn_directive
from swarm_core.coordinator.models import CoordinatorReply
from swarm_core.errors import ModelClientError, ModelUnavailableError
from swarm_core.snapshots import format_feed_line, format_task_line

if TYPE_CHECKING:
    from collections.abc import Sequence

    from swarm_core.agents.models import AgentInstance, TaskResult
    from swarm_core.agents.registry import AgentRegistry
    from swarm_core.config import Settings
    from swarm_core.execution import TaskExecutor
    from swarm_core.llm import ModelClient
    from swarm_core.snapshots import AgentSnapshot, FeedMessage, TaskSnapshot

logger = logging.getLogger(__name__)

SEARCH_KEYWORDS = ("search", "find", "look up", "what is")
NO_RESPONSE_TEXT = "No response from Master Agent."

COORDINATOR_SYSTEM_PROMPT = """You are the Master Agent - the coordinator of an autonomous agent swarm.

Your role:
- Parse human requests to identify required tasks
- Spawn appropriate agents for each task
- Coordinate multi-agent workflows
- Report results back to humans

AVAILABLE AGENT TYPES:
1. web-searcher (Scout) - Searches DuckDuckGo and Wikipedia for information
2. researcher (Sage) - Analyzes and synthesizes information
3. code-writer (Forge) - Generates and explains code
4. analyst (Oracle) - Analyzes data and provides recommendations

When you receive a request:
1. Determine which agent type is best suited
2. Respond with a JSON action block if you need to spawn an agent or execute a task
3. If you can answer directly, do so

RESPONSE FORMAT:
For spawning agents or executing tasks, include a JSON block:
```json
{"action": "spawn_and_task", "role": "web-searcher", "task": "search query here"}
```

For direct responses (no agent needed):
Just respond normally with your analysis or answer.

Be concise and actionable."""


def format_report(agent: AgentInstance, result: TaskResult) -> str:
    """Render a task result as a feed entry."""
    if not result.success:
        return f"Task failed: {result.error}"
    sources = ", ".join(result.sources) or "N/A"
    return f"**{agent.name} Report:**\n\n{result.output}\n\n*Sources: {sources}*"


def available_roles_text() -> str:
    return "\n".join(f"- {role.id}: {role.description}" for role in list_spawnable_roles())


def wants_search(message: str) -> bool:
    """Keyword heuristic used when no model is configured."""
    lowered = message.lower()
    return any(keyword in lowered for keyword in SEARCH_KEYWORDS)


class Coordinator:
    """Answer human messages, delegating to spawned agents when needed."""

    def __init__(
        self,
        registry: AgentRegistry,
        executor: TaskExecutor,
        model: ModelClient,
        settings: Settings,
    ) -> None:
        self._registry = registry
        self._executor = executor
        self._model = model
        self._settings = settings

    async def respond(
        self,
        message: str,
        agents: Sequence[AgentSnapshot] = (),
        tasks: Sequence[TaskSnapshot] = (),
        recent_messages: Sequence[FeedMessage] = (),
    ) -> CoordinatorReply:
        """Handle one coordinator turn. Never raises for model failures."""
        text = message.strip()
        if not self._model.is_configured:
            return await self._respond_offline(text)

        try:
            reply = await self._model.complete(
                COORDINATOR_SYSTEM_PROMPT,
                self.build_prompt(text, agents, tasks, recent_messages),
                max_tokens=self._settings.coordinator_max_tokens,
                temperature=self._settings.coordinator_temperature,
            )
        except ModelUnavailableError:
            return await self._respond_offline(text)
        except ModelClientError as exc:
            logger.warning("Coordinator model call failed: %s", exc)
            return CoordinatorReply(
                text=f'I\'ll help with: "{text}". Let me search for information...',
                fallback=True,
            )

        directive = parse_spawn_directive(reply)
        if directive is None:
            return CoordinatorReply(text=reply.strip() or NO_RESPONSE_TEXT)

        agent, result = await self._delegate(directive.role, directive.task)
        if result.success:
            body = format_report(agent, result)
        else:
            body = f"*Task failed: {result.error}*"
        combined = f"{directive.prose}\n\n{body}" if directive.prose else body
        return CoordinatorReply(text=combined, spawned_agent=agent, task_result=result)

    def build_prompt(
        self,
        message: str,
        agents: Sequence[AgentSnapshot],
        tasks: Sequence[TaskSnapshot],
        recent_messages: Sequence[FeedMessage],
    ) -> str:
        """Build the coordinator user message from the current swarm state."""
        window = self._settings.recent_message_window
        recent = list(recent_messages)[-window:] if window > 0 else []
        task_lines = "\n".join(format_task_line(task) for task in tasks) or "No tasks."
        recent_lines = "\n".join(format_feed_line(entry) for entry in recent) or "None."
        return (
            f"CURRENT AGENTS:\n{self._agent_context(agents)}\n\n"
            f"TASKS:\n{task_lines}\n\n"
            f"RECENT ACTIVITY:\n{recent_lines}\n\n"
            f"AVAILABLE AGENT TYPES:\n{available_roles_text()}\n\n"
            f"HUMAN REQUEST: {message}\n\n"
            "Analyze this request. If it requires an agent, include a JSON action block "
            "to spawn one. Otherwise, respond directly."
        )

    def _agent_context(self, agents: Sequence[AgentSnapshot]) -> str:
        # UI snapshot wins; the registry is the fallback when none was sent.
        if agents:
            lines = [_agent_line(agent.name, agent.status, agent.current_task) for agent in agents]
        else:
            lines = [
                _agent_line(f"{agent.name} ({agent.role})", agent.status, agent.current_task)
                for agent in self._registry.list()
            ]
        return "\n".join(lines) or "No agents currently active."

    async def _respond_offline(self, message: str) -> CoordinatorReply:
        if wants_search(message):
            agent, result = await self._delegate(RoleId.WEB_SEARCHER, message)
            return CoordinatorReply(
                text=format_report(agent, result), spawned_agent=agent, task_result=result
            )

        text = (
            f'I understand your request: "{message}"\n\n'
            f"To proceed, I can spawn one of these agents:\n{available_roles_text()}\n\n"
            'Try asking me to "search for X" or "look up Y" to activate the web searcher.'
        )
        stuck = [agent for agent in self._registry.list() if agent.status is AgentStatus.STUCK]
        if stuck:
            names = ", ".join(agent.name for agent in stuck)
            text = (
                f"[ALERT] {len(stuck)} agent(s) currently stuck: {names}. "
                "Recommend checking resource allocation and retrying failed operations.\n\n"
                + text
            )
        return CoordinatorReply(text=text)

    async def _delegate(self, role: RoleId, task: str) -> tuple[AgentInstance, TaskResult]:
        agent = self._registry.spawn(role)
        result = await self._executor.execute(
            agent.id, task, on_progress=lambda note: logger.info("[Master] %s", note)
        )
        return self._registry.get(agent.id) or agent, result


def _agent_line(label: str, status: str, current_task: str | None) -> str:
    line = f"- {label}: {status}"
    if current_task:
        line += f" | Task: {current_task}"
    return line
