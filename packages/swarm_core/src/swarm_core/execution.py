"""Task execution pipeline.

One execution runs a task against one registered agent:

1. Mark the agent active with the task text.
2. Call each tool adapter the role declares, in declaration order, and
   accumulate findings and citation URLs.
3. Synthesize the report with the model, or build a deterministic mock report
   when no credential is configured.
4. Return the agent to idle (success) or mark it stuck (failure).

Tool adapters degrade to empty findings instead of raising, so the pipeline has
no per-tool retry. A model failure is fatal to the task and is reported in the
result rather than raised.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from swarm_core.agents.models import AgentInstance, AgentStatus, TaskResult
from swarm_core.agents.roles import get_role
from swarm_core.utils import dedupe

if TYPE_CHECKING:
    from collections.abc import Callable

    from swarm_core.agents.registry import AgentRegistry
    from swarm_core.config import Settings
    from swarm_core.llm import ModelClient
    from swarm_core.tools import ToolRegistry

logger = logging.getLogger(__name__)

AGENT_NOT_FOUND = "Agent not found"
TASK_REQUIRED = "Task is required"
MOCK_MODE_NOTE = "*Note: Using mock mode. Add GROQ_API_KEY for AI-powered analysis.*"
NO_RESPONSE_TEXT = "No response generated."


def build_task_prompt(task: str, tool_context: str) -> str:
    """Build the user message embedding the task and gathered tool output."""
    return (
        f"TASK: {task}\n\n"
        f"TOOL RESULTS:\n{tool_context}\n\n"
        "Based on the above information, provide a comprehensive response to the task. "
        "Be concise but thorough. Cite sources where relevant."
    )


def build_mock_report(agent_name: str, task: str, tool_context: str) -> str:
    """Deterministic report used when no model credential is configured."""
    return f"**{agent_name} Report**\n\nTask: {task}\n\n{tool_context}\n\n{MOCK_MODE_NOTE}"


class TaskExecutor:
    """Run tasks against registered agents."""

    def __init__(
        self,
        registry: AgentRegistry,
        tools: ToolRegistry,
        model: ModelClient,
        settings: Settings,
    ) -> None:
        self._registry = registry
        self._tools = tools
        self._model = model
        self._settings = settings

    async def execute(
        self,
        agent_id: str,
        task: str,
        on_progress: Callable[[str], None] | None = None,
    ) -> TaskResult:
        """Execute a task and return its result. Never raises for task failures."""
        agent = self._registry.get(agent_id)
        lock = self._registry.execution_lock(agent_id)
        if agent is None or lock is None:
            return TaskResult.failure(AGENT_NOT_FOUND)
        if not task.strip():
            return TaskResult.failure(TASK_REQUIRED)

        async with lock:
            return await self._run(agent, task, on_progress)

    async def _run(
        self,
        agent: AgentInstance,
        task: str,
        on_progress: Callable[[str], None] | None,
    ) -> TaskResult:
        started = time.perf_counter()
        if self._registry.begin_task(agent.id, task) is None:
            current = self._registry.get(agent.id)
            if current is None:
                return TaskResult.failure(AGENT_NOT_FOUND)
            return TaskResult.failure(
                f"Agent {current.name} is {current.status} and cannot accept tasks"
            )

        role = get_role(agent.role)
        tools_used: list[str] = []
        sources: list[str] = []
        _notify(on_progress, f"{agent.name} starting task: {task}")

        try:
            context_parts: list[str] = []
            for tool_id in role.tools:
                entry = self._tools.get(tool_id)
                if entry is None:
                    logger.debug("No adapter registered for tool '%s', skipping", tool_id)
                    continue
                label = entry.definition.label
                _notify(on_progress, f"{agent.name} searching {label}...")
                result = await entry.handler(task)
                context_parts.append(f"\n\n--- {label} Results ---\n{result.findings}")
                sources.extend(result.sources)
                tools_used.append(tool_id)
            tool_context = "".join(context_parts)

            _notify(on_progress, f"{agent.name} analyzing results...")
            if self._model.is_configured:
                output = await self._model.complete(
                    role.system_prompt,
                    build_task_prompt(task, tool_context),
                    max_tokens=self._settings.executor_max_tokens,
                    temperature=self._settings.executor_temperature,
                )
                output = output or NO_RESPONSE_TEXT
            else:
                output = build_mock_report(agent.name, task, tool_context)
        except asyncio.CancelledError:
            self._registry.fail_task(agent.id)
            raise
        except Exception as exc:
            logger.exception("Agent %s task failed", agent.name)
            self._registry.fail_task(agent.id)
            error = str(exc) or type(exc).__name__
            return TaskResult.failure(
                error,
                output=f"Task failed: {error}",
                tools_used=tools_used,
                duration_ms=_elapsed_ms(started),
            )

        if self._registry.complete_task(agent.id) is None:
            current = self._registry.get(agent.id)
            if current is None or current.status is AgentStatus.OFFLINE:
                logger.info("Agent %s went offline during its task", agent.name)
        _notify(on_progress, f"{agent.name} completed task")
        return TaskResult(
            success=True,
            output=output,
            sources=dedupe(sources),
            tools_used=tools_used,
            duration_ms=_elapsed_ms(started),
        )


def _notify(sink: Callable[[str], None] | None, message: str) -> None:
    if sink is None:
        return
    try:
        sink(message)
    except Exception:  # noqa: BLE001 - progress sinks never affect the task
        logger.debug("Progress sink raised", exc_info=True)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
