"""Coordinator reply model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swarm_core.agents.models import AgentInstance, TaskResult


@dataclass(frozen=True)
class CoordinatorReply:
    """Outcome of one coordinator turn."""

    text: str
    spawned_agent: AgentInstance | None = None
    task_result: TaskResult | None = None
    fallback: bool = False
