"""Agent and task result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime  # noqa: TC003 (dataclass field type)
from enum import StrEnum
from typing import Any

from swarm_core.agents.roles import RoleId  # noqa: TC001 (dataclass field type)


class AgentStatus(StrEnum):
    """Lifecycle states of an agent instance."""

    IDLE = "idle"
    ACTIVE = "active"
    STUCK = "stuck"
    OFFLINE = "offline"


@dataclass(frozen=True)
class AgentInstance:
    """Snapshot of a registered agent.

    Snapshots are immutable; the registry replaces the stored record on every
    transition, so a caller holding one never observes a partial update.
    """

    id: str
    role: RoleId
    name: str
    status: AgentStatus
    created_at: datetime
    last_active_at: datetime
    current_task: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging and API payloads."""
        return {
            "id": self.id,
            "role": str(self.role),
            "name": self.name,
            "status": str(self.status),
            "currentTask": self.current_task,
            "createdAt": self.created_at.isoformat(),
            "lastActive": self.last_active_at.isoformat(),
        }


@dataclass(frozen=True)
class TaskResult:
    """Outcome of a single task execution."""

    success: bool
    output: str
    sources: list[str] = field(default_factory=list)
    tools_used: list[str] = field(default_factory=list)
    error: str | None = None
    duration_ms: int = 0

    @classmethod
    def failure(
        cls,
        error: str,
        *,
        output: str | None = None,
        tools_used: list[str] | None = None,
        duration_ms: int = 0,
    ) -> TaskResult:
        """Build a failed result carrying a human-readable error."""
        return cls(
            success=False,
            output=output if output is not None else error,
            tools_used=list(tools_used or []),
            error=error,
            duration_ms=duration_ms,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API payloads."""
        return {
            "success": self.success,
            "output": self.output,
            "sources": list(self.sources),
            "toolsUsed": list(self.tools_used),
            "error": self.error,
            "duration": self.duration_ms,
        }
