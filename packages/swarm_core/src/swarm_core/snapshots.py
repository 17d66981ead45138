"""Read-only views of UI state passed in with commands and coordinator turns."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AgentSnapshot:
    """Agent as currently shown by the UI."""

    id: str
    name: str
    status: str
    current_task: str | None = None


@dataclass(frozen=True)
class TaskSnapshot:
    """Task as currently shown by the UI."""

    id: str
    title: str
    status: str
    assigned_agents: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FeedMessage:
    """Recent feed entry used as conversational context."""

    sender: str
    text: str
    agent_name: str | None = None


def format_agent_line(agent: AgentSnapshot) -> str:
    line = f"- {agent.name} ({agent.id}): {agent.status}"
    if agent.current_task:
        line += f" | Task: {agent.current_task}"
    return line


def format_task_line(task: TaskSnapshot) -> str:
    return f"- {task.title} ({task.id}): {task.status} | Assigned: {len(task.assigned_agents)} agents"


def format_feed_line(message: FeedMessage) -> str:
    sender = f"{message.sender}: {message.agent_name}" if message.agent_name else message.sender
    return f"[{sender}] {message.text}"
