"""Apply routed commands that the agent registry owns."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from swarm_core.commands.models import CommandAction, CommandType

if TYPE_CHECKING:
    from swarm_core.agents.registry import AgentRegistry

logger = logging.getLogger(__name__)


def describe_status(registry: AgentRegistry) -> str:
    """One-line summary of agent counts by status."""
    counts = registry.counts()
    total = sum(counts.values())
    breakdown = ", ".join(f"{count} {status}" for status, count in counts.items())
    return f"{total} agents registered: {breakdown}."


def apply_command(action: CommandAction, registry: AgentRegistry) -> CommandAction:
    """Apply kill and status actions to the registry.

    Pause, resume and reassign carry no registry state and are returned as-is
    for the UI to apply.
    """
    if action.action is CommandType.KILL_ALL:
        killed = registry.kill_all()
        return CommandAction(action.action, f"{action.message} ({killed} agents taken offline)")

    if action.action is CommandType.KILL_AGENT:
        agent = registry.find(action.target or "")
        if agent is None:
            return CommandAction(
                CommandType.UNKNOWN,
                f"Agent not found: {action.target or '(none)'}",
                action.target,
            )
        registry.kill(agent.id)
        return CommandAction(action.action, action.message, agent.id)

    if action.action is CommandType.STATUS:
        return CommandAction(action.action, f"{action.message} {describe_status(registry)}")

    return action
