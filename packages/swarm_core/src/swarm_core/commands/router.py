"""Command routing: literal fast path with a model-assisted fallback."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from swarm_core.commands.models import CommandAction, CommandType
from swarm_core.errors import ModelClientError, ModelUnavailableError
from swarm_core.parsing import extract_json_object
from swarm_core.snapshots import format_agent_line, format_task_line

if TYPE_CHECKING:
    from collections.abc import Sequence

    from swarm_core.config import Settings
    from swarm_core.llm import ModelClient
    from swarm_core.snapshots import AgentSnapshot, TaskSnapshot

logger = logging.getLogger(__name__)

HELP_TEXT = "Commands: /pause, /resume, /kill, /reassign [task] to [agent], /status, /help"

_FAST_PATH: dict[str, CommandAction] = {
    "/pause": CommandAction(CommandType.PAUSE_ALL, "All agents paused."),
    "/resume": CommandAction(CommandType.RESUME_ALL, "All agents resumed."),
    "/kill": CommandAction(CommandType.KILL_ALL, "All agents terminated."),
    "/status": CommandAction(CommandType.STATUS, "Status check requested."),
    "/help": CommandAction(CommandType.HELP, HELP_TEXT),
}

COMMAND_SYSTEM_PROMPT = f"""You are a command interpreter for an agent control system.
Available commands:
- /pause [agent] - Pause agent(s)
- /resume [agent] - Resume agent(s)
- /kill [agent] - Terminate agent(s)
- /reassign [task] to [agent] - Reassign a task
- /status - Get system status
- /help - List commands

Parse the user command and respond with JSON only:
{{ "action": "ACTION_TYPE", "target": "agent_or_task_id_if_applicable", "message": "human readable response" }}

Valid actions: {", ".join(CommandType)}"""


def match_fast_path(command: str) -> CommandAction | None:
    """Match the literal command set, ignoring case and surrounding whitespace."""
    return _FAST_PATH.get(command.strip().lower())


def unknown_command(command: str) -> CommandAction:
    """UNKNOWN action that echoes the input with a help hint."""
    return CommandAction(
        CommandType.UNKNOWN,
        f"Unknown command: {command.strip()}. Try /help for available commands.",
    )


def build_command_prompt(
    command: str,
    agents: Sequence[AgentSnapshot],
    tasks: Sequence[TaskSnapshot],
) -> str:
    agent_lines = "\n".join(format_agent_line(agent) for agent in agents) or "None"
    task_lines = "\n".join(format_task_line(task) for task in tasks) or "None"
    return f"Command: {command}\n\nAvailable agents:\n{agent_lines}\n\nAvailable tasks:\n{task_lines}"


def parse_command_response(content: str, command: str) -> CommandAction:
    """Parse the model's JSON reply, resolving anything invalid to UNKNOWN."""
    data = extract_json_object(content)
    if data is None:
        logger.debug("No JSON object in command response: %r", content[:200])
        return unknown_command(command)

    try:
        action = CommandType(str(data.get("action", "")).strip().upper())
    except ValueError:
        logger.debug("Invalid command action in response: %r", data.get("action"))
        return unknown_command(command)

    if action is CommandType.UNKNOWN:
        return unknown_command(command)

    target = data.get("target")
    target = str(target).strip() if target not in (None, "") else None
    message = data.get("message")
    if not isinstance(message, str) or not message.strip():
        message = "Command processed."
    return CommandAction(action, message.strip(), target or None)


class CommandRouter:
    """Classify control instructions into command actions."""

    def __init__(self, model: ModelClient, settings: Settings) -> None:
        self._model = model
        self._settings = settings

    async def route(
        self,
        command: str,
        agents: Sequence[AgentSnapshot] = (),
        tasks: Sequence[TaskSnapshot] = (),
    ) -> CommandAction:
        """Resolve a command. Every failure resolves to an UNKNOWN action."""
        fast = match_fast_path(command)
        if fast is not None:
            return fast

        text = command.strip()
        if not text or not self._model.is_configured:
            return unknown_command(text)

        try:
            content = await self._model.complete(
                COMMAND_SYSTEM_PROMPT,
                build_command_prompt(text, agents, tasks),
                max_tokens=self._settings.command_max_tokens,
                temperature=self._settings.command_temperature,
            )
        except ModelUnavailableError:
            return unknown_command(text)
        except ModelClientError as exc:
            logger.warning("Command parsing failed for %r: %s", text, exc)
            return CommandAction(
                CommandType.UNKNOWN,
                f"Failed to process command: {text}. Try /help for available commands.",
            )
        return parse_command_response(content, text)
