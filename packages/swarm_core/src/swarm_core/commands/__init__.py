"""Command routing package."""

from swarm_core.commands.dispatch import apply_command, describe_status
from swarm_core.commands.models import CommandAction, CommandType
from swarm_core.commands.router import (
    HELP_TEXT,
    CommandRouter,
    match_fast_path,
    parse_command_response,
)

__all__ = [
    "HELP_TEXT",
    "CommandAction",
    "CommandRouter",
    "CommandType",
    "apply_command",
    "describe_status",
    "match_fast_path",
    "parse_command_response",
]
