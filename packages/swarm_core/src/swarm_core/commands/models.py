"""Command action models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class CommandType(StrEnum):
    """Control actions a command can resolve to."""

    PAUSE_ALL = "PAUSE_ALL"
    PAUSE_AGENT = "PAUSE_AGENT"
    RESUME_ALL = "RESUME_ALL"
    RESUME_AGENT = "RESUME_AGENT"
    KILL_ALL = "KILL_ALL"
    KILL_AGENT = "KILL_AGENT"
    REASSIGN = "REASSIGN"
    STATUS = "STATUS"
    HELP = "HELP"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class CommandAction:
    """Normalized result of interpreting a control instruction."""

    action: CommandType
    message: str
    target: str | None = None

    @property
    def success(self) -> bool:
        return self.action is not CommandType.UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "action": str(self.action),
            "target": self.target,
            "message": self.message,
        }
