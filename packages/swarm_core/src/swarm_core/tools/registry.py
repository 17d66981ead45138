"""Registry mapping tool ids to adapter callables."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ToolFindings:
    """Formatted findings and citation URLs returned by a tool adapter."""

    findings: str
    sources: list[str] = field(default_factory=list)


ToolHandler = Callable[[str], Awaitable[ToolFindings]]


@dataclass(frozen=True)
class ToolDefinition:
    """Metadata describing a tool adapter."""

    name: str
    label: str
    description: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            msg = "ToolDefinition.name must be non-empty"
            raise ValueError(msg)
        if not self.description.strip():
            msg = "ToolDefinition.description must be non-empty"
            raise ValueError(msg)
        if not self.label.strip():
            object.__setattr__(self, "label", self.name)

    def to_dict(self) -> dict[str, Any]:
        """Convert the definition to a JSON-ready dict."""
        return {"name": self.name, "label": self.label, "description": self.description}


@dataclass(frozen=True)
class RegisteredTool:
    """Tool definition paired with its adapter."""

    definition: ToolDefinition
    handler: ToolHandler


class ToolRegistry:
    """Lookup table from tool id to adapter.

    The executor walks a role's declared tool ids and calls whatever is
    registered here; ids without an adapter are skipped.
    """

    def __init__(self) -> None:
        self._tools: dict[str, RegisteredTool] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def register(self, definition: ToolDefinition, handler: ToolHandler) -> None:
        """Register a tool definition and adapter."""
        if definition.name in self._tools:
            message = f"Tool already registered: {definition.name}"
            raise ValueError(message)
        self._tools[definition.name] = RegisteredTool(definition=definition, handler=handler)

    def get(self, name: str) -> RegisteredTool | None:
        """Get a registered tool by name."""
        return self._tools.get(name)

    def names(self) -> list[str]:
        """Return registered tool ids in registration order."""
        return list(self._tools)

    def list(self) -> list[dict[str, Any]]:
        """List registered tool definitions."""
        return [entry.definition.to_dict() for entry in self._tools.values()]
