"""Tool adapters and the tool registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from swarm_core.tools.duckduckgo import DuckDuckGoSearch
from swarm_core.tools.registry import (
    RegisteredTool,
    ToolDefinition,
    ToolFindings,
    ToolHandler,
    ToolRegistry,
)
from swarm_core.tools.wikipedia import WikipediaLookup

if TYPE_CHECKING:
    import httpx

    from swarm_core.config import Settings

__all__ = [
    "DuckDuckGoSearch",
    "RegisteredTool",
    "ToolDefinition",
    "ToolFindings",
    "ToolHandler",
    "ToolRegistry",
    "WikipediaLookup",
    "build_tool_registry",
]


def build_tool_registry(settings: Settings, client: httpx.AsyncClient) -> ToolRegistry:
    """Register the built-in search adapters against a shared HTTP client."""
    registry = ToolRegistry()
    registry.register(
        ToolDefinition(
            name="duckduckgo",
            label="DuckDuckGo",
            description="DuckDuckGo Instant Answer search",
        ),
        DuckDuckGoSearch(
            client,
            max_results=settings.duckduckgo_max_results,
            source_limit=settings.duckduckgo_source_limit,
            timeout=settings.tool_timeout,
        ),
    )
    registry.register(
        ToolDefinition(
            name="wikipedia",
            label="Wikipedia",
            description="Wikipedia article search with summaries",
        ),
        WikipediaLookup(
            client,
            search_limit=settings.wikipedia_search_limit,
            timeout=settings.tool_timeout,
        ),
    )
    return registry
