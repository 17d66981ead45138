from __future__ import annotations

import pytest
from swarm_core.config import Settings
from swarm_core.errors import ModelUnavailableError
from swarm_core.tools import ToolDefinition, ToolFindings, ToolRegistry


@pytest.fixture(autouse=True)
def _clear_model_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GROQ_API_KEY", "")
    monkeypatch.delenv("GROQ_MODEL", raising=False)
    monkeypatch.delenv("RECENT_MESSAGE_WINDOW", raising=False)


class FakeModel:
    """Scripted stand-in for ModelClient.

    Each queued reply is returned in order; exceptions are raised instead.
    """

    def __init__(self, *replies: str | Exception, configured: bool = True) -> None:
        self.is_configured = configured
        self._replies = list(replies)
        self.calls: list[dict[str, object]] = []

    async def complete(self, system_prompt, user_content, *, max_tokens, temperature) -> str:
        self.calls.append(
            {
                "system": system_prompt,
                "user": user_content,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if not self.is_configured:
            msg = "No model credential configured"
            raise ModelUnavailableError(msg)
        reply = self._replies.pop(0) if self._replies else ""
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeTool:
    def __init__(self, findings: str, sources: list[str] | None = None) -> None:
        self.findings = findings
        self.sources = sources or []
        self.queries: list[str] = []

    async def __call__(self, query: str) -> ToolFindings:
        self.queries.append(query)
        return ToolFindings(findings=self.findings, sources=list(self.sources))


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def fake_model():
    return FakeModel


@pytest.fixture
def search_tools() -> dict[str, FakeTool]:
    return {
        "duckduckgo": FakeTool("DDG findings", ["https://a.example", "https://b.example"]),
        "wikipedia": FakeTool(
            "Wiki findings", ["https://a.example", "https://c.example", "https://b.example"]
        ),
    }


@pytest.fixture
def tool_registry(search_tools: dict[str, FakeTool]) -> ToolRegistry:
    registry = ToolRegistry()
    registry.register(
        ToolDefinition(name="duckduckgo", label="DuckDuckGo", description="web search"),
        search_tools["duckduckgo"],
    )
    registry.register(
        ToolDefinition(name="wikipedia", label="Wikipedia", description="encyclopedia"),
        search_tools["wikipedia"],
    )
    return registry
