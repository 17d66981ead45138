import pytest
from fastapi.testclient import TestClient
from swarm_core import Settings, SwarmRuntime, ToolDefinition, ToolFindings, ToolRegistry
from swarm_web_backend.dependencies import get_runtime
from swarm_web_backend.main import app


class OfflineModel:
    """Model stand-in without a credential; every caller takes its offline path."""

    is_configured = False

    async def complete(self, *_args, **_kwargs) -> str:
        msg = "OfflineModel should not be called"
        raise AssertionError(msg)

    async def aclose(self) -> None:
        return None


async def _search(query: str) -> ToolFindings:
    return ToolFindings(findings=f"findings for {query}", sources=["https://example.com/a"])


@pytest.fixture
def tools() -> ToolRegistry:
    tools = ToolRegistry()
    tools.register(ToolDefinition(name="duckduckgo", label="DuckDuckGo", description="search"), _search)
    tools.register(ToolDefinition(name="wikipedia", label="Wikipedia", description="lookup"), _search)
    return tools


@pytest.fixture
def runtime(tools: ToolRegistry) -> SwarmRuntime:
    return SwarmRuntime(Settings(), tools=tools, model=OfflineModel())


@pytest.fixture
def client(runtime: SwarmRuntime) -> TestClient:
    """Create a test client bound to an isolated runtime."""
    app.dependency_overrides[get_runtime] = lambda: runtime

    yield TestClient(app)

    # Clean up override after test
    app.dependency_overrides.clear()
