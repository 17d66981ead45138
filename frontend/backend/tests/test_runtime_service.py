"""Tests for runtime service caching behavior."""

import asyncio

from swarm_web_backend.services import runtime as runtime_module


class DummyRuntime:
    init_count = 0
    closed = 0

    def __init__(self) -> None:
        type(self).init_count += 1

    async def aclose(self) -> None:
        type(self).closed += 1


def test_runtime_service_singleton(monkeypatch) -> None:
    monkeypatch.setattr(runtime_module, "SwarmRuntime", DummyRuntime)
    monkeypatch.setattr(runtime_module, "_runtime", None)
    DummyRuntime.init_count = 0

    runtime_one = runtime_module.RuntimeService.get_runtime()
    runtime_two = runtime_module.RuntimeService.get_runtime()

    assert runtime_one is runtime_two
    assert DummyRuntime.init_count == 1


def test_runtime_service_shutdown(monkeypatch) -> None:
    monkeypatch.setattr(runtime_module, "SwarmRuntime", DummyRuntime)
    monkeypatch.setattr(runtime_module, "_runtime", None)
    DummyRuntime.closed = 0

    runtime_module.RuntimeService.get_runtime()
    asyncio.run(runtime_module.RuntimeService.shutdown())
    asyncio.run(runtime_module.RuntimeService.shutdown())

    assert DummyRuntime.closed == 1
    assert runtime_module._runtime is None
