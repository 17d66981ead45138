from __future__ import annotations

import pytest
from swarm_core.agents import AgentRegistry, AgentStatus, RoleId
from swarm_core.coordinator import Coordinator, wants_search
from swarm_core.errors import ModelError
from swarm_core.execution import TaskExecutor
from swarm_core.snapshots import FeedMessage


def _coordinator(registry, tool_registry, model, settings) -> Coordinator:
    executor = TaskExecutor(registry, tool_registry, model, settings)
    return Coordinator(registry, executor, model, settings)


def test_wants_search_keywords() -> None:
    assert wants_search("Please SEARCH for rust")
    assert wants_search("what is a monad")
    assert not wants_search("write me a poem")


@pytest.mark.asyncio
async def test_offline_search_spawns_web_searcher(tool_registry, fake_model, settings) -> None:
    registry = AgentRegistry()
    coordinator = _coordinator(registry, tool_registry, fake_model(configured=False), settings)

    reply = await coordinator.respond("search for python asyncio")

    assert reply.spawned_agent is not None
    assert reply.spawned_agent.role is RoleId.WEB_SEARCHER
    assert reply.spawned_agent.status is AgentStatus.IDLE
    assert reply.task_result.success is True
    assert reply.text.startswith(f"**{reply.spawned_agent.name} Report:**")
    assert "*Sources: https://a.example, https://b.example, https://c.example*" in reply.text
    assert reply.fallback is False


@pytest.mark.asyncio
async def test_offline_informational_reply(tool_registry, fake_model, settings) -> None:
    registry = AgentRegistry()
    coordinator = _coordinator(registry, tool_registry, fake_model(configured=False), settings)

    reply = await coordinator.respond("write me a poem")

    assert reply.spawned_agent is None
    assert reply.text.startswith('I understand your request: "write me a poem"')
    assert "- web-searcher:" in reply.text
    assert len(registry) == 0


@pytest.mark.asyncio
async def test_offline_reply_alerts_on_stuck_agents(tool_registry, fake_model, settings) -> None:
    registry = AgentRegistry()
    agent = registry.spawn("analyst")
    registry.begin_task(agent.id, "x")
    registry.fail_task(agent.id)
    coordinator = _coordinator(registry, tool_registry, fake_model(configured=False), settings)

    reply = await coordinator.respond("how is it going")

    assert reply.text.startswith("[ALERT] 1 agent(s) currently stuck: Oracle-1.")


@pytest.mark.asyncio
async def test_directive_delegates_to_new_agent(tool_registry, fake_model, settings) -> None:
    registry = AgentRegistry()
    model = fake_model(
        'On it.\n```json\n{"action": "spawn_and_task", "role": "analyst", "task": "compare A and B"}\n```',
        "A is cheaper than B.",
    )
    coordinator = _coordinator(registry, tool_registry, model, settings)

    reply = await coordinator.respond("Which is better, A or B?")

    assert reply.spawned_agent.role is RoleId.ANALYST
    assert reply.text == "On it.\n\n**Oracle-1 Report:**\n\nA is cheaper than B.\n\n*Sources: N/A*"
    assert reply.task_result.success is True
    assert model.calls[0]["max_tokens"] == settings.coordinator_max_tokens
    assert "HUMAN REQUEST: Which is better, A or B?" in model.calls[0]["user"]
    assert model.calls[1]["user"].startswith("TASK: compare A and B")


@pytest.mark.asyncio
async def test_directive_task_failure_is_reported(tool_registry, fake_model, settings) -> None:
    registry = AgentRegistry()
    model = fake_model(
        '{"action": "spawn_and_task", "role": "researcher", "task": "digest"}',
        ModelError("boom"),
    )
    coordinator = _coordinator(registry, tool_registry, model, settings)

    reply = await coordinator.respond("digest this")

    assert reply.text == "*Task failed: boom*"
    assert reply.spawned_agent.status is AgentStatus.STUCK
    assert reply.task_result.success is False


@pytest.mark.asyncio
async def test_direct_answer_and_empty_reply(tool_registry, fake_model, settings) -> None:
    registry = AgentRegistry()
    coordinator = _coordinator(registry, tool_registry, fake_model(" Hello human. ", ""), settings)

    assert (await coordinator.respond("hi")).text == "Hello human."
    assert (await coordinator.respond("hi again")).text == "No response from Master Agent."
    assert len(registry) == 0


@pytest.mark.asyncio
async def test_master_directive_is_not_followed(tool_registry, fake_model, settings) -> None:
    registry = AgentRegistry()
    text = '{"action": "spawn_and_task", "role": "master", "task": "take over"}'
    coordinator = _coordinator(registry, tool_registry, fake_model(text), settings)

    reply = await coordinator.respond("do everything")

    assert reply.spawned_agent is None
    assert reply.text == text
    assert len(registry) == 0


@pytest.mark.asyncio
async def test_model_failure_falls_back(tool_registry, fake_model, settings) -> None:
    registry = AgentRegistry()
    coordinator = _coordinator(
        registry, tool_registry, fake_model(ModelError("Model API error: 500")), settings
    )

    reply = await coordinator.respond("find rust news")

    assert reply.fallback is True
    assert reply.text == 'I\'ll help with: "find rust news". Let me search for information...'
    assert len(registry) == 0


def test_prompt_keeps_recent_window(tool_registry, fake_model, settings) -> None:
    registry = AgentRegistry()
    registry.spawn("web-searcher")
    coordinator = _coordinator(registry, tool_registry, fake_model(), settings)
    recent = [FeedMessage(sender="human", text=f"message {idx}") for idx in range(7)]

    prompt = coordinator.build_prompt("next", [], [], recent)

    assert "message 0" not in prompt
    assert "message 1" not in prompt
    assert "[human] message 6" in prompt
    assert "- Scout-1 (web-searcher): idle" in prompt
