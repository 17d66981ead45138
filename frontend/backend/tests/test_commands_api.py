"""Tests for the command route."""

from __future__ import annotations


def test_fast_path_command(client) -> None:
    response = client.post("/api/commands", json={"command": " /HELP "})
    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["action"] == "HELP"


def test_kill_command_takes_agents_offline(client, runtime) -> None:
    client.post("/api/agents/spawn", json={"role": "analyst"})
    payload = client.post("/api/commands", json={"command": "/kill"}).json()
    assert payload["action"] == "KILL_ALL"
    assert payload["message"] == "All agents terminated. (1 agents taken offline)"
    assert runtime.registry.counts()["offline"] == 1


def test_unknown_command_without_model(client) -> None:
    payload = client.post(
        "/api/commands",
        json={
            "command": "pause scout",
            "agents": [{"id": "a1", "name": "Scout-1", "status": "active", "currentTask": "x"}],
        },
    ).json()
    assert payload["success"] is False
    assert payload["action"] == "UNKNOWN"
    assert payload["message"] == "Unknown command: pause scout. Try /help for available commands."


def test_empty_command_rejected(client) -> None:
    assert client.post("/api/commands", json={"command": ""}).status_code == 400
