"""Control command routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from swarm_core import SwarmRuntime, apply_command

from swarm_web_backend.dependencies import get_runtime
from swarm_web_backend.models import CommandRequest, CommandResponse

router = APIRouter(prefix="/api", tags=["commands"])

_runtime_dep = Depends(get_runtime)


@router.post("/commands", response_model=CommandResponse)
async def run_command(
    payload: CommandRequest,
    runtime: SwarmRuntime = _runtime_dep,
) -> CommandResponse:
    """Interpret a control instruction and apply registry-owned effects."""
    command = payload.command.strip()
    if not command:
        raise HTTPException(status_code=400, detail="Command is required")

    action = await runtime.router.route(
        command,
        agents=[agent.to_snapshot() for agent in payload.agents],
        tasks=[task.to_snapshot() for task in payload.tasks],
    )
    applied = apply_command(action, runtime.registry)
    return CommandResponse.model_validate(applied.to_dict())
