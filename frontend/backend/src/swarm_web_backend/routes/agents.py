"""Agent lifecycle and task execution routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from swarm_core import RoleNotFoundError, SwarmRuntime, list_spawnable_roles
from swarm_core.agents.roles import is_spawnable
from swarm_core.execution import AGENT_NOT_FOUND

from swarm_web_backend.dependencies import get_runtime
from swarm_web_backend.models import (
    AgentListResponse,
    AgentSummary,
    CleanupResponse,
    KillResponse,
    RoleSummary,
    SpawnRequest,
    SpawnResponse,
    TaskRequest,
    TaskResponse,
    TaskResultPayload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/agents", tags=["agents"])

_runtime_dep = Depends(get_runtime)


def _valid_roles() -> list[str]:
    return [str(role.id) for role in list_spawnable_roles()]


@router.get("", response_model=AgentListResponse)
def list_agents(runtime: SwarmRuntime = _runtime_dep) -> AgentListResponse:
    """List registered agents and the roles that can be spawned."""
    return AgentListResponse(
        agents=[AgentSummary.from_agent(agent) for agent in runtime.registry.list()],
        available_roles=[RoleSummary.from_role(role) for role in list_spawnable_roles()],
    )


@router.post("/spawn", response_model=SpawnResponse)
def spawn_agent(
    payload: SpawnRequest,
    runtime: SwarmRuntime = _runtime_dep,
) -> SpawnResponse:
    """Spawn a new idle agent of a spawnable role."""
    role = (payload.role or "").strip()
    if not role:
        raise HTTPException(
            status_code=400, detail={"error": "Role is required", "validRoles": _valid_roles()}
        )
    if not is_spawnable(role):
        raise HTTPException(
            status_code=400,
            detail={"error": f"Invalid role: {role}", "validRoles": _valid_roles()},
        )
    try:
        agent = runtime.registry.spawn(role, (payload.name or "").strip() or None)
    except RoleNotFoundError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return SpawnResponse(agent=AgentSummary.from_agent(agent))


@router.post("/task", response_model=TaskResponse)
async def run_task(
    payload: TaskRequest,
    runtime: SwarmRuntime = _runtime_dep,
) -> TaskResponse:
    """Run a task and return its result with the progress notes it emitted."""
    task = payload.task.strip()
    if not task:
        raise HTTPException(status_code=400, detail="Task is required")
    if payload.role and not is_spawnable(payload.role):
        raise HTTPException(
            status_code=400,
            detail={"error": f"Invalid role: {payload.role}", "validRoles": _valid_roles()},
        )

    progress: list[str] = []
    agent, result = await runtime.dispatch(
        task, agent_id=payload.agent_id, role=payload.role, on_progress=progress.append
    )
    if agent is None and result.error == AGENT_NOT_FOUND:
        raise HTTPException(status_code=404, detail=AGENT_NOT_FOUND)

    logger.info("Task finished on %s (success=%s)", agent.id if agent else "-", result.success)
    return TaskResponse(
        success=result.success,
        task=task,
        agent=AgentSummary.from_agent(agent) if agent else None,
        result=TaskResultPayload.from_result(result),
        progress=progress,
    )


@router.post("/cleanup", response_model=CleanupResponse)
def cleanup_agents(runtime: SwarmRuntime = _runtime_dep) -> CleanupResponse:
    """Remove offline agents from the registry."""
    removed = runtime.registry.cleanup()
    return CleanupResponse(removed=removed, remaining=len(runtime.registry))


@router.post("/{agent_id}/kill", response_model=KillResponse)
def kill_agent(
    agent_id: str,
    runtime: SwarmRuntime = _runtime_dep,
) -> KillResponse:
    """Take one agent offline."""
    if not runtime.registry.kill(agent_id):
        raise HTTPException(status_code=404, detail=AGENT_NOT_FOUND)
    return KillResponse(agent_id=agent_id)
