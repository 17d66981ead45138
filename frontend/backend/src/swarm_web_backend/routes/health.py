"""Health, role catalog and tool listing routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from swarm_core import SwarmRuntime, list_spawnable_roles

from swarm_web_backend.dependencies import get_runtime
from swarm_web_backend.models import RoleSummary

router = APIRouter(prefix="/api", tags=["health"])

_runtime_dep = Depends(get_runtime)


@router.get("/health")
def health(runtime: SwarmRuntime = _runtime_dep) -> dict[str, Any]:
    """Report liveness, model availability and agent counts."""
    return {
        "status": "ok",
        "modelConfigured": runtime.model.is_configured,
        "agents": runtime.registry.counts(),
    }


@router.get("/roles", response_model=list[RoleSummary])
def list_roles() -> list[RoleSummary]:
    """List roles that can be spawned."""
    return [RoleSummary.from_role(role) for role in list_spawnable_roles()]


@router.get("/tools")
def list_tools(runtime: SwarmRuntime = _runtime_dep) -> list[dict[str, Any]]:
    """List registered tool adapters."""
    return runtime.tools.list()
