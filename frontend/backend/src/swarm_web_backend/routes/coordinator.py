"""Master agent (coordinator) routes."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException
from swarm_core import SwarmRuntime

from swarm_web_backend.dependencies import get_runtime
from swarm_web_backend.models import (
    AgentSummary,
    CoordinatorRequest,
    CoordinatorResponse,
    TaskResultPayload,
)

if TYPE_CHECKING:
    from collections.abc import Coroutine

    from swarm_core import CoordinatorReply

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["coordinator"])

_runtime_dep = Depends(get_runtime)

_BACKGROUND_TASKS: set[asyncio.Task[CoordinatorReply]] = set()


def _schedule_background_task(
    coro: Coroutine[object, object, CoordinatorReply],
) -> asyncio.Task[CoordinatorReply]:
    task = asyncio.create_task(coro)
    _BACKGROUND_TASKS.add(task)
    task.add_done_callback(_finish_background_task)
    return task


def _finish_background_task(task: asyncio.Task[CoordinatorReply]) -> None:
    _BACKGROUND_TASKS.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Coordinator turn failed", exc_info=exc)


def _to_response(reply: CoordinatorReply) -> CoordinatorResponse:
    return CoordinatorResponse(
        response=reply.text,
        agent_used=AgentSummary.from_agent(reply.spawned_agent) if reply.spawned_agent else None,
        task_result=TaskResultPayload.from_result(reply.task_result)
        if reply.task_result
        else None,
        fallback=reply.fallback,
    )


@router.post("/master-agent", response_model=CoordinatorResponse)
async def master_agent(
    payload: CoordinatorRequest,
    runtime: SwarmRuntime = _runtime_dep,
) -> CoordinatorResponse:
    """Handle one coordinator turn.

    The turn runs as a tracked task. When it outlives the configured timeout
    the caller gets a pending reply and the turn keeps running, so spawned
    agents still reach idle or stuck.
    """
    message = payload.message.strip()
    if not message:
        raise HTTPException(status_code=400, detail="Message is required")

    turn = _schedule_background_task(
        runtime.coordinator.respond(
            message,
            agents=[agent.to_snapshot() for agent in payload.agents],
            tasks=[task.to_snapshot() for task in payload.tasks],
            recent_messages=[entry.to_snapshot() for entry in payload.recent_messages],
        )
    )
    try:
        reply = await asyncio.wait_for(
            asyncio.shield(turn), timeout=runtime.settings.coordinator_timeout
        )
    except TimeoutError:
        logger.warning("Coordinator turn exceeded %ss", runtime.settings.coordinator_timeout)
        return CoordinatorResponse(
            response=f'Still working on: "{message}". Agent results will appear when ready.',
            fallback=True,
            pending=True,
        )
    return _to_response(reply)
