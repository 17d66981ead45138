"""In-memory agent registry.

The registry is the only shared mutable state in the core. Every entry carries
its own lock; the table lock is held only to insert, remove or enumerate
entries, so transitions on different agents never contend with each other.
"""

from __future__ import annotations

import asyncio
import logging
import secrets
import string
import threading
import time
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from swarm_core.agents.models import AgentInstance, AgentStatus
from swarm_core.agents.roles import get_role
from swarm_core.utils import utc_now

if TYPE_CHECKING:
    from swarm_core.agents.roles import RoleId

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_SUFFIX_LENGTH = 5

# Allowed status edges. Offline is terminal: writes racing with a kill are dropped.
_EDGES: dict[AgentStatus, frozenset[AgentStatus]] = {
    AgentStatus.IDLE: frozenset({AgentStatus.ACTIVE, AgentStatus.OFFLINE}),
    AgentStatus.ACTIVE: frozenset(
        {AgentStatus.ACTIVE, AgentStatus.IDLE, AgentStatus.STUCK, AgentStatus.OFFLINE}
    ),
    AgentStatus.STUCK: frozenset({AgentStatus.OFFLINE}),
    AgentStatus.OFFLINE: frozenset(),
}

_KEEP_TASK = object()


@dataclass
class _Entry:
    record: AgentInstance
    lock: threading.Lock = field(default_factory=threading.Lock)
    execution_lock: asyncio.Lock = field(default_factory=asyncio.Lock)


def can_transition(current: AgentStatus, target: AgentStatus) -> bool:
    """Whether the state machine allows moving from current to target."""
    return target in _EDGES[current]


def _new_agent_id() -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"agent-{int(time.time() * 1000)}-{suffix}"


class AgentRegistry:
    """Process-lifetime table of agent instances keyed by id."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, agent_id: object) -> bool:
        with self._lock:
            return agent_id in self._entries

    def spawn(self, role: str | RoleId, name: str | None = None) -> AgentInstance:
        """Create a new idle agent bound to the given role."""
        role_def = get_role(role)
        now = utc_now()
        with self._lock:
            agent_id = _new_agent_id()
            while agent_id in self._entries:
                agent_id = _new_agent_id()
            record = AgentInstance(
                id=agent_id,
                role=role_def.id,
                name=name or f"{role_def.display_name}-{len(self._entries) + 1}",
                status=AgentStatus.IDLE,
                created_at=now,
                last_active_at=now,
            )
            self._entries[agent_id] = _Entry(record=record)
        logger.info("Spawned %s (%s) as %s", record.name, record.role, record.id)
        return record

    def list(self) -> list[AgentInstance]:
        """Return snapshots of every registered agent."""
        with self._lock:
            entries = list(self._entries.values())
        return [entry.record for entry in entries]

    def get(self, agent_id: str) -> AgentInstance | None:
        """Return the agent snapshot for an id, if registered."""
        entry = self._entry(agent_id)
        return entry.record if entry is not None else None

    def find(self, ref: str) -> AgentInstance | None:
        """Resolve an agent by id, falling back to a case-insensitive name match."""
        needle = ref.strip()
        if not needle:
            return None
        found = self.get(needle)
        if found is not None:
            return found
        lowered = needle.lower()
        return next((agent for agent in self.list() if agent.name.lower() == lowered), None)

    def find_idle(self, role: str | RoleId) -> AgentInstance | None:
        """Return the first idle agent of a role."""
        role_id = get_role(role).id
        return next(
            (
                agent
                for agent in self.list()
                if agent.role is role_id and agent.status is AgentStatus.IDLE
            ),
            None,
        )

    def counts(self) -> dict[str, int]:
        """Return the number of agents per status."""
        totals = {str(status): 0 for status in AgentStatus}
        for agent in self.list():
            totals[str(agent.status)] += 1
        return totals

    def execution_lock(self, agent_id: str) -> asyncio.Lock | None:
        """Return the lock serializing task executions for one agent."""
        entry = self._entry(agent_id)
        return entry.execution_lock if entry is not None else None

    def set_status(
        self,
        agent_id: str,
        status: AgentStatus,
        task: str | None | object = _KEEP_TASK,
    ) -> AgentInstance | None:
        """Apply a status transition.

        Unknown ids and transitions outside the state machine are ignored and
        return None; status writes may race with a kill or cleanup.
        """
        entry = self._entry(agent_id)
        if entry is None:
            return None
        with entry.lock:
            current = entry.record
            if not can_transition(current.status, status):
                logger.debug(
                    "Ignoring transition %s -> %s for %s", current.status, status, agent_id
                )
                return None
            changes: dict[str, object] = {"status": status, "last_active_at": utc_now()}
            if task is not _KEEP_TASK:
                changes["current_task"] = task
            entry.record = replace(current, **changes)
            return entry.record

    def begin_task(self, agent_id: str, task: str) -> AgentInstance | None:
        """Mark an idle or active agent as working on a task."""
        return self.set_status(agent_id, AgentStatus.ACTIVE, task)

    def complete_task(self, agent_id: str) -> AgentInstance | None:
        """Return an active agent to idle and clear its task."""
        return self.set_status(agent_id, AgentStatus.IDLE, None)

    def fail_task(self, agent_id: str) -> AgentInstance | None:
        """Mark an active agent as stuck, keeping its task for diagnosis."""
        return self.set_status(agent_id, AgentStatus.STUCK)

    def kill(self, agent_id: str) -> bool:
        """Take an agent offline. Returns False when the id is unknown."""
        entry = self._entry(agent_id)
        if entry is None:
            return False
        if self.set_status(agent_id, AgentStatus.OFFLINE, None) is not None:
            logger.info("Killed %s", entry.record.name)
        return True

    def kill_all(self) -> int:
        """Take every non-offline agent offline and return how many changed."""
        killed = 0
        for agent in self.list():
            if agent.status is AgentStatus.OFFLINE:
                continue
            if self.set_status(agent.id, AgentStatus.OFFLINE, None) is not None:
                killed += 1
        if killed:
            logger.info("Killed %d agents", killed)
        return killed

    def cleanup(self) -> int:
        """Remove offline agents from the table and return how many were removed."""
        removed = 0
        with self._lock:
            for agent_id, entry in list(self._entries.items()):
                with entry.lock:
                    if entry.record.status is not AgentStatus.OFFLINE:
                        continue
                del self._entries[agent_id]
                removed += 1
        if removed:
            logger.info("Removed %d offline agents", removed)
        return removed

    def _entry(self, agent_id: str) -> _Entry | None:
        with self._lock:
            return self._entries.get(agent_id)
