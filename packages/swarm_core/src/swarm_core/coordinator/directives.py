"""Spawn directives embedded in coordinator model replies.

The coordinator model may include a block such as::

    ```json
    {"action": "spawn_and_task", "role": "web-searcher", "task": "..."}
    ```

Fenced blocks are checked first, then any inline object in the reply.
Anything incomplete, or naming a role that cannot be spawned, counts as no
directive.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from swarm_core.agents.roles import RoleId, is_spawnable
from swarm_core.parsing import extract_fenced_json, iter_json_spans, strip_fenced_json

SPAWN_ACTION = "spawn_and_task"
# Fence left behind once an inline directive is cut out of a plain code block.
_EMPTY_FENCE_RE = re.compile(r"^[ \t]*```[\w-]*[ \t]*\n\s*```[ \t]*$", re.MULTILINE)


@dataclass(frozen=True)
class SpawnDirective:
    """Request to spawn an agent of a role and run a task on it."""

    role: RoleId
    task: str
    prose: str = ""


def _directive_fields(data: dict[str, Any]) -> tuple[RoleId, str] | None:
    if data.get("action") != SPAWN_ACTION:
        return None
    role = data.get("role")
    task = data.get("task")
    if not isinstance(role, str) or not isinstance(task, str) or not task.strip():
        return None
    role = role.strip()
    if not is_spawnable(role):
        return None
    return RoleId(role), task.strip()


def parse_spawn_directive(text: str) -> SpawnDirective | None:
    """Return the spawn directive in a reply, or None when there is none."""
    fenced = extract_fenced_json(text)
    if fenced is not None:
        fields = _directive_fields(fenced)
        if fields is not None:
            return SpawnDirective(*fields, prose=strip_fenced_json(text))

    for start, end, data in iter_json_spans(text):
        fields = _directive_fields(data)
        if fields is not None:
            prose = _EMPTY_FENCE_RE.sub("", strip_fenced_json(text[:start] + text[end:])).strip()
            return SpawnDirective(*fields, prose=prose)
    return None
