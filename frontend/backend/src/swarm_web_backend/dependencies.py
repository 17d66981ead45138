"""FastAPI dependencies for shared services.

Routes receive the runtime through Depends so tests can override it.
"""

from __future__ import annotations

from swarm_core import SwarmRuntime  # noqa: TC002 (FastAPI resolves the annotation)

from swarm_web_backend.services.runtime import RuntimeService


def get_runtime() -> SwarmRuntime:
    """Get the shared SwarmRuntime instance."""
    return RuntimeService.get_runtime()
