"""Swarm runtime service.

Holds the process-wide SwarmRuntime used by the routes.
"""

from __future__ import annotations

import logging
import threading

from swarm_core import SwarmRuntime

logger = logging.getLogger(__name__)

_runtime: SwarmRuntime | None = None
_runtime_lock = threading.Lock()


class RuntimeService:
    """Create, share and tear down the swarm runtime."""

    @staticmethod
    def get_runtime() -> SwarmRuntime:
        """Get or create the shared runtime (thread-safe)."""
        global _runtime  # noqa: PLW0603
        if _runtime is None:
            with _runtime_lock:
                if _runtime is None:  # Double-checked locking
                    _runtime = SwarmRuntime()
                    logger.info("SwarmRuntime initialized")
        return _runtime

    @staticmethod
    async def shutdown() -> None:
        """Close the shared runtime if it was created."""
        global _runtime  # noqa: PLW0603
        with _runtime_lock:
            runtime, _runtime = _runtime, None
        if runtime is not None:
            await runtime.aclose()
            logger.info("SwarmRuntime closed")
