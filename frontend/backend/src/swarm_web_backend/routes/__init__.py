"""API routers for the swarm web backend."""

from swarm_web_backend.routes.agents import router as agents_router
from swarm_web_backend.routes.commands import router as commands_router
from swarm_web_backend.routes.coordinator import router as coordinator_router
from swarm_web_backend.routes.health import router as health_router

__all__ = ["agents_router", "commands_router", "coordinator_router", "health_router"]
