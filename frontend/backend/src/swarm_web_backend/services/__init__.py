"""Services for the swarm web backend."""

from swarm_web_backend.services.request_context import (
    RequestIdFilter,
    get_request_id,
    request_id_middleware,
)
from swarm_web_backend.services.runtime import RuntimeService

__all__ = ["RequestIdFilter", "RuntimeService", "get_request_id", "request_id_middleware"]
