"""Language model client."""

from swarm_core.llm.client import ModelClient

__all__ = ["ModelClient"]
