"""Configuration package."""

from swarm_core.config.settings import PLACEHOLDER_API_KEY, Settings, load_settings

__all__ = ["PLACEHOLDER_API_KEY", "Settings", "load_settings"]
