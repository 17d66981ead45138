"""Exception types shared across the orchestration core."""

from __future__ import annotations


class RoleNotFoundError(KeyError):
    """Raised when a role id is not part of the catalog."""

    def __init__(self, role_id: str) -> None:
        super().__init__(role_id)
        self.role_id = role_id

    def __str__(self) -> str:
        return f"Unknown role: {self.role_id}"


class ModelClientError(RuntimeError):
    """Base class for model client failures."""


class ModelUnavailableError(ModelClientError):
    """No model credential is configured."""


class ModelError(ModelClientError):
    """The completion call failed (transport error or non-2xx status)."""


class ModelMalformedError(ModelClientError):
    """The completion response did not have the expected shape."""
