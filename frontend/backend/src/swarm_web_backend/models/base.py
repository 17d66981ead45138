"""Base model for API payloads."""

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Base API model; fields declare camelCase aliases and accept either name."""

    model_config = ConfigDict(populate_by_name=True)
