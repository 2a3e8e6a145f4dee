"""Models for cluster objects that have no typed kubernetes client model."""

from typing import Any

from pydantic import BaseModel, Field


class Project(BaseModel):
    """An OpenShift project; its name is also its namespace."""

    model_config = {"frozen": True}

    name: str = Field(..., min_length=1)
    labels: dict[str, str] = Field(default_factory=dict)

    @property
    def namespace(self) -> str:
        return self.name

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Project":
        metadata = resource.get("metadata") or {}
        return cls(name=metadata["name"], labels=metadata.get("labels") or {})
