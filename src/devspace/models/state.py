"""Observed runtime state models.

Nothing here is persisted: every instance is built from a fresh label
query against the runtime.
"""

from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class LifecycleState(Enum):
    """Container lifecycle state derived from a label query."""
    ABSENT = "absent"
    STOPPED = "stopped"
    RUNNING = "running"


class ContainerSummary(BaseModel):
    """Runtime-neutral view of one listed container."""
    id: str
    name: str
    state: str = Field(..., description="Runtime state string, e.g. running or exited")
    image: Optional[str] = None
    labels: Dict[str, str] = Field(default_factory=dict)


class ImageSummary(BaseModel):
    """Runtime-neutral view of one listed image."""
    id: str
    repo_tags: List[str] = Field(default_factory=list)
    labels: Dict[str, str] = Field(default_factory=dict)


class ImageState(BaseModel):
    """Whether a project's image is available."""
    name: str
    existing: bool


class ContainerState(BaseModel):
    """A project's container as last observed."""
    name: str
    summary: Optional[ContainerSummary] = None

    @property
    def existing(self) -> bool:
        return self.summary is not None

    @property
    def running(self) -> bool:
        return self.summary is not None and self.summary.state == "running"

    @property
    def lifecycle(self) -> LifecycleState:
        if not self.existing:
            return LifecycleState.ABSENT
        if self.running:
            return LifecycleState.RUNNING
        return LifecycleState.STOPPED
