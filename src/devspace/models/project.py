"""Project specification models."""

from typing import Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field, validator


class PrebuiltImage(BaseModel):
    """Image referenced by name, pulled by the runtime on demand."""
    kind: Literal["image"] = "image"
    reference: str = Field(..., description="Image reference, e.g. alpine:latest")

    class Config:
        """Pydantic config."""
        frozen = True


class Dockerfile(BaseModel):
    """Image built locally from a Dockerfile."""
    kind: Literal["dockerfile"] = "dockerfile"
    path: str = Field(..., description="Path to the Dockerfile")
    context: Optional[str] = Field(None, description="Build context, defaults to the Dockerfile directory")

    class Config:
        """Pydantic config."""
        frozen = True


ImageSource = Union[PrebuiltImage, Dockerfile]


def sanitize_name(name: str) -> str:
    """Turn a free-form project name into a runtime-safe one."""
    return name.strip().replace(" ", "_")


class ProjectSpec(BaseModel):
    """Resolved development container declaration for one project."""
    name: str = Field(..., description="Project name, also the container name")
    image_source: ImageSource = Field(..., discriminator="kind")
    post_create_command: Optional[List[str]] = None
    root: str = Field(default=".", description="Project root on the host")
    workspace_folder: Optional[str] = Field(None, description="Mount point of the root inside the container")
    mounts: List[str] = Field(default_factory=list)
    container_env: Dict[str, str] = Field(default_factory=dict)
    remote_user: Optional[str] = None

    @validator("name")
    def validate_name(cls, v):
        """Replace spaces and reject empty names."""
        v = sanitize_name(v)
        if not v:
            raise ValueError("project name must not be empty")
        return v

    @validator("post_create_command")
    def validate_post_create_command(cls, v):
        """Treat an empty command list as no command."""
        return v or None

    @property
    def workdir(self) -> str:
        """Working directory inside the container."""
        return self.workspace_folder or f"/workspace/{self.name}"

    @property
    def image_name(self) -> str:
        """Name the container's image is tagged or referenced with."""
        if isinstance(self.image_source, PrebuiltImage):
            return self.image_source.reference
        return f"{self.name}:latest"

    class Config:
        """Pydantic config."""
        frozen = True
        extra = "forbid"
