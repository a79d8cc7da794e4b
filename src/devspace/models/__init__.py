"""Pydantic models for configuration and runtime state."""

from devspace.models.commands import BuildSpec, RunSpec, ExecSpec
from devspace.models.config import UserConfig
from devspace.models.project import ProjectSpec, PrebuiltImage, Dockerfile, ImageSource
from devspace.models.state import (
    ContainerState,
    ContainerSummary,
    ImageState,
    ImageSummary,
    LifecycleState,
)

__all__ = [
    "BuildSpec",
    "RunSpec",
    "ExecSpec",
    "UserConfig",
    "ProjectSpec",
    "PrebuiltImage",
    "Dockerfile",
    "ImageSource",
    "ContainerState",
    "ContainerSummary",
    "ImageState",
    "ImageSummary",
    "LifecycleState",
]
