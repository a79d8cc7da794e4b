"""
devspace - reproducible development containers.

Reconciles a project's ``.devcontainer/devcontainer.json`` against the
local Docker runtime: builds the image and creates the container only
when they are missing, then attaches an interactive shell.
"""

__version__ = "0.1.0"

# Re-export key components for easier access
from devspace.models.project import ProjectSpec
from devspace.models.state import ContainerState, ImageState

__all__ = [
    "ProjectSpec",
    "ContainerState",
    "ImageState",
]
