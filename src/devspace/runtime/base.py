"""Container runtime client interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from devspace.models.state import ContainerSummary, ImageSummary


# Label identifying every image and container owned by a project
PROJECT_KEY = "ds_project"


def project_labels(project_name: str) -> Dict[str, str]:
    """Labels attached to a project's image and container."""
    return {PROJECT_KEY: project_name}


def label_filter(project_name: str) -> str:
    """Runtime label filter selecting one project's resources."""
    return f"{PROJECT_KEY}={project_name}"


def owned_by(labels: Optional[Dict[str, str]], project_name: str) -> bool:
    """Exact label match; a prefix or substring match is not ownership."""
    return (labels or {}).get(PROJECT_KEY) == project_name


class RuntimeClient(ABC):
    """Capabilities the reconciler needs from a container runtime."""

    @abstractmethod
    def list_containers(self, project_name: str) -> List[ContainerSummary]:
        """List all containers, including stopped ones, labeled for the project."""
        pass

    @abstractmethod
    def list_images(self, project_name: str) -> List[ImageSummary]:
        """List images labeled for the project."""
        pass

    @abstractmethod
    def build_image(self, project_name: str, dockerfile: str, context: Optional[str] = None) -> None:
        """Build ``{project_name}:latest`` from a Dockerfile."""
        pass

    @abstractmethod
    def start_container(self, name: str) -> None:
        """Start an existing stopped container."""
        pass

    @abstractmethod
    def stop_container(self, name: str, timeout: Optional[int] = None) -> None:
        """Stop a running container."""
        pass

    @abstractmethod
    def run(
        self,
        name: str,
        image: str,
        detach: bool,
        args: List[str],
        volumes: Optional[List[str]] = None,
        env: Optional[Dict[str, str]] = None,
        workdir: Optional[str] = None,
    ) -> None:
        """Create and start a new labeled container."""
        pass

    @abstractmethod
    def exec(
        self,
        name: str,
        command: List[str],
        workdir: Optional[str] = None,
        user: Optional[str] = None,
    ) -> None:
        """Run an interactive command inside a running container."""
        pass
