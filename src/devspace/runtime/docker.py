"""Docker implementation of the runtime client.

Listing and start/stop go through the Docker SDK. Build, run and exec
shell out to the ``docker`` executable so that build output and
interactive sessions reach the terminal untouched.
"""

import logging
import shlex
import shutil
from pathlib import Path
from typing import Dict, List, Optional

import docker
from docker.errors import DockerException

from devspace.errors import (
    BuildFailed,
    ExecutionError,
    ExecutionFailed,
    RuntimeQueryFailed,
)
from devspace.models.commands import BuildSpec, ExecSpec, RunSpec
from devspace.models.state import ContainerSummary, ImageSummary
from devspace.runtime.base import RuntimeClient, label_filter, owned_by, project_labels
from devspace.utils.process import run_command


logger = logging.getLogger(__name__)


class DockerRuntimeClient(RuntimeClient):
    """Runtime client backed by a local Docker daemon."""

    def __init__(self, client: Optional[docker.DockerClient] = None, executable: Optional[str] = None):
        """Initialize the client; connections are opened on first use."""
        self._client = client
        self._executable = executable

    @property
    def client(self) -> docker.DockerClient:
        """Docker SDK client created from the environment."""
        if self._client is None:
            try:
                self._client = docker.from_env()
            except DockerException as e:
                raise RuntimeQueryFailed(f"can not connect to docker daemon: {e}") from e
        return self._client

    @property
    def executable(self) -> str:
        """Path of the docker command-line executable."""
        if self._executable is None:
            path = shutil.which("docker")
            if path is None:
                raise ExecutionFailed("can not find docker executable")
            self._executable = path
        return self._executable

    def list_containers(self, project_name: str) -> List[ContainerSummary]:
        """List all containers labeled for the project."""
        try:
            raw = self.client.api.containers(all=True, filters={"label": label_filter(project_name)})
        except DockerException as e:
            raise RuntimeQueryFailed(f"can not list containers for {project_name}: {e}") from e

        containers = []
        for item in raw:
            labels = item.get("Labels") or {}
            if not owned_by(labels, project_name):
                logger.debug(f"Ignoring container {item.get('Id')} without exact project label")
                continue
            names = item.get("Names") or []
            containers.append(ContainerSummary(
                id=item["Id"],
                name=names[0].lstrip("/") if names else "",
                state=item.get("State") or "",
                image=item.get("Image"),
                labels=labels,
            ))

        logger.debug(f"Found {len(containers)} containers for {project_name}")
        return containers

    def list_images(self, project_name: str) -> List[ImageSummary]:
        """List images labeled for the project."""
        try:
            raw = self.client.api.images(all=True, filters={"label": label_filter(project_name)})
        except DockerException as e:
            raise RuntimeQueryFailed(f"can not list images for {project_name}: {e}") from e

        images = []
        for item in raw:
            labels = item.get("Labels") or {}
            if not owned_by(labels, project_name):
                continue
            images.append(ImageSummary(
                id=item["Id"],
                repo_tags=item.get("RepoTags") or [],
                labels=labels,
            ))

        logger.debug(f"Found {len(images)} images for {project_name}")
        return images

    def build_image(self, project_name: str, dockerfile: str, context: Optional[str] = None) -> None:
        """Build ``{project_name}:latest`` with the docker CLI."""
        spec = BuildSpec(
            tag=f"{project_name}:latest",
            dockerfile=dockerfile,
            context=context or str(Path(dockerfile).parent),
            labels=project_labels(project_name),
        )
        logger.info(f"Building image {spec.tag} from {dockerfile}")

        try:
            run_command([self.executable, *spec.to_args()])
        except ExecutionError as e:
            raise BuildFailed(f"failed to build image {spec.tag}: {e}") from e

    def start_container(self, name: str) -> None:
        """Start a stopped container."""
        logger.info(f"Starting container {name}")
        try:
            self.client.containers.get(name).start()
        except DockerException as e:
            raise ExecutionFailed(f"failed to start container {name}: {e}") from e

    def stop_container(self, name: str, timeout: Optional[int] = None) -> None:
        """Stop a running container."""
        logger.info(f"Stopping container {name}")
        kwargs = {} if timeout is None else {"timeout": timeout}
        try:
            self.client.containers.get(name).stop(**kwargs)
        except DockerException as e:
            raise ExecutionFailed(f"failed to stop container {name}: {e}") from e

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
        """Create and start a labeled container with the docker CLI."""
        spec = RunSpec(
            name=name,
            image=image,
            detach=detach,
            labels=project_labels(name),
            volumes=volumes or [],
            env=env or {},
            workdir=workdir,
            command=args,
        )
        logger.info(f"Creating container {name} from {image}")

        try:
            run_command([self.executable, *spec.to_args()])
        except ExecutionError as e:
            raise ExecutionFailed(f"failed to run container {name}: {e}") from e

    def exec(
        self,
        name: str,
        command: List[str],
        workdir: Optional[str] = None,
        user: Optional[str] = None,
    ) -> None:
        """Attach an interactive command to a running container."""
        spec = ExecSpec(name=name, command=command, workdir=workdir, user=user)

        try:
            run_command([self.executable, *spec.to_args()])
        except ExecutionError as e:
            raise ExecutionFailed(f"failed to exec {shlex.join(command)} in container {name}: {e}") from e
