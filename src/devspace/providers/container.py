"""Container resolver for project containers."""

import logging
import posixpath
from pathlib import Path
from typing import Dict, List, Optional

from devspace.errors import AmbiguousContainerError, InvalidTransition
from devspace.models.config import UserConfig
from devspace.models.project import ProjectSpec
from devspace.models.state import ContainerState, LifecycleState
from devspace.providers.image import ImageResolver
from devspace.runtime.base import RuntimeClient


logger = logging.getLogger(__name__)

WORKSPACE = "/workspace"
SHARE_SPACE = posixpath.join(WORKSPACE, ".devspace")
DOTFILES_DIR = posixpath.join(SHARE_SPACE, "dotfiles")
BOOTSTRAP_SCRIPTS = ["bootstrap"]

# Keeps the container alive between attached sessions
IDLE_COMMAND = ["sleep", "infinity"]


class ContainerResolver:
    """Classifies a project's container and moves it between lifecycle states.

    State is never stored: every decision starts from :meth:`resolve`,
    which asks the runtime for containers carrying the project label.
    """

    def __init__(
        self,
        client: RuntimeClient,
        image_resolver: Optional[ImageResolver] = None,
        user_config: Optional[UserConfig] = None,
    ):
        """Initialize container resolver."""
        self.client = client
        self.image_resolver = image_resolver or ImageResolver(client)
        self.user_config = user_config or UserConfig()

    def resolve(self, name: str) -> ContainerState:
        """Query the runtime for the project's container."""
        containers = self.client.list_containers(name)

        if len(containers) > 1:
            raise AmbiguousContainerError(name, len(containers))

        summary = containers[0] if containers else None
        state = ContainerState(name=name, summary=summary)
        logger.debug(f"Container {name} is {state.lifecycle.value}")
        return state

    def ensure_setup(self, state: ContainerState, project: ProjectSpec) -> ContainerState:
        """Create, start and provision the container of a new project."""
        self._require(state, LifecycleState.ABSENT, "set up")

        image = self.image_resolver.ensure(project)

        self.client.run(
            project.name,
            image.name,
            detach=True,
            args=list(IDLE_COMMAND),
            volumes=self._volumes(project),
            env=self._env(project),
            workdir=project.workdir,
        )

        if project.post_create_command:
            logger.info(f"Running post-create command in {project.name}")
            self.client.exec(project.name, project.post_create_command, workdir=project.workdir)

        if self.user_config.dotfiles:
            self.client.exec(
                project.name,
                self._bootstrap_command(),
                workdir=project.workdir,
                user=project.remote_user,
            )

        return self.resolve(project.name)

    def ensure_started(self, state: ContainerState) -> ContainerState:
        """Start a stopped container."""
        self._require(state, LifecycleState.STOPPED, "start")
        self.client.start_container(state.name)
        return self.resolve(state.name)

    def attach(
        self,
        state: ContainerState,
        command: List[str],
        workdir: Optional[str] = None,
        user: Optional[str] = None,
    ) -> None:
        """Run an interactive command; returns when it exits."""
        self._require(state, LifecycleState.RUNNING, "attach to")
        self.client.exec(state.name, command, workdir=workdir, user=user)

    def teardown(self, state: ContainerState, timeout: Optional[int] = None) -> None:
        """Stop a running container."""
        self._require(state, LifecycleState.RUNNING, "stop")
        self.client.stop_container(state.name, timeout)

    def _require(self, state: ContainerState, expected: LifecycleState, operation: str) -> None:
        if state.lifecycle is not expected:
            raise InvalidTransition(operation, state.name, state.lifecycle.value)

    def _volumes(self, project: ProjectSpec) -> List[str]:
        volumes = [f"{Path(project.root).resolve()}:{project.workdir}"]
        if self.user_config.dotfiles:
            dotfiles = Path(self.user_config.dotfiles).expanduser()
            volumes.append(f"{dotfiles}:{DOTFILES_DIR}")
        volumes.extend(project.mounts)
        return volumes

    def _env(self, project: ProjectSpec) -> Dict[str, str]:
        env = {
            "DEVSPACE": "true",
            "DEVSPACE_SHARE": SHARE_SPACE,
            "DEVSPACE_DOTFILES": DOTFILES_DIR,
        }
        env.update(project.container_env)
        return env

    def _bootstrap_command(self) -> List[str]:
        """Command installing the user's dotfiles inside the container."""
        host_dir = Path(self.user_config.dotfiles).expanduser()
        for script in BOOTSTRAP_SCRIPTS:
            if (host_dir / script).is_file():
                logger.debug(f"Found dotfile script: {host_dir / script}")
                return ["/bin/sh", posixpath.join(DOTFILES_DIR, script)]

        logger.debug("No dotfile script found, linking dotfiles")
        pattern = posixpath.join(DOTFILES_DIR, ".[a-zA-Z0-9]*")
        return ["/bin/sh", "-c", f"ln -s {pattern} $HOME/"]
