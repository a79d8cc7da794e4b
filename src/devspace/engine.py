"""Reconciliation driver: ensure the container is running, then attach."""

import logging
from typing import Callable, List, Optional

from devspace.models.project import ProjectSpec
from devspace.models.state import LifecycleState
from devspace.providers.container import ContainerResolver


logger = logging.getLogger(__name__)


class ReconciliationDriver:
    """Brings a project's container to running and opens a session in it."""

    def __init__(self, container_resolver: ContainerResolver):
        """Initialize reconciliation driver."""
        self.container_resolver = container_resolver

    def ensure_and_attach(
        self,
        project: ProjectSpec,
        command: List[str],
        stop_after: bool = False,
        confirm_stop: Optional[Callable[[], bool]] = None,
        stop_timeout: Optional[int] = None,
    ) -> None:
        """Reconcile the container and attach ``command`` to it.

        Any failure aborts the remaining steps and propagates as is; a
        container left stopped or half provisioned stays for inspection.
        ``confirm_stop`` is only consulted when ``stop_after`` is false.
        """
        resolver = self.container_resolver
        state = resolver.resolve(project.name)

        if state.lifecycle is LifecycleState.ABSENT:
            logger.info(f"Container {project.name} is absent, creating")
            state = resolver.ensure_setup(state, project)
        elif state.lifecycle is LifecycleState.STOPPED:
            logger.info(f"Container {project.name} is stopped, starting")
            state = resolver.ensure_started(state)
        else:
            logger.debug(f"Container {project.name} is already running")

        resolver.attach(state, command, workdir=project.workdir, user=project.remote_user)

        if not stop_after and confirm_stop is not None:
            stop_after = confirm_stop()

        if stop_after:
            resolver.teardown(state, stop_timeout)
