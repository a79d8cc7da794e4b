"""Command implementations for CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from devspace.engine import ReconciliationDriver
from devspace.models.config import UserConfig
from devspace.models.project import Dockerfile, ProjectSpec
from devspace.models.state import LifecycleState
from devspace.project import load_project
from devspace.providers import ContainerResolver, ImageResolver
from devspace.runtime import DockerRuntimeClient, RuntimeClient


console = Console()
stderr_console = Console(stderr=True)


def _notice(message: str, quiet: bool = False):
    # Notices go to stderr so stdout stays with the container session
    if not quiet:
        stderr_console.print(message)


def _describe(project: ProjectSpec) -> str:
    source = project.image_source
    if isinstance(source, Dockerfile):
        return f"Dockerfile {source.path}"
    return f"image {source.reference}"


def shell(
    root: Path,
    user_config: UserConfig,
    stop: bool = False,
    client: Optional[RuntimeClient] = None,
    quiet: bool = False,
):
    """Open the configured shell in the project's dev container."""
    project = load_project(root)
    client = client or DockerRuntimeClient()

    image_resolver = ImageResolver(client)
    container_resolver = ContainerResolver(client, image_resolver, user_config)
    driver = ReconciliationDriver(container_resolver)

    _notice(f"[bold]Project[/bold] {project.name} ({_describe(project)})", quiet)

    def confirm_stop() -> bool:
        return typer.confirm(f"Stop container {project.name}?", default=False)

    driver.ensure_and_attach(
        project,
        [user_config.shell],
        stop_after=stop,
        confirm_stop=confirm_stop if user_config.ask_stop else None,
        stop_timeout=user_config.stop_timeout,
    )

    _notice(f"[green]✓[/green] Session in {project.name} ended", quiet)


def show_status(
    root: Path,
    user_config: UserConfig,
    client: Optional[RuntimeClient] = None,
):
    """Show the project's image and container state."""
    project = load_project(root)
    client = client or DockerRuntimeClient()

    image_resolver = ImageResolver(client)
    image = image_resolver.resolve(project.name, project.image_source)
    container = ContainerResolver(client, image_resolver, user_config).resolve(project.name)

    table = Table(title=f"Project {project.name}")
    table.add_column("Resource", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("State")

    image_status = "[green]present[/green]" if image.existing else "[yellow]missing[/yellow]"
    table.add_row("image", image.name, image_status)

    lifecycle = container.lifecycle
    if lifecycle is LifecycleState.RUNNING:
        container_status = "[green]●[/green] running"
    elif lifecycle is LifecycleState.STOPPED:
        container_status = f"[red]○[/red] {container.summary.state}"
    else:
        container_status = "[dim]absent[/dim]"
    table.add_row("container", container.name, container_status)

    console.print(table)
