"""Shared fixtures: an in-memory runtime client."""

import pytest
from typing import Dict, List, Optional

from devspace.models.state import ContainerSummary, ImageSummary
from devspace.runtime.base import PROJECT_KEY, RuntimeClient


class FakeRuntimeClient(RuntimeClient):
    """In-memory runtime that records every call it receives."""

    def __init__(self):
        self.containers: List[ContainerSummary] = []
        self.images: List[ImageSummary] = []
        self.calls: List[tuple] = []
        # When false, build_image "succeeds" without producing the tag
        self.build_produces_tag = True

    def add_container(self, name: str, state: str, project: Optional[str] = None):
        self.containers.append(ContainerSummary(
            id=f"id-{name}-{len(self.containers)}",
            name=name,
            state=state,
            labels={PROJECT_KEY: project or name},
        ))

    def add_image(self, project: str, tag: Optional[str] = None):
        self.images.append(ImageSummary(
            id=f"sha256:{project}-{len(self.images)}",
            repo_tags=[tag or f"{project}:latest"],
            labels={PROJECT_KEY: project},
        ))

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]

    def mutating_calls(self) -> List[tuple]:
        return [call for call in self.calls if call[0] not in ("list_containers", "list_images")]

    def list_containers(self, project_name: str) -> List[ContainerSummary]:
        self.calls.append(("list_containers", project_name))
        return [c for c in self.containers if c.labels.get(PROJECT_KEY) == project_name]

    def list_images(self, project_name: str) -> List[ImageSummary]:
        self.calls.append(("list_images", project_name))
        return [i for i in self.images if i.labels.get(PROJECT_KEY) == project_name]

    def build_image(self, project_name: str, dockerfile: str, context: Optional[str] = None) -> None:
        self.calls.append(("build_image", project_name, dockerfile, context))
        if self.build_produces_tag:
            self.add_image(project_name)

    def start_container(self, name: str) -> None:
        self.calls.append(("start_container", name))
        self._set_state(name, "running")

    def stop_container(self, name: str, timeout: Optional[int] = None) -> None:
        self.calls.append(("stop_container", name, timeout))
        self._set_state(name, "exited")

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
        self.calls.append(("run", name, image, detach, args))
        self.last_run = {"volumes": volumes, "env": env, "workdir": workdir}
        self.add_container(name, "running")

    def exec(
        self,
        name: str,
        command: List[str],
        workdir: Optional[str] = None,
        user: Optional[str] = None,
    ) -> None:
        self.calls.append(("exec", name, command))

    def _set_state(self, name: str, state: str):
        self.containers = [
            c.model_copy(update={"state": state}) if c.name == name else c
            for c in self.containers
        ]


@pytest.fixture
def fake_client():
    """Create an empty in-memory runtime."""
    return FakeRuntimeClient()


@pytest.fixture
def project_root(tmp_path):
    """Create a project directory with an empty .devcontainer folder."""
    root = tmp_path / "demo"
    (root / ".devcontainer").mkdir(parents=True)
    return root
