"""Loading a project's devcontainer declaration."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import json5
from pydantic import ValidationError

from devspace.errors import ConfigurationError
from devspace.models.project import Dockerfile, ImageSource, PrebuiltImage, ProjectSpec


logger = logging.getLogger(__name__)

CONFIG_DIR = ".devcontainer"
CONFIG_FILE = "devcontainer.json"


def config_path(root: Path) -> Path:
    """Location of the devcontainer file for a project root."""
    return Path(root) / CONFIG_DIR / CONFIG_FILE


def parse_config(content: str) -> Dict[str, Any]:
    """Parse a JSON document that may contain comments and trailing commas."""
    try:
        data = json5.loads(content)
    except ValueError as e:
        raise ConfigurationError(f"config parse failed: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("invalid config, expected a JSON object")
    return data


def image_source_from_config(data: Dict[str, Any], config_dir: Path) -> ImageSource:
    """Pick the image source; a pre-built image wins over a Dockerfile."""
    if data.get("image"):
        return PrebuiltImage(reference=data["image"])

    build = data.get("build") or {}
    if not isinstance(build, dict):
        raise ConfigurationError("invalid config, build must be an object")

    dockerfile = data.get("dockerFile") or build.get("dockerfile")
    if not dockerfile:
        raise ConfigurationError("invalid config, dockerFile or image not specified")

    context = build.get("context")
    return Dockerfile(
        path=str(config_dir / dockerfile),
        context=str(config_dir / context) if context else None,
    )


def _command_tokens(value: Union[str, List[str], None]) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        return ["/bin/sh", "-c", value]
    if not isinstance(value, list):
        raise ConfigurationError("invalid config, postCreateCommand must be a string or a list")
    return [str(token) for token in value]


def load_project(root: Union[str, Path]) -> ProjectSpec:
    """Build a ProjectSpec from ``<root>/.devcontainer/devcontainer.json``."""
    root = Path(root).resolve()
    path = config_path(root)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"failed to open config file {path}: {e}") from e

    data = parse_config(content)
    logger.debug(f"Loaded project config: {path}")

    try:
        return ProjectSpec(
            name=data.get("name") or root.name,
            image_source=image_source_from_config(data, path.parent),
            post_create_command=_command_tokens(data.get("postCreateCommand")),
            root=str(root),
            workspace_folder=data.get("workspaceFolder"),
            mounts=data.get("mounts") or [],
            container_env=data.get("containerEnv") or {},
            remote_user=data.get("remoteUser"),
        )
    except ValidationError as e:
        raise ConfigurationError(f"invalid config {path}: {e}") from e
