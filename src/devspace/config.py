"""User configuration loading."""

import logging
import os
from pathlib import Path
from typing import Optional

from platformdirs import user_config_path
from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from devspace.errors import ConfigurationError
from devspace.models.config import UserConfig


logger = logging.getLogger(__name__)

#: Application name for XDG path resolution.
_APP_NAME = "devspace"

CONFIG_ENV = "DEVSPACE_CONFIG"


def get_config_path() -> Path:
    """Return the user config file path.

    ``$DEVSPACE_CONFIG`` when set, otherwise
    ``$XDG_CONFIG_HOME/devspace/config.yaml``.
    """
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override)
    return user_config_path(_APP_NAME) / "config.yaml"


def load_user_config(path: Optional[Path] = None) -> UserConfig:
    """Load the user configuration, falling back to defaults."""
    path = path or get_config_path()
    if not path.exists():
        logger.debug(f"No user config at {path}, using defaults")
        return UserConfig()

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"failed to read user config {path}: {e}") from e

    yaml = YAML(typ="safe")
    try:
        data = yaml.load(content)
    except YAMLError as e:
        raise ConfigurationError(f"invalid user config {path}: {e}") from e

    if data is None:
        return UserConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"invalid user config {path}: expected a mapping")

    try:
        config = UserConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"invalid user config {path}: {e}") from e

    logger.debug(f"Loaded user config: {path}")
    return config
