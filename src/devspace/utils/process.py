"""Synchronous process execution with the terminal passed through."""

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import List

from devspace.errors import NonZeroExit, SpawnFailed


logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result from running a command."""
    returncode: int


def run_command(cmd: List[str]) -> CommandResult:
    """Run a command, inheriting stdin, stdout and stderr.

    Blocks until the process exits. Output is never captured so that
    interactive sessions (``docker exec -it``) behave as if run directly.
    """
    logger.debug(f"Running command: {shlex.join(cmd)}")

    try:
        process = subprocess.run(cmd, check=False)
    except OSError as e:
        logger.debug(f"Failed to spawn {cmd[0]}: {e}")
        raise SpawnFailed(cmd, e) from e

    if process.returncode != 0:
        raise NonZeroExit(cmd, process.returncode)

    return CommandResult(returncode=process.returncode)
