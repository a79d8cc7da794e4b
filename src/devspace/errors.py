"""Exception hierarchy for devspace."""

from typing import List, Optional


class DevspaceError(Exception):
    """Base class for all devspace errors."""
    pass


class ConfigurationError(DevspaceError):
    """Project or user configuration is missing or invalid."""
    pass


class AmbiguousContainerError(ConfigurationError):
    """More than one container carries the project label."""

    def __init__(self, name: str, count: int):
        self.name = name
        self.count = count
        super().__init__(
            f"found {count} containers labeled for project {name}, "
            f"remove the extra containers manually"
        )


class RuntimeQueryFailed(DevspaceError):
    """Listing containers or images from the runtime failed."""
    pass


class BuildFailed(DevspaceError):
    """Image build failed."""
    pass


class ImageBuildVerificationFailed(BuildFailed):
    """Build reported success but the expected tag is not present."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"image build finished but tag {tag} was not found")


class ExecutionFailed(DevspaceError):
    """A run/start/stop/exec call against the runtime failed."""
    pass


class InvalidTransition(DevspaceError):
    """A container operation was requested from the wrong lifecycle state."""

    def __init__(self, operation: str, name: str, state: str):
        self.operation = operation
        self.state = state
        super().__init__(f"cannot {operation} container {name} while it is {state}")


class ExecutionError(DevspaceError):
    """External process failure raised by the command runner."""

    def __init__(self, cmd: List[str], message: str):
        self.cmd = cmd
        super().__init__(message)


class NonZeroExit(ExecutionError):
    """Process exited with a non-zero status."""

    def __init__(self, cmd: List[str], returncode: int):
        self.returncode = returncode
        super().__init__(cmd, f"command {cmd[0]} exited with status {returncode}")


class SpawnFailed(ExecutionError):
    """Process could not be started at all."""

    def __init__(self, cmd: List[str], cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(cmd, f"failed to execute {cmd[0]}: {cause}")
