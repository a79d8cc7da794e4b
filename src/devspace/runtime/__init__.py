"""Container runtime clients."""

from devspace.runtime.base import PROJECT_KEY, RuntimeClient
from devspace.runtime.docker import DockerRuntimeClient

__all__ = [
    "PROJECT_KEY",
    "RuntimeClient",
    "DockerRuntimeClient",
]
