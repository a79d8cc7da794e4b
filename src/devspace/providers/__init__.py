"""Image and container resolvers."""

from devspace.providers.image import ImageResolver
from devspace.providers.container import ContainerResolver

__all__ = [
    "ImageResolver",
    "ContainerResolver",
]
