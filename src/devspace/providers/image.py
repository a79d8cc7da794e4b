"""Image resolver for project images."""

import logging
from typing import Optional

from devspace.errors import ConfigurationError, ImageBuildVerificationFailed
from devspace.models.project import Dockerfile, ImageSource, PrebuiltImage, ProjectSpec
from devspace.models.state import ImageState
from devspace.runtime.base import RuntimeClient


logger = logging.getLogger(__name__)


def built_tag(project_name: str) -> str:
    """Tag every locally built project image carries."""
    return f"{project_name}:latest"


class ImageResolver:
    """Finds a project's image and builds it when it is missing."""

    def __init__(self, client: RuntimeClient):
        """Initialize image resolver."""
        self.client = client

    def resolve(self, project_name: str, image_source: ImageSource) -> ImageState:
        """Check whether the project's image exists.

        Pre-built images are assumed present without asking the runtime;
        pulling them is left to ``docker run``.
        """
        if isinstance(image_source, PrebuiltImage):
            logger.debug(f"Using pre-built image {image_source.reference}")
            return ImageState(name=image_source.reference, existing=True)

        return self._lookup(project_name)

    def build(self, project_name: str, dockerfile: str, context: Optional[str] = None) -> ImageState:
        """Build the project image and confirm the tag was produced."""
        self.client.build_image(project_name, dockerfile, context)

        state = self._lookup(project_name)
        if not state.existing:
            raise ImageBuildVerificationFailed(state.name)

        logger.info(f"Image {state.name} built successfully")
        return state

    def ensure(self, project: ProjectSpec) -> ImageState:
        """Resolve the project's image, building it if needed."""
        state = self.resolve(project.name, project.image_source)
        if state.existing:
            logger.debug(f"Image {state.name} already present")
            return state

        source = project.image_source
        if not isinstance(source, Dockerfile):
            raise ConfigurationError(f"image {source.reference} can not be built, no Dockerfile declared")
        logger.info(f"Image {state.name} is absent, building")
        return self.build(project.name, source.path, source.context)

    def _lookup(self, project_name: str) -> ImageState:
        tag = built_tag(project_name)
        images = self.client.list_images(project_name)
        existing = any(tag in image.repo_tags for image in images)
        return ImageState(name=tag, existing=existing)
