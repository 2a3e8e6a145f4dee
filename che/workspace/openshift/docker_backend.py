"""Docker daemon used to inspect containers started by OpenShift."""

from typing import Any

import docker
from docker.errors import NotFound


class DockerInspectBackend:
    """Inspect containers through the Docker Engine API of the node."""

    def __init__(self, client: docker.DockerClient | None = None) -> None:
        self._client = client

    @property
    def client(self) -> docker.DockerClient:
        if self._client is None:
            self._client = docker.from_env()
        return self._client

    def inspect(self, container_id: str) -> dict[str, Any] | None:
        """Return the raw inspection document, or None if unknown."""
        try:
            return self.client.api.inspect_container(container_id)
        except NotFound:
            return None
