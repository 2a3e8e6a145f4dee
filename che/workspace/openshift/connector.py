"""Docker container lifecycle backed by OpenShift resources."""

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from ..utils.exception import (
    ContainerDiscoveryTimeout,
    InvalidWorkspaceID,
    WorkspaceContainerCreationError,
)
from .client import OpenShiftClient
from .config import OpenShiftConfig
from .deployment import DeploymentProvisioner
from .discovery import ContainerDiscoveryPoller
from .docker_backend import DockerInspectBackend
from .env import extract_workspace_id, normalize_container_name, parse_env
from .inspection import ContainerInspection, InspectionAdapter
from .metadata import resource_name
from .ports import to_container_ports
from .project import ProjectResolver
from .service import ServiceProvisioner


logger = logging.getLogger(__name__)


class OpenShiftConnector:
    """Create and inspect workspace containers on OpenShift.

    A container is materialized as a NodePort Service plus a one-replica
    DeploymentConfig, both named after the workspace id. Creation blocks until
    the pod's container is observable.

    Concurrent calls for different workspaces are independent. Calls for the
    same workspace must be serialized by the caller.

    Example:
        connector = OpenShiftConnector(OpenShiftConfig(project_name="che"))
        container_id = connector.create_container(
            "workspaceabc_machine",
            "eclipse/ubuntu_jdk8",
            {"8080/tcp": {}, "22/tcp": {}},
            ["CHE_WORKSPACE_ID=workspaceabc"],
        )
        info = connector.inspect_container(container_id)
    """

    def __init__(
        self,
        config: OpenShiftConfig | None = None,
        client: OpenShiftClient | None = None,
        docker: DockerInspectBackend | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self.config = config or OpenShiftConfig()
        self.client = client or OpenShiftClient(self.config)
        self.docker = docker or DockerInspectBackend()
        self.projects = ProjectResolver(self.client, self.config.project_name)
        self.services = ServiceProvisioner(self.client, self.config)
        self.deployments = DeploymentProvisioner(self.client, self.config)
        self.poller = ContainerDiscoveryPoller(
            self.client,
            max_attempts=self.config.discovery_attempts,
            interval=self.config.discovery_interval,
            cancel_event=cancel_event,
        )
        self.inspection = InspectionAdapter(self.client, self.projects, self.config)

    def create_container(
        self,
        container_name: str,
        image: str,
        exposed_ports: Mapping[str, Any],
        env: Sequence[str],
    ) -> str:
        """Create a workspace container and return its runtime id.

        Any failure, including transport errors from the cluster client, is
        raised as ``WorkspaceContainerCreationError`` with the
        stage error as its cause. Resources created before the failure are
        deleted when ``cleanup_on_failure`` is enabled.
        """
        created: list[tuple[str, Callable[[], None]]] = []
        try:
            return self._create_container(
                container_name, image, exposed_ports, env, created
            )
        except Exception as e:
            logger.error(
                "Failed to create workspace container %s: %s", container_name, e
            )
            self._cleanup(created)
            raise WorkspaceContainerCreationError(container_name, str(e)) from e

    def _create_container(
        self,
        container_name: str,
        image: str,
        exposed_ports: Mapping[str, Any],
        env: Sequence[str],
        created: list[tuple[str, Callable[[], None]]],
    ) -> str:
        workspace_id = extract_workspace_id(env, self.config.workspace_id_env_var)
        if not workspace_id:
            raise InvalidWorkspaceID(self.config.workspace_id_env_var)
        name = resource_name(self.config.resource_prefix, workspace_id)
        pod_container_name = normalize_container_name(container_name) or name

        # Reject malformed input before anything is created
        to_container_ports(exposed_ports, self.config.port_names)
        parse_env(env)

        project = self.projects.resolve()

        self.services.create_service(project, workspace_id, exposed_ports)
        created.append(
            (
                f"service {name}",
                lambda: self.client.delete_service(project.namespace, name),
            )
        )

        deployment_name = self.deployments.create_deployment(
            project, workspace_id, image, pod_container_name, exposed_ports, env
        )
        created.append(
            (
                f"deployment config {deployment_name}",
                lambda: self.client.delete_deployment_config(
                    project.namespace, deployment_name
                ),
            )
        )

        container_id = self.poller.wait_for_container_id(project, deployment_name)
        if container_id is None:
            raise ContainerDiscoveryTimeout(deployment_name, self.poller.max_attempts)
        logger.info(
            "Workspace %s runs in container %s", workspace_id, container_id[:12]
        )
        return container_id

    def _cleanup(self, created: list[tuple[str, Callable[[], None]]]) -> None:
        if not created:
            return
        if not self.config.cleanup_on_failure:
            logger.info("Cleanup disabled, leaving OpenShift resources")
            return
        for description, delete in reversed(created):
            try:
                delete()
                logger.debug("Deleted %s", description)
            except Exception as e:
                if getattr(e, "status", None) == 404:
                    continue
                logger.warning("Failed to delete %s: %s", description, e)

    def inspect_container(self, container_id: str) -> ContainerInspection | None:
        """Inspect a container, reporting the ports and labels of its workspace."""
        info = self.docker.inspect(container_id)
        if info is None:
            return None
        return self.inspection.enrich(info)
