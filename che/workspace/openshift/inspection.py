"""Rebuild Docker inspection data from OpenShift workspace resources."""

import logging
from typing import Any

from kubernetes import client as k8s_client  # type: ignore[import-untyped]

from ..utils.exception import ServiceNotFound
from .client import OpenShiftClient
from .config import OpenShiftConfig
from .constants import DOCKER_PROTOCOL_PORT_DELIMITER
from .env import extract_workspace_id
from .metadata import resource_name
from .models import Project
from .project import ProjectResolver


logger = logging.getLogger(__name__)

ContainerInspection = dict[str, Any]


class InspectionAdapter:
    """Overlay ports and labels of a workspace on a Docker inspection.

    The delegate Docker daemon reports the container as seen from the node;
    port bindings are replaced with the NodePorts of the workspace Service and
    labels with the configured server labels.
    """

    def __init__(
        self,
        client: OpenShiftClient,
        resolver: ProjectResolver,
        config: OpenShiftConfig,
    ) -> None:
        self.client = client
        self.resolver = resolver
        self.config = config

    def enrich(
        self, base_view: ContainerInspection | None, project: Project | None = None
    ) -> ContainerInspection | None:
        if base_view is None or base_view.get("NetworkSettings") is None:
            return base_view
        self._replace_network_settings(base_view, project)
        if base_view.get("Config") is not None:
            self._replace_labels(base_view)
        return base_view

    def _replace_network_settings(
        self, info: ContainerInspection, project: Project | None
    ) -> None:
        project = project or self.resolver.resolve()
        workspace_id = extract_workspace_id(
            (info.get("Config") or {}).get("Env") or [],
            self.config.workspace_id_env_var,
        )
        service = self.find_service(project, workspace_id)
        info["NetworkSettings"]["Ports"] = self.port_bindings(service)

    def _replace_labels(self, info: ContainerInspection) -> None:
        info["Config"]["Labels"] = dict(self.config.server_labels)

    def find_service(
        self, project: Project, workspace_id: str = ""
    ) -> k8s_client.V1Service:
        """Find the Service of the inspected workspace.

        With a workspace id only the Service named after it matches. Without
        one the first Service carrying the resource prefix is used, which
        assumes a single workspace per project.
        """
        prefix = self.config.resource_prefix
        services = [
            service
            for service in self.client.list_services(project.namespace)
            if service.metadata.name.startswith(prefix)
        ]
        if workspace_id:
            name = resource_name(prefix, workspace_id)
            for service in services:
                if service.metadata.name == name:
                    return service
            logger.error("No service %s found in %s", name, project.namespace)
            raise ServiceNotFound(prefix, project.namespace, name)
        if not services:
            logger.error("No service with prefix %s found", prefix)
            raise ServiceNotFound(prefix, project.namespace)
        if len(services) > 1:
            logger.warning(
                "%d services with prefix %s in %s, using %s",
                len(services),
                prefix,
                project.namespace,
                services[0].metadata.name,
            )
        return services[0]

    def port_bindings(
        self, service: k8s_client.V1Service
    ) -> dict[str, list[dict[str, str]]]:
        """Map ``<targetPort>/<protocol>`` to the node address and NodePort."""
        ports = service.spec.ports or []
        logger.info(
            "Retrieving %d ports exposed by service %s",
            len(ports),
            service.metadata.name,
        )
        bindings = {}
        for port in ports:
            protocol = (port.protocol or "TCP").lower()
            key = f"{port.target_port}{DOCKER_PROTOCOL_PORT_DELIMITER}{protocol}"
            logger.debug("Port: %s (%s)", key, port.name)
            bindings[key] = [
                {
                    "HostIp": self.config.external_address,
                    "HostPort": str(port.node_port),
                }
            ]
        return bindings
