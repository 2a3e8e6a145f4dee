"""OpenShift Service resource creation."""

import logging

from kubernetes import client as k8s_client  # type: ignore[import-untyped]
from kubernetes.client.rest import ApiException  # type: ignore[import-untyped]

from ..utils.exception import ServiceCreationFailed
from .client import OpenShiftClient
from .config import OpenShiftConfig
from .constants import SERVICE_TYPE_NODE_PORT
from .metadata import create_metadata, create_selector, resource_name
from .models import Project
from .ports import ExposedPorts, to_service_ports


logger = logging.getLogger(__name__)


def create_service_manifest(
    project: Project,
    workspace_id: str,
    exposed_ports: ExposedPorts,
    config: OpenShiftConfig,
) -> k8s_client.V1Service:
    """Create the NodePort Service exposing a workspace's ports."""
    name = resource_name(config.resource_prefix, workspace_id)
    return k8s_client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=create_metadata(name, project.namespace),
        spec=k8s_client.V1ServiceSpec(
            type=SERVICE_TYPE_NODE_PORT,
            selector=create_selector(name),
            ports=to_service_ports(exposed_ports, config.port_names),
        ),
    )


class ServiceProvisioner:
    """Submit workspace Services to the cluster."""

    def __init__(self, client: OpenShiftClient, config: OpenShiftConfig) -> None:
        self.client = client
        self.config = config

    def create_service(
        self, project: Project, workspace_id: str, exposed_ports: ExposedPorts
    ) -> k8s_client.V1Service:
        """Create the Service of a workspace.

        Not idempotent: a second call for the same workspace is rejected by
        the cluster with a conflict, raised as ``ServiceCreationFailed``.
        """
        manifest = create_service_manifest(
            project, workspace_id, exposed_ports, self.config
        )
        name = manifest.metadata.name
        logger.info("Creating service %s in %s", name, project.namespace)
        try:
            service = self.client.create_service(project.namespace, manifest)
        except ApiException as e:
            raise ServiceCreationFailed(name, e.status, e.reason) from e
        logger.debug("Service %s created", name)
        return service
