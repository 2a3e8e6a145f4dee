"""OpenShift DeploymentConfig resource creation."""

import logging
from collections.abc import Sequence
from typing import Any

from kubernetes import client as k8s_client  # type: ignore[import-untyped]
from kubernetes.client.rest import ApiException  # type: ignore[import-untyped]

from ..utils.exception import DeploymentCreationFailed
from .client import OpenShiftClient
from .config import OpenShiftConfig
from .constants import (
    DEPLOYMENT_CONFIG_API_GROUP,
    DEPLOYMENT_CONFIG_API_VERSION,
    DEPLOYMENT_CONFIG_KIND,
    DNS_POLICY_DEFAULT,
    IMAGE_PULL_POLICY_ALWAYS,
    TRIGGER_CONFIG_CHANGE,
)
from .env import parse_env
from .metadata import create_metadata, create_selector, resource_name
from .models import Project
from .ports import ExposedPorts, to_container_ports


logger = logging.getLogger(__name__)


def create_container_manifest(
    container_name: str,
    image: str,
    exposed_ports: ExposedPorts,
    env: Sequence[str],
    config: OpenShiftConfig,
) -> k8s_client.V1Container:
    """Create the single workspace container.

    The image is always pulled so that a workspace starts from the latest
    build of its tag.
    """
    environment = parse_env(env)
    return k8s_client.V1Container(
        name=container_name,
        image=image,
        image_pull_policy=IMAGE_PULL_POLICY_ALWAYS,
        ports=to_container_ports(exposed_ports, config.port_names),
        env=[k8s_client.V1EnvVar(name=k, value=v) for k, v in environment.items()],
    )


def create_deployment_config_manifest(
    project: Project,
    workspace_id: str,
    image: str,
    container_name: str,
    exposed_ports: ExposedPorts,
    env: Sequence[str],
    config: OpenShiftConfig,
) -> dict[str, Any]:
    """Create a DeploymentConfig manifest for a workspace.

    DeploymentConfig has no typed model in the kubernetes client, so the
    resource is a plain dictionary whose pod template is a typed
    ``V1PodTemplateSpec``; the API client serializes both on submission.
    """
    name = resource_name(config.resource_prefix, workspace_id)
    selector = create_selector(name)
    container = create_container_manifest(
        container_name, image, exposed_ports, env, config
    )

    template = k8s_client.V1PodTemplateSpec(
        metadata=k8s_client.V1ObjectMeta(labels=dict(selector)),
        spec=k8s_client.V1PodSpec(
            containers=[container],
            service_account_name=config.service_account,
            # Workspace agents resolve external names through the node resolver
            dns_policy=DNS_POLICY_DEFAULT,
        ),
    )

    return {
        "apiVersion": f"{DEPLOYMENT_CONFIG_API_GROUP}/{DEPLOYMENT_CONFIG_API_VERSION}",
        "kind": DEPLOYMENT_CONFIG_KIND,
        "metadata": create_metadata(name, project.namespace),
        "spec": {
            "replicas": 1,
            "selector": selector,
            "template": template,
            "triggers": [{"type": TRIGGER_CONFIG_CHANGE}],
        },
    }


class DeploymentProvisioner:
    """Submit workspace DeploymentConfigs to the cluster."""

    def __init__(self, client: OpenShiftClient, config: OpenShiftConfig) -> None:
        self.client = client
        self.config = config

    def create_deployment(
        self,
        project: Project,
        workspace_id: str,
        image: str,
        container_name: str,
        exposed_ports: ExposedPorts,
        env: Sequence[str],
    ) -> str:
        """Create the DeploymentConfig of a workspace and return its name."""
        manifest = create_deployment_config_manifest(
            project,
            workspace_id,
            image,
            container_name,
            exposed_ports,
            env,
            self.config,
        )
        name = manifest["metadata"].name
        logger.info(
            "Creating deployment config %s (image %s) in %s",
            name,
            image,
            project.namespace,
        )
        try:
            self.client.create_deployment_config(project.namespace, manifest)
        except ApiException as e:
            raise DeploymentCreationFailed(name, e.status, e.reason) from e
        logger.debug("Deployment config %s created", name)
        return name
