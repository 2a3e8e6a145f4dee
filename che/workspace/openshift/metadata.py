"""Naming and metadata shared by all workspace resources.

The Service and the DeploymentConfig of a workspace are correlated only by
name: both are called ``<prefix><workspace_id>`` and the Service selects pods
labelled ``deploymentConfig=<prefix><workspace_id>``.
"""

from kubernetes import client as k8s_client  # type: ignore[import-untyped]

from .constants import SELECTOR_LABEL_KEY


def resource_name(prefix: str, workspace_id: str) -> str:
    """Name of the Service and DeploymentConfig of a workspace."""
    return f"{prefix}{workspace_id}"


def create_selector(name: str) -> dict[str, str]:
    """Label selector tying the workspace Service to its pods."""
    return {SELECTOR_LABEL_KEY: name}


def create_metadata(
    name: str, namespace: str, labels: dict[str, str] | None = None
) -> k8s_client.V1ObjectMeta:
    """Create metadata for workspace resources."""
    return k8s_client.V1ObjectMeta(
        name=name,
        namespace=namespace,
        labels=dict(labels) if labels else None,
    )
