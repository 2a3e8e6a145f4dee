"""Shared helpers for the workspace connector."""

from .exception import (
    ClusterConfigurationError,
    ContainerDiscoveryTimeout,
    DeploymentCreationFailed,
    InvalidWorkspaceID,
    MalformedEnvEntry,
    MalformedPortSpec,
    OpenShiftConnectorError,
    ProjectNotFound,
    ServiceCreationFailed,
    ServiceNotFound,
    WorkspaceContainerCreationError,
)
from .tenacity_stop import stop_if_cancelled


__all__ = [
    "ClusterConfigurationError",
    "ContainerDiscoveryTimeout",
    "DeploymentCreationFailed",
    "InvalidWorkspaceID",
    "MalformedEnvEntry",
    "MalformedPortSpec",
    "OpenShiftConnectorError",
    "ProjectNotFound",
    "ServiceCreationFailed",
    "ServiceNotFound",
    "WorkspaceContainerCreationError",
    "stop_if_cancelled",
]
