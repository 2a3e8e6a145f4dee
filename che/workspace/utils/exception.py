"""Exceptions raised by the OpenShift workspace connector."""


class OpenShiftConnectorError(Exception):
    """Base class for all connector errors."""

    def __init__(self, message: str) -> None:
        """Initialize OpenShiftConnectorError with a message."""
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        """Return string representation of the error message."""
        return self.message


class ClusterConfigurationError(OpenShiftConnectorError):
    """Raised when no usable cluster client configuration can be loaded."""


class ProjectNotFound(OpenShiftConnectorError):
    """Raised when the configured OpenShift project is not visible."""

    def __init__(self, project_name: str) -> None:
        self.project_name = project_name
        super().__init__(f"OpenShift project {project_name} not found")


class MalformedPortSpec(OpenShiftConnectorError, ValueError):
    """Raised when an exposed port key is not of the form ``<port>/<protocol>``."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"Malformed exposed port {key!r}: {reason}")


class MalformedEnvEntry(OpenShiftConnectorError, ValueError):
    """Raised when an environment entry is not of the form ``NAME=VALUE``."""

    def __init__(self, entry: str) -> None:
        self.entry = entry
        super().__init__(f"Malformed environment entry {entry!r}: missing '='")


class InvalidWorkspaceID(OpenShiftConnectorError, ValueError):
    """Raised when no workspace id can be derived from the environment."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(
            f"Environment variable {variable} is missing or yields an empty "
            "workspace id"
        )


class ServiceCreationFailed(OpenShiftConnectorError):
    """Raised when the cluster rejects the workspace Service."""

    def __init__(self, name: str, status: int | None, reason: str) -> None:
        self.name = name
        self.status = status
        super().__init__(f"Failed to create service {name} ({status}): {reason}")


class DeploymentCreationFailed(OpenShiftConnectorError):
    """Raised when the cluster rejects the workspace DeploymentConfig."""

    def __init__(self, name: str, status: int | None, reason: str) -> None:
        self.name = name
        self.status = status
        super().__init__(
            f"Failed to create deployment config {name} ({status}): {reason}"
        )


class ContainerDiscoveryTimeout(OpenShiftConnectorError):
    """Raised when the deployed container never became observable."""

    def __init__(self, deployment_name: str, attempts: int) -> None:
        self.deployment_name = deployment_name
        self.attempts = attempts
        super().__init__(
            "Failed to get the ID of the container running in the OpenShift pod "
            f"of {deployment_name} after {attempts} attempts"
        )


class ServiceNotFound(OpenShiftConnectorError):
    """Raised when no workspace Service exists in the project namespace."""

    def __init__(self, prefix: str, namespace: str, name: str | None = None) -> None:
        self.prefix = prefix
        self.namespace = namespace
        self.name = name
        if name is None:
            message = f"No service with prefix {prefix} found in {namespace}"
        else:
            message = f"No service {name} found in {namespace}"
        super().__init__(message)


class WorkspaceContainerCreationError(OpenShiftConnectorError):
    """Raised when any stage of workspace container creation fails.

    The stage-specific error is available as ``__cause__``.
    """

    def __init__(self, container_name: str, reason: str) -> None:
        self.container_name = container_name
        super().__init__(
            f"Could not create workspace container {container_name}: {reason}"
        )
