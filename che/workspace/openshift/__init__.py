from .client import OpenShiftClient
from .config import OpenShiftConfig
from .connector import OpenShiftConnector
from .deployment import DeploymentProvisioner
from .discovery import ContainerDiscoveryPoller
from .docker_backend import DockerInspectBackend
from .inspection import InspectionAdapter
from .models import Project
from .project import ProjectResolver
from .service import ServiceProvisioner


__all__ = [
    "ContainerDiscoveryPoller",
    "DeploymentProvisioner",
    "DockerInspectBackend",
    "InspectionAdapter",
    "OpenShiftClient",
    "OpenShiftConfig",
    "OpenShiftConnector",
    "Project",
    "ProjectResolver",
    "ServiceProvisioner",
]
