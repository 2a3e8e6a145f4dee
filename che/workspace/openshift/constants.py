"""Constants for the OpenShift workspace connector."""

import os


# API groups of OpenShift-only resource kinds
PROJECT_API_GROUP = "project.openshift.io"
PROJECT_API_VERSION = "v1"
PROJECT_PLURAL = "projects"
DEPLOYMENT_CONFIG_API_GROUP = "apps.openshift.io"
DEPLOYMENT_CONFIG_API_VERSION = "v1"
DEPLOYMENT_CONFIG_PLURAL = "deploymentconfigs"
DEPLOYMENT_CONFIG_KIND = "DeploymentConfig"

# Resource conventions
SERVICE_TYPE_NODE_PORT = "NodePort"
IMAGE_PULL_POLICY_ALWAYS = "Always"
DNS_POLICY_DEFAULT = "Default"
TRIGGER_CONFIG_CHANGE = "ConfigChange"
SELECTOR_LABEL_KEY = "deploymentConfig"
DEPLOYER_LABEL_KEY = "openshift.io/deployer-pod-for.name"
DOCKER_PROTOCOL_PORT_DELIMITER = "/"
SUPPORTED_PROTOCOLS = ("tcp", "udp")

# Runtime container ids look like docker://<64 hex chars>
CONTAINER_ID_SCHEME = "docker://"
CONTAINER_ID_SCHEME_LENGTH = len(CONTAINER_ID_SCHEME)
CONTAINER_ID_LENGTH = 64

# Workspace conventions
CHE_WORKSPACE_ID_ENV_VAR = "CHE_WORKSPACE_ID"
WORKSPACE_ID_MARKER = "workspace"
MAX_CONTAINER_NAME_LENGTH = 63

# Cluster configuration
OPENSHIFT_API_ENDPOINT = os.environ.get("OPENSHIFT_API_ENDPOINT") or None
OPENSHIFT_TOKEN = os.environ.get("OPENSHIFT_TOKEN") or None
OPENSHIFT_VERIFY_SSL = (
    os.environ.get("OPENSHIFT_VERIFY_SSL", "true").lower() == "true"
)

# Che configuration
CHE_OPENSHIFT_PROJECT = os.environ.get("CHE_OPENSHIFT_PROJECT", "eclipse-che")
CHE_OPENSHIFT_SERVICEACCOUNT = os.environ.get(
    "CHE_OPENSHIFT_SERVICEACCOUNT", "cheserviceaccount"
)
CHE_OPENSHIFT_EXTERNAL_ADDRESS = os.environ.get(
    "CHE_OPENSHIFT_EXTERNAL_ADDRESS", "172.17.0.1"
)
CHE_OPENSHIFT_RESOURCES_PREFIX = os.environ.get(
    "CHE_OPENSHIFT_RESOURCES_PREFIX", "che-ws-"
)
CHE_OPENSHIFT_CLEANUP_ON_FAILURE = (
    os.environ.get("CHE_OPENSHIFT_CLEANUP_ON_FAILURE", "true").lower() == "true"
)

# Container discovery
DISCOVERY_ATTEMPTS = int(os.environ.get("CHE_OPENSHIFT_DISCOVERY_ATTEMPTS", "120"))
DISCOVERY_INTERVAL_SECONDS = float(
    os.environ.get("CHE_OPENSHIFT_DISCOVERY_INTERVAL", "1.0")
)

# Well-known workspace ports
DEFAULT_SERVICE_PORT_NAMES: dict[int, str] = {
    22: "sshd",
    4401: "wsagent",
    4403: "wsagent-jpda",
    4411: "terminal",
    8080: "tomcat",
    8000: "tomcat-jpda",
    9876: "codeserver",
}

# Server labels reported on inspected containers
DEFAULT_SERVER_LABELS: dict[str, str] = {
    "che:server:8000:protocol": "http",
    "che:server:8000:ref": "tomcat8-debug",
    "che:server:8080:protocol": "http",
    "che:server:8080:ref": "tomcat8",
    "che:server:9876:protocol": "http",
    "che:server:9876:ref": "codeserver",
}
