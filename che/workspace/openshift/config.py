"""Configuration for the OpenShift workspace connector."""

from pydantic import BaseModel, Field, SecretStr

from .constants import (
    CHE_OPENSHIFT_CLEANUP_ON_FAILURE,
    CHE_OPENSHIFT_EXTERNAL_ADDRESS,
    CHE_OPENSHIFT_PROJECT,
    CHE_OPENSHIFT_RESOURCES_PREFIX,
    CHE_OPENSHIFT_SERVICEACCOUNT,
    CHE_WORKSPACE_ID_ENV_VAR,
    DEFAULT_SERVER_LABELS,
    DEFAULT_SERVICE_PORT_NAMES,
    DISCOVERY_ATTEMPTS,
    DISCOVERY_INTERVAL_SECONDS,
    OPENSHIFT_API_ENDPOINT,
    OPENSHIFT_TOKEN,
    OPENSHIFT_VERIFY_SSL,
)


class OpenShiftConfig(BaseModel):
    """Settings shared by every component of the connector.

    Defaults are read from the environment once at import time; pass an
    explicit instance to override them.

    Example:
        config = OpenShiftConfig(
            api_endpoint="https://openshift.example.com:8443",
            token="sha256~...",
            project_name="eclipse-che",
        )
    """

    model_config = {"frozen": True}

    api_endpoint: str | None = Field(
        default=OPENSHIFT_API_ENDPOINT,
        description="OpenShift API URL. When unset, in-cluster or kubeconfig "
        "configuration is used.",
    )
    token: SecretStr | None = Field(
        default=SecretStr(OPENSHIFT_TOKEN) if OPENSHIFT_TOKEN else None,
        description="Bearer token used together with api_endpoint.",
    )
    verify_ssl: bool = Field(
        default=OPENSHIFT_VERIFY_SSL,
        description="Whether to verify the API server certificate.",
    )
    project_name: str = Field(
        default=CHE_OPENSHIFT_PROJECT,
        min_length=1,
        description="Project (namespace) that hosts workspace resources.",
    )
    service_account: str = Field(
        default=CHE_OPENSHIFT_SERVICEACCOUNT,
        description="Service account the workspace pods run as.",
    )
    external_address: str = Field(
        default=CHE_OPENSHIFT_EXTERNAL_ADDRESS,
        description="Host address reported for NodePort bindings.",
    )
    resource_prefix: str = Field(
        default=CHE_OPENSHIFT_RESOURCES_PREFIX,
        min_length=1,
        description="Prefix of every generated resource name.",
    )
    workspace_id_env_var: str = Field(
        default=CHE_WORKSPACE_ID_ENV_VAR,
        description="Environment variable carrying the workspace id.",
    )
    discovery_attempts: int = Field(
        default=DISCOVERY_ATTEMPTS,
        ge=1,
        description="Maximum number of pod polls while waiting for the container.",
    )
    discovery_interval: float = Field(
        default=DISCOVERY_INTERVAL_SECONDS,
        ge=0,
        description="Seconds between two pod polls.",
    )
    cleanup_on_failure: bool = Field(
        default=CHE_OPENSHIFT_CLEANUP_ON_FAILURE,
        description="Delete resources created by a failed create_container call.",
    )
    port_names: dict[int, str] = Field(
        default_factory=lambda: dict(DEFAULT_SERVICE_PORT_NAMES),
        description="Names given to well-known ports.",
    )
    server_labels: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_SERVER_LABELS),
        description="Labels reported on inspected workspace containers.",
    )
