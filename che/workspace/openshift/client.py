"""Thin OpenShift API client built on the kubernetes package."""

import logging
from typing import Any

from kubernetes import (
    client as k8s_client,  # type: ignore[import-untyped]
    config as k8s_config,  # type: ignore[import-untyped]
)

from ..utils.exception import ClusterConfigurationError
from .config import OpenShiftConfig
from .constants import (
    DEPLOYMENT_CONFIG_API_GROUP,
    DEPLOYMENT_CONFIG_API_VERSION,
    DEPLOYMENT_CONFIG_PLURAL,
    PROJECT_API_GROUP,
    PROJECT_API_VERSION,
    PROJECT_PLURAL,
)
from .models import Project


logger = logging.getLogger(__name__)


def create_api_client(config: OpenShiftConfig) -> k8s_client.ApiClient:
    """Create an API client for the configured cluster.

    An explicit endpoint and token win; otherwise the in-cluster configuration
    is tried first, then the local kubeconfig.
    """
    if config.api_endpoint:
        configuration = k8s_client.Configuration()
        configuration.host = config.api_endpoint.rstrip("/")
        configuration.verify_ssl = config.verify_ssl
        if config.token is not None:
            configuration.api_key = {
                "authorization": config.token.get_secret_value()
            }
            configuration.api_key_prefix = {"authorization": "Bearer"}
        logger.info("Using OpenShift API endpoint %s", configuration.host)
        return k8s_client.ApiClient(configuration)

    try:
        k8s_config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes configuration")
    except k8s_config.ConfigException:
        try:
            k8s_config.load_kube_config()
            logger.info("Loaded local Kubernetes configuration")
        except k8s_config.ConfigException as e:
            raise ClusterConfigurationError(
                "Could not load Kubernetes configuration. Set an API endpoint, "
                "provide a valid kubeconfig or run inside the cluster."
            ) from e
    return k8s_client.ApiClient()


class OpenShiftClient:
    """List and create the cluster resources backing workspace containers.

    Transport and authorization failures surface as
    ``kubernetes.client.rest.ApiException``.
    """

    def __init__(
        self,
        config: OpenShiftConfig,
        api_client: k8s_client.ApiClient | None = None,
    ) -> None:
        self.config = config
        self.api_client = api_client or create_api_client(config)
        self.core_v1 = k8s_client.CoreV1Api(self.api_client)
        self.custom_objects = k8s_client.CustomObjectsApi(self.api_client)

    def list_projects(self) -> list[Project]:
        response = self.custom_objects.list_cluster_custom_object(
            group=PROJECT_API_GROUP,
            version=PROJECT_API_VERSION,
            plural=PROJECT_PLURAL,
        )
        return [Project.from_resource(item) for item in response.get("items", [])]

    def create_service(
        self, namespace: str, body: k8s_client.V1Service
    ) -> k8s_client.V1Service:
        return self.core_v1.create_namespaced_service(namespace=namespace, body=body)

    def list_services(self, namespace: str) -> list[k8s_client.V1Service]:
        return self.core_v1.list_namespaced_service(namespace=namespace).items or []

    def delete_service(self, namespace: str, name: str) -> None:
        self.core_v1.delete_namespaced_service(name=name, namespace=namespace)

    def create_deployment_config(
        self, namespace: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        return self.custom_objects.create_namespaced_custom_object(
            group=DEPLOYMENT_CONFIG_API_GROUP,
            version=DEPLOYMENT_CONFIG_API_VERSION,
            namespace=namespace,
            plural=DEPLOYMENT_CONFIG_PLURAL,
            body=body,
        )

    def delete_deployment_config(self, namespace: str, name: str) -> None:
        self.custom_objects.delete_namespaced_custom_object(
            group=DEPLOYMENT_CONFIG_API_GROUP,
            version=DEPLOYMENT_CONFIG_API_VERSION,
            namespace=namespace,
            plural=DEPLOYMENT_CONFIG_PLURAL,
            name=name,
        )

    def list_pods(
        self, namespace: str, label_selector: str | None = None
    ) -> list[k8s_client.V1Pod]:
        kwargs = {"label_selector": label_selector} if label_selector else {}
        pods = self.core_v1.list_namespaced_pod(namespace=namespace, **kwargs)
        return pods.items or []
