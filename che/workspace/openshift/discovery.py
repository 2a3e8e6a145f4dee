"""Discovery of the runtime container backing a workspace deployment."""

import logging
import re
import threading

import tenacity
from kubernetes import client as k8s_client  # type: ignore[import-untyped]

from ..utils.tenacity_stop import stop_if_cancelled
from .client import OpenShiftClient
from .constants import (
    CONTAINER_ID_LENGTH,
    CONTAINER_ID_SCHEME,
    CONTAINER_ID_SCHEME_LENGTH,
    DEPLOYER_LABEL_KEY,
    DISCOVERY_ATTEMPTS,
    DISCOVERY_INTERVAL_SECONDS,
    SELECTOR_LABEL_KEY,
)
from .models import Project


logger = logging.getLogger(__name__)

_CONTAINER_HASH = re.compile(rf"[0-9a-f]{{{CONTAINER_ID_LENGTH}}}")


class ContainerNotReady(Exception):
    """The deployment has no observable container yet."""


def extract_container_id(raw_container_id: str) -> str | None:
    """Extract the runtime container id from ``docker://<id>``.

    Returns None when the value uses another scheme or does not carry a full
    64 character hash.
    """
    if not raw_container_id.startswith(CONTAINER_ID_SCHEME):
        return None
    start = CONTAINER_ID_SCHEME_LENGTH
    container_id = raw_container_id[start : start + CONTAINER_ID_LENGTH]
    if not _CONTAINER_HASH.fullmatch(container_id):
        return None
    return container_id


def _labels(pod: k8s_client.V1Pod) -> dict[str, str]:
    return (pod.metadata.labels if pod.metadata else None) or {}


def _first_container_id(pod: k8s_client.V1Pod) -> str | None:
    statuses = (pod.status.container_statuses if pod.status else None) or []
    if not statuses:
        return None
    return statuses[0].container_id or None


class ContainerDiscoveryPoller:
    """Wait for OpenShift to schedule a deployment and report its container.

    Cluster scheduling is asynchronous and offers no notification to the
    caller, so pods are polled at a fixed interval for a bounded number of
    attempts. Setting ``cancel_event`` interrupts the wait.
    """

    def __init__(
        self,
        client: OpenShiftClient,
        max_attempts: int = DISCOVERY_ATTEMPTS,
        interval: float = DISCOVERY_INTERVAL_SECONDS,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self.client = client
        self.max_attempts = max_attempts
        self.interval = interval
        self.cancel_event = cancel_event or threading.Event()

    def wait_for_container_id(
        self, project: Project, deployment_name: str
    ) -> str | None:
        """Return the id of the deployment's container, or None.

        None means the container did not become observable within
        ``max_attempts`` polls, or the wait was cancelled.
        """
        logger.info(
            "Waiting for a container of %s (at most %d attempts)",
            deployment_name,
            self.max_attempts,
        )
        retryer = tenacity.Retrying(
            stop=tenacity.stop_after_attempt(self.max_attempts)
            | stop_if_cancelled(self.cancel_event),
            wait=tenacity.wait_fixed(self.interval),
            retry=tenacity.retry_if_exception_type(ContainerNotReady),
            sleep=self.cancel_event.wait,
            reraise=True,
        )
        try:
            container_id = retryer(self._poll, project, deployment_name)
        except ContainerNotReady as e:
            if self.cancel_event.is_set():
                logger.warning("Waiting for %s was cancelled", deployment_name)
            else:
                logger.error("No container found for %s: %s", deployment_name, e)
            return None
        logger.info("Pod of %s has been deployed", deployment_name)
        return container_id

    def _poll(self, project: Project, deployment_name: str) -> str:
        if self.cancel_event.is_set():
            raise ContainerNotReady("cancelled")
        pods = self.client.list_pods(project.namespace)
        deployers = sum(1 for pod in pods if DEPLOYER_LABEL_KEY in _labels(pod))
        if deployers:
            logger.debug("%d deployer pod(s) still running", deployers)
            raise ContainerNotReady(f"{deployers} deployer pod(s) still running")

        for pod in pods:
            if _labels(pod).get(SELECTOR_LABEL_KEY) != deployment_name:
                continue
            raw_container_id = _first_container_id(pod)
            if raw_container_id is None:
                logger.debug("Pod %s has no container id yet", pod.metadata.name)
                raise ContainerNotReady(f"pod {pod.metadata.name} has no container")
            container_id = extract_container_id(raw_container_id)
            if container_id is None:
                logger.warning(
                    "Pod %s reports unsupported container id %r",
                    pod.metadata.name,
                    raw_container_id,
                )
                raise ContainerNotReady(f"pod {pod.metadata.name} has no container")
            return container_id

        raise ContainerNotReady(
            f"no pod labelled {SELECTOR_LABEL_KEY}={deployment_name}"
        )
