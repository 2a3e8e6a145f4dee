"""Tests for ContainerDiscoveryPoller."""

import threading
from unittest.mock import MagicMock

import pytest
from kubernetes.client.rest import ApiException  # type: ignore[import-untyped]

from che.workspace.openshift import ContainerDiscoveryPoller
from che.workspace.openshift.discovery import extract_container_id
from tests.factories import CONTAINER_HASH, RAW_CONTAINER_ID, create_pod


DEPLOYER_LABELS = {"openshift.io/deployer-pod-for.name": "che-ws-abc-1"}
WORKSPACE_LABELS = {"deploymentConfig": "che-ws-abc", "deployment": "che-ws-abc-1"}


def test_extract_container_id():
    assert extract_container_id(RAW_CONTAINER_ID) == CONTAINER_HASH


@pytest.mark.parametrize(
    "raw_container_id",
    [
        "docker://3f4e8c1a9b2d",
        "cri-o://" + CONTAINER_HASH,
        "containerd://" + CONTAINER_HASH,
        "docker://" + "g" * 64,
        "",
    ],
)
def test_extract_container_id_rejects_unsupported_ids(raw_container_id):
    assert extract_container_id(raw_container_id) is None


def test_returns_container_id_once_deployer_pods_are_gone(cluster, project):
    """Test that pods are not inspected while a deployer pod exists."""
    workspace_pod = create_pod(
        "che-ws-abc-1-x7k2p", WORKSPACE_LABELS, RAW_CONTAINER_ID
    )
    cluster.list_pods.side_effect = [
        [create_pod("che-ws-abc-1-deploy", DEPLOYER_LABELS), workspace_pod],
        [workspace_pod],
    ]

    poller = ContainerDiscoveryPoller(cluster, max_attempts=5, interval=0)

    assert poller.wait_for_container_id(project, "che-ws-abc") == CONTAINER_HASH
    assert cluster.list_pods.call_count == 2
    cluster.list_pods.assert_called_with("eclipse-che")


def test_returns_as_soon_as_container_is_found(cluster, project):
    cluster.list_pods.return_value = [
        create_pod("che-ws-abc-1-x7k2p", WORKSPACE_LABELS, RAW_CONTAINER_ID)
    ]

    poller = ContainerDiscoveryPoller(cluster, max_attempts=120, interval=0)

    assert poller.wait_for_container_id(project, "che-ws-abc") == CONTAINER_HASH
    assert cluster.list_pods.call_count == 1


def test_ignores_pods_of_other_deployments(cluster, project):
    cluster.list_pods.side_effect = [
        [
            create_pod("unlabelled"),
            create_pod(
                "che-ws-other-1-abcde",
                {"deploymentConfig": "che-ws-other"},
                "docker://" + "f" * 64,
            ),
        ],
        [
            create_pod("che-ws-abc-1-x7k2p", WORKSPACE_LABELS, RAW_CONTAINER_ID),
        ],
    ]

    poller = ContainerDiscoveryPoller(cluster, max_attempts=5, interval=0)

    assert poller.wait_for_container_id(project, "che-ws-abc") == CONTAINER_HASH


def test_keeps_polling_until_container_has_an_id(cluster, project):
    cluster.list_pods.side_effect = [
        [create_pod("che-ws-abc-1-x7k2p", WORKSPACE_LABELS)],
        [create_pod("che-ws-abc-1-x7k2p", WORKSPACE_LABELS, RAW_CONTAINER_ID)],
    ]

    poller = ContainerDiscoveryPoller(cluster, max_attempts=5, interval=0)

    assert poller.wait_for_container_id(project, "che-ws-abc") == CONTAINER_HASH
    assert cluster.list_pods.call_count == 2


def test_returns_none_after_the_attempt_bound(cluster, project):
    """Test that polling stops after the configured number of attempts."""
    cluster.list_pods.return_value = [
        create_pod("che-ws-abc-1-deploy", DEPLOYER_LABELS)
    ]

    poller = ContainerDiscoveryPoller(cluster, max_attempts=4, interval=0)

    assert poller.wait_for_container_id(project, "che-ws-abc") is None
    assert cluster.list_pods.call_count == 4


def test_waits_one_second_between_at_most_120_polls(cluster, project):
    """Test that the total wait is bounded by 119 one-second sleeps."""
    cancel_event = MagicMock(spec=threading.Event)
    cancel_event.is_set.return_value = False

    poller = ContainerDiscoveryPoller(
        cluster, max_attempts=120, interval=1.0, cancel_event=cancel_event
    )

    assert poller.wait_for_container_id(project, "che-ws-abc") is None
    assert cluster.list_pods.call_count == 120
    assert cancel_event.wait.call_count == 119
    assert {call.args for call in cancel_event.wait.call_args_list} == {(1.0,)}


def test_cancellation_stops_the_wait(cluster, project):
    cancel_event = threading.Event()
    cancel_event.set()

    poller = ContainerDiscoveryPoller(
        cluster, max_attempts=120, interval=1.0, cancel_event=cancel_event
    )

    assert poller.wait_for_container_id(project, "che-ws-abc") is None
    assert cluster.list_pods.call_count == 0


def test_cancellation_during_the_wait_skips_the_next_poll(cluster, project):
    class CancelledWhileWaiting(threading.Event):
        def wait(self, timeout=None):
            self.set()
            return True

    poller = ContainerDiscoveryPoller(
        cluster, max_attempts=120, interval=1.0, cancel_event=CancelledWhileWaiting()
    )

    assert poller.wait_for_container_id(project, "che-ws-abc") is None
    assert cluster.list_pods.call_count == 1


def test_unsupported_container_id_is_not_reported(cluster, project):
    cluster.list_pods.return_value = [
        create_pod("che-ws-abc-1-x7k2p", WORKSPACE_LABELS, "cri-o://3f4e8c1a9b2d")
    ]

    poller = ContainerDiscoveryPoller(cluster, max_attempts=3, interval=0)

    assert poller.wait_for_container_id(project, "che-ws-abc") is None
    assert cluster.list_pods.call_count == 3


def test_cluster_errors_propagate(cluster, project):
    cluster.list_pods.side_effect = ApiException(status=500, reason="Internal Error")

    poller = ContainerDiscoveryPoller(cluster, max_attempts=5, interval=0)

    with pytest.raises(ApiException):
        poller.wait_for_container_id(project, "che-ws-abc")
    assert cluster.list_pods.call_count == 1
