"""Common test fixtures and utilities."""

from unittest.mock import MagicMock

import pytest

from che.workspace.openshift import OpenShiftClient, OpenShiftConfig, Project


@pytest.fixture
def config():
    """Configuration that never touches a real cluster and never sleeps."""
    return OpenShiftConfig(
        api_endpoint=None,
        token=None,
        project_name="eclipse-che",
        service_account="cheserviceaccount",
        external_address="172.17.0.1",
        resource_prefix="che-ws-",
        discovery_attempts=3,
        discovery_interval=0,
        cleanup_on_failure=True,
    )


@pytest.fixture
def project():
    return Project(name="eclipse-che")


@pytest.fixture
def cluster(project):
    """OpenShift client mock that sees the configured project."""
    mock_client = MagicMock(spec=OpenShiftClient)
    mock_client.list_projects.return_value = [Project(name="default"), project]
    mock_client.create_service.side_effect = lambda namespace, body: body
    mock_client.create_deployment_config.side_effect = lambda namespace, body: body
    mock_client.list_pods.return_value = []
    mock_client.list_services.return_value = []
    return mock_client

