"""Lookup of the OpenShift project hosting workspace resources."""

import logging

from ..utils.exception import ProjectNotFound
from .client import OpenShiftClient
from .models import Project


logger = logging.getLogger(__name__)


class ProjectResolver:
    """Resolve the configured project among those visible to the client.

    Projects are listed on every call; nothing is cached, so a resolver can be
    retried safely.
    """

    def __init__(self, client: OpenShiftClient, project_name: str) -> None:
        self.client = client
        self.project_name = project_name

    def resolve(self) -> Project:
        for project in self.client.list_projects():
            if project.name == self.project_name:
                return project
        logger.error("OpenShift project %s not found", self.project_name)
        raise ProjectNotFound(self.project_name)
