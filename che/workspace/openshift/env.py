"""Parsing of Docker-style ``NAME=VALUE`` environment lists."""

from collections.abc import Iterable

from ..utils.exception import MalformedEnvEntry
from .constants import (
    CHE_WORKSPACE_ID_ENV_VAR,
    MAX_CONTAINER_NAME_LENGTH,
    WORKSPACE_ID_MARKER,
)


def parse_env(entries: Iterable[str]) -> dict[str, str]:
    """Convert ``NAME=VALUE`` entries into a mapping.

    Entries are split on the first ``=`` only. A later entry overrides an
    earlier one with the same name.
    """
    env: dict[str, str] = {}
    for entry in entries:
        name, delimiter, value = entry.partition("=")
        if not delimiter:
            raise MalformedEnvEntry(entry)
        env[name] = value
    return env


def extract_workspace_id(
    entries: Iterable[str], variable: str = CHE_WORKSPACE_ID_ENV_VAR
) -> str:
    """Return the workspace id carried by ``variable``, or ``""``.

    Workspace ids are published as ``workspace<id>``; the first occurrence of
    the ``workspace`` marker is removed.
    """
    for entry in entries:
        name, delimiter, value = entry.partition("=")
        if delimiter and name == variable:
            return value.replace(WORKSPACE_ID_MARKER, "", 1)
    return ""


def normalize_container_name(name: str) -> str:
    """Turn a Docker machine container name into a valid container name.

    Container names in a pod must be RFC 1123 labels: at most 63 characters,
    lower case, no underscores.
    """
    if name.startswith(WORKSPACE_ID_MARKER):
        name = name[len(WORKSPACE_ID_MARKER) :]
    name = name.replace("_", "-").lower().strip("-")
    return name[:MAX_CONTAINER_NAME_LENGTH].rstrip("-")
