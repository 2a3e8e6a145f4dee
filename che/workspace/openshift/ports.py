"""Translation of Docker exposed ports into OpenShift port objects."""

from collections.abc import Mapping
from typing import Any

from kubernetes import client as k8s_client  # type: ignore[import-untyped]

from ..utils.exception import MalformedPortSpec
from .constants import (
    DEFAULT_SERVICE_PORT_NAMES,
    DOCKER_PROTOCOL_PORT_DELIMITER,
    SUPPORTED_PROTOCOLS,
)


ExposedPorts = Mapping[str, Any]


def parse_port_key(key: str) -> tuple[int, str]:
    """Split a ``<port>/<protocol>`` key into its port number and protocol.

    The protocol is returned as written.
    """
    port, delimiter, protocol = key.partition(DOCKER_PROTOCOL_PORT_DELIMITER)
    if not delimiter or not protocol:
        raise MalformedPortSpec(key, "missing protocol")
    try:
        number = int(port)
    except ValueError:
        raise MalformedPortSpec(key, f"{port!r} is not a port number") from None
    if not 0 <= number <= 65535:
        raise MalformedPortSpec(key, f"{number} is out of range")
    if protocol.lower() not in SUPPORTED_PROTOCOLS:
        raise MalformedPortSpec(key, f"unsupported protocol {protocol!r}")
    return number, protocol


def port_name(
    port: int, key: str, port_names: Mapping[int, str] | None = None
) -> str:
    """Name of a well-known port, or the raw exposed port key."""
    names = DEFAULT_SERVICE_PORT_NAMES if port_names is None else port_names
    return names.get(port) or key


def to_service_ports(
    exposed_ports: ExposedPorts, port_names: Mapping[int, str] | None = None
) -> list[k8s_client.V1ServicePort]:
    """Build the Service ports exposing every Docker exposed port."""
    service_ports = []
    for key in exposed_ports:
        port, protocol = parse_port_key(key)
        service_ports.append(
            k8s_client.V1ServicePort(
                name=port_name(port, key, port_names),
                protocol=protocol,
                port=port,
                target_port=port,
            )
        )
    return service_ports


def to_container_ports(
    exposed_ports: ExposedPorts, port_names: Mapping[int, str] | None = None
) -> list[k8s_client.V1ContainerPort]:
    """Build the container ports of the workspace container."""
    container_ports = []
    for key in exposed_ports:
        port, protocol = parse_port_key(key)
        container_ports.append(
            k8s_client.V1ContainerPort(
                name=port_name(port, key, port_names),
                protocol=protocol.upper(),
                container_port=port,
            )
        )
    return container_ports
