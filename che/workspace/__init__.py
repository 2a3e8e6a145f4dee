"""Che workspace containers on OpenShift."""

from .openshift import OpenShiftConfig, OpenShiftConnector


__all__ = [
    "OpenShiftConfig",
    "OpenShiftConnector",
]
