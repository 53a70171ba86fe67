from .client import ClusterHandle, get_cluster_handle, load_cluster_handle
from .crd import CRDState, create_crd, is_already_exists, wait_for_crd_established
from .resources import (
    MACHINE_GROUP,
    MACHINE_PLURALS,
    MACHINE_VERSION,
    create_deployment,
    create_machine_object,
)

__all__ = [
    "ClusterHandle",
    "get_cluster_handle",
    "load_cluster_handle",
    "CRDState",
    "create_crd",
    "is_already_exists",
    "wait_for_crd_established",
    "MACHINE_GROUP",
    "MACHINE_PLURALS",
    "MACHINE_VERSION",
    "create_deployment",
    "create_machine_object",
]
