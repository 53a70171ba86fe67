from dataclasses import dataclass
from typing import Any, Optional

from kubernetes import client, config


@dataclass
class ClusterHandle:
    apiextensions: Any
    apps: Any
    machines: Any


_cached_handle: Optional[ClusterHandle] = None


def load_cluster_handle(kubeconfig: Optional[str] = None, context: Optional[str] = None) -> ClusterHandle:
    if kubeconfig or context:
        config.load_kube_config(config_file=kubeconfig, context=context)
    else:
        try:
            config.load_incluster_config()
        except config.ConfigException:
            config.load_kube_config()
    return ClusterHandle(
        apiextensions=client.ApiextensionsV1Api(),
        apps=client.AppsV1Api(),
        machines=client.CustomObjectsApi(),
    )


def get_cluster_handle() -> ClusterHandle:
    global _cached_handle
    if _cached_handle:
        return _cached_handle
    _cached_handle = load_cluster_handle()
    return _cached_handle
