"""Apply YAML manifest fixtures to a cluster for integration tests."""

from .config import ApplyOptions
from .engine import ApplyStatus, apply_file, apply_files, apply_resource
from .kube import ClusterHandle, get_cluster_handle, load_cluster_handle, wait_for_crd_established
from .manifest import parse_manifest

__version__ = "0.1.0"

__all__ = [
    "ApplyOptions",
    "ApplyStatus",
    "apply_file",
    "apply_files",
    "apply_resource",
    "ClusterHandle",
    "get_cluster_handle",
    "load_cluster_handle",
    "wait_for_crd_established",
    "parse_manifest",
]
