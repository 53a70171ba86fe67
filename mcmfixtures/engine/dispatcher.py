import logging
from typing import Callable, Dict

from mcmfixtures.config import ApplyOptions
from mcmfixtures.kube import (
    ClusterHandle,
    create_crd,
    create_deployment,
    create_machine_object,
    wait_for_crd_established,
)
from mcmfixtures.manifest import DecodedResource

logger = logging.getLogger("mcmfixtures.engine")

Handler = Callable[[ClusterHandle, DecodedResource, str, ApplyOptions], str]


def _apply_crd(cluster: ClusterHandle, res: DecodedResource, namespace: str, options: ApplyOptions) -> str:
    created = create_crd(cluster.apiextensions, res.body)
    wait_for_crd_established(
        cluster.apiextensions,
        res.name,
        interval=options.crd_poll_interval,
        timeout=options.crd_timeout,
        on_conflict=options.on_name_conflict,
    )
    return "created, established" if created else "already exists, established"


def _apply_machine_object(cluster: ClusterHandle, res: DecodedResource, namespace: str, options: ApplyOptions) -> str:
    create_machine_object(cluster.machines, res.kind, namespace, res.body)
    return f"created in {namespace}"


def _apply_deployment(cluster: ClusterHandle, res: DecodedResource, namespace: str, options: ApplyOptions) -> str:
    create_deployment(cluster.apps, namespace, res.body)
    return f"created in {namespace}"


_HANDLERS: Dict[str, Handler] = {
    "CustomResourceDefinition": _apply_crd,
    "MachineClass": _apply_machine_object,
    "Machine": _apply_machine_object,
    "MachineDeployment": _apply_machine_object,
    "Deployment": _apply_deployment,
}


def get_handler(kind: str):
    return _HANDLERS.get(kind)


def supported_kinds():
    return sorted(_HANDLERS)
