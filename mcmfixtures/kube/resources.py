from typing import Any, Dict

MACHINE_GROUP = "machine.sapcloud.io"
MACHINE_VERSION = "v1alpha1"

MACHINE_PLURALS: Dict[str, str] = {
    "MachineClass": "machineclasses",
    "Machine": "machines",
    "MachineSet": "machinesets",
    "MachineDeployment": "machinedeployments",
}


def create_deployment(apps, namespace: str, body: Dict[str, Any]):
    return apps.create_namespaced_deployment(namespace=namespace, body=body)


def create_machine_object(machines, kind: str, namespace: str, body: Dict[str, Any]):
    plural = MACHINE_PLURALS.get(kind)
    if not plural:
        raise ValueError(f"create unsupported for {MACHINE_GROUP}/{kind}")
    group, _, version = body.get("apiVersion", "").partition("/")
    if group != MACHINE_GROUP or not version:
        group, version = MACHINE_GROUP, MACHINE_VERSION
    return machines.create_namespaced_custom_object(
        group=group,
        version=version,
        namespace=namespace,
        plural=plural,
        body=body,
    )
