"""Shared pytest fixtures for mcmfixtures tests."""

from unittest.mock import MagicMock

import pytest

from mcmfixtures.kube import ClusterHandle

ESTABLISHED = {"status": {"conditions": [{"type": "Established", "status": "True"}]}}
PENDING = {"status": {"conditions": [{"type": "Established", "status": "False"}]}}

CRD_YAML = """\
apiVersion: apiextensions.k8s.io/v1
kind: CustomResourceDefinition
metadata:
  name: machineclasses.machine.sapcloud.io
spec:
  group: machine.sapcloud.io
  scope: Namespaced
  names:
    kind: MachineClass
    plural: machineclasses
"""

MACHINE_CLASS_YAML = """\
apiVersion: machine.sapcloud.io/v1alpha1
kind: MachineClass
metadata:
  name: test-class
providerSpec:
  image: ubuntu
"""

MACHINE_YAML = """\
apiVersion: machine.sapcloud.io/v1alpha1
kind: Machine
metadata:
  name: test-machine
spec:
  class:
    kind: MachineClass
    name: test-class
"""

DEPLOYMENT_YAML = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: machine-controller-manager
spec:
  replicas: 1
"""


class FakeClock:
    """Monotonic clock that only moves when sleep() is called."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cluster():
    """ClusterHandle whose APIs are mocks; CRDs report Established at once."""
    handle = ClusterHandle(
        apiextensions=MagicMock(),
        apps=MagicMock(),
        machines=MagicMock(),
    )
    handle.apiextensions.read_custom_resource_definition.return_value = ESTABLISHED
    return handle


@pytest.fixture
def manifests_dir(tmp_path):
    """Directory tree of manifests laid out like an integration test fixture set."""
    (tmp_path / "crds").mkdir()
    (tmp_path / "crds" / "machineclass.yaml").write_text(CRD_YAML)
    (tmp_path / "objects").mkdir()
    (tmp_path / "objects" / "class.yaml").write_text(MACHINE_CLASS_YAML)
    (tmp_path / "objects" / "machine.yaml").write_text(MACHINE_YAML)
    (tmp_path / "deployment.yaml").write_text(DEPLOYMENT_YAML)
    return tmp_path
