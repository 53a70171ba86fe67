from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Mapping, Optional

from mcmfixtures.errors import DecodeError

CRD_KIND = "CustomResourceDefinition"

CORE_KINDS: FrozenSet[str] = frozenset({
    "Role",
    "ClusterRole",
    "RoleBinding",
    "ClusterRoleBinding",
    "ServiceAccount",
    CRD_KIND,
    "Deployment",
})

MACHINE_KINDS: FrozenSet[str] = frozenset({
    "MachineClass",
    "Machine",
    "MachineDeployment",
})


@dataclass(frozen=True)
class DecodedResource:
    kind: str
    api_version: str
    name: Optional[str]
    namespace: Optional[str]
    scheme: str
    index: int
    body: Dict[str, Any] = field(repr=False, compare=False)

    def __str__(self) -> str:
        return f"{self.kind}/{self.name or '<unnamed>'}"


@dataclass(frozen=True)
class Scheme:
    """A set of (apiVersion, kind) pairs a decoder accepts.

    `allowed_kinds`, when set, is the post-decode filter: anything decoded
    outside it is skipped rather than returned.
    """

    name: str
    registered: Mapping[str, FrozenSet[str]]
    allowed_kinds: Optional[FrozenSet[str]] = None

    def recognizes(self, api_version: str, kind: str) -> bool:
        return kind in self.registered.get(api_version, frozenset())

    def allows(self, kind: str) -> bool:
        return self.allowed_kinds is None or kind in self.allowed_kinds

    def decode(self, doc: Any, index: int = 0, source: Optional[str] = None) -> DecodedResource:
        if not isinstance(doc, dict):
            raise DecodeError(f"expected a mapping, got {type(doc).__name__}", index, source)
        api_version = doc.get("apiVersion")
        kind = doc.get("kind")
        if not api_version or not kind:
            raise DecodeError("Object 'apiVersion' and 'kind' are required", index, source)
        if not isinstance(api_version, str) or not isinstance(kind, str):
            raise DecodeError("Object 'apiVersion' and 'kind' must be strings", index, source)
        if not self.recognizes(api_version, kind):
            raise DecodeError(
                f"no kind '{kind}' is registered for version '{api_version}' in scheme '{self.name}'",
                index,
                source,
            )
        meta = doc.get("metadata") or {}
        if not isinstance(meta, dict):
            raise DecodeError("metadata must be a mapping", index, source)
        return DecodedResource(
            kind=kind,
            api_version=api_version,
            name=meta.get("name"),
            namespace=meta.get("namespace"),
            scheme=self.name,
            index=index,
            body=doc,
        )


_RBAC = frozenset({"Role", "ClusterRole", "RoleBinding", "ClusterRoleBinding"})
_DEPLOYMENT = frozenset({"Deployment"})

EXTENSIONS_SCHEME = Scheme(
    name="apiextensions",
    registered={
        "apiextensions.k8s.io/v1": frozenset({CRD_KIND}),
        "apiextensions.k8s.io/v1beta1": frozenset({CRD_KIND}),
    },
    allowed_kinds=CORE_KINDS,
)

CORE_SCHEME = Scheme(
    name="core",
    registered={
        "v1": frozenset({"ServiceAccount"}),
        "rbac.authorization.k8s.io/v1": _RBAC,
        "rbac.authorization.k8s.io/v1beta1": _RBAC,
        "apps/v1": _DEPLOYMENT,
        "apps/v1beta1": _DEPLOYMENT,
        "apps/v1beta2": _DEPLOYMENT,
        "extensions/v1beta1": _DEPLOYMENT,
    },
)

MACHINE_SCHEME = Scheme(
    name="machine",
    registered={
        "machine.sapcloud.io/v1alpha1": frozenset(
            {"MachineClass", "Machine", "MachineSet", "MachineDeployment"}
        ),
    },
    allowed_kinds=MACHINE_KINDS,
)


def classify(envelope: Any) -> Scheme:
    """Pick the scheme for a parsed document from its `kind` field.

    Checked in order: CustomResourceDefinition, the core kinds, then the
    machine scheme as the fallback.
    """
    kind = envelope.get("kind") if isinstance(envelope, dict) else None
    if not isinstance(kind, str):
        return MACHINE_SCHEME
    if kind == CRD_KIND:
        return EXTENSIONS_SCHEME
    if kind in CORE_KINDS:
        return CORE_SCHEME
    return MACHINE_SCHEME
