import enum
import logging
import time
from typing import Any, Callable, Dict, List

from jsonpath_ng import parse as jp_parse
from kubernetes.client import ApiException

from mcmfixtures.config import (
    DEFAULT_CRD_POLL_INTERVAL,
    DEFAULT_CRD_TIMEOUT,
    ON_CONFLICT_FAIL,
    ON_CONFLICT_WARN,
)
from mcmfixtures.errors import EstablishTimeoutError, NamesConflictError

logger = logging.getLogger("mcmfixtures.kube")

_CONDITIONS = jp_parse("status.conditions[*]")


class CRDState(str, enum.Enum):
    PENDING = "Pending"
    ESTABLISHED = "Established"
    TIMED_OUT = "TimedOut"
    ERRORED = "Errored"


def is_already_exists(exc: BaseException) -> bool:
    if isinstance(exc, ApiException) and exc.status == 409:
        return True
    return "already exists" in str(exc)


def create_crd(api, body: Dict[str, Any]) -> bool:
    """Create a CustomResourceDefinition.

    Returns False when the definition is already registered, True when it
    was created. Any other API error propagates.
    """
    name = (body.get("metadata") or {}).get("name")
    try:
        api.create_custom_resource_definition(body=body)
    except ApiException as e:
        if is_already_exists(e):
            logger.info("crd %s already exists", name)
            return False
        raise
    logger.info("crd %s created", name)
    return True


def _conditions(obj) -> List[Dict[str, Any]]:
    data = obj.to_dict() if hasattr(obj, "to_dict") else obj
    return [m.value for m in _CONDITIONS.find(data or {}) if isinstance(m.value, dict)]


def _check(name: str, conditions: List[Dict[str, Any]], on_conflict: str) -> CRDState:
    if any(c.get("type") == "Established" and c.get("status") == "True" for c in conditions):
        return CRDState.ESTABLISHED
    for cond in conditions:
        if cond.get("type") == "NamesAccepted" and cond.get("status") == "False":
            reason = cond.get("reason") or cond.get("message")
            if on_conflict == ON_CONFLICT_FAIL:
                raise NamesConflictError(name, reason)
            logger.warning("Naming conflict with created crd %s: %s", name, reason)
    return CRDState.PENDING


def wait_for_crd_established(
    api,
    name: str,
    interval: float = DEFAULT_CRD_POLL_INTERVAL,
    timeout: float = DEFAULT_CRD_TIMEOUT,
    on_conflict: str = ON_CONFLICT_WARN,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> CRDState:
    """Block until crd `name` reports Established=True.

    A failed read ends the wait immediately and the ApiException is raised.
    The last read happens at the deadline; if that one is still pending,
    EstablishTimeoutError is raised.
    """
    end = clock() + timeout
    while True:
        try:
            obj = api.read_custom_resource_definition(name)
        except ApiException:
            logger.error("crd %s can not be established: read failed (%s)", name, CRDState.ERRORED.value)
            raise
        if _check(name, _conditions(obj), on_conflict) is CRDState.ESTABLISHED:
            logger.debug("crd %s is established", name)
            return CRDState.ESTABLISHED
        remaining = end - clock()
        if remaining <= 0:
            break
        sleep(min(interval, remaining))
    logger.error("crd %s can not be established: %s after %ss", name, CRDState.TIMED_OUT.value, timeout)
    raise EstablishTimeoutError(name, timeout)
