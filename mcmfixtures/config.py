import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_NAMESPACE = "default"
DEFAULT_CRD_POLL_INTERVAL = 0.5
DEFAULT_CRD_TIMEOUT = 60.0

ON_CONFLICT_WARN = "warn"
ON_CONFLICT_FAIL = "fail"
_ON_CONFLICT = (ON_CONFLICT_WARN, ON_CONFLICT_FAIL)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean, got '{raw}'")


def _env_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got '{raw}'") from None


@dataclass
class ApplyOptions:
    namespace: str = DEFAULT_NAMESPACE
    crd_poll_interval: float = DEFAULT_CRD_POLL_INTERVAL
    crd_timeout: float = DEFAULT_CRD_TIMEOUT
    on_name_conflict: str = ON_CONFLICT_WARN
    fail_fast: bool = False
    skip_on_decode_error: bool = True

    def __post_init__(self):
        if self.crd_poll_interval <= 0:
            raise ValueError("crd_poll_interval must be positive")
        if self.crd_timeout <= 0:
            raise ValueError("crd_timeout must be positive")
        if self.on_name_conflict not in _ON_CONFLICT:
            raise ValueError(
                f"on_name_conflict must be one of {', '.join(_ON_CONFLICT)}, got '{self.on_name_conflict}'"
            )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> "ApplyOptions":
        env = os.environ if env is None else env
        values = dict(
            namespace=env.get("MCMFIXTURES_NAMESPACE") or DEFAULT_NAMESPACE,
            crd_poll_interval=_env_float(env, "MCMFIXTURES_CRD_POLL_INTERVAL", DEFAULT_CRD_POLL_INTERVAL),
            crd_timeout=_env_float(env, "MCMFIXTURES_CRD_TIMEOUT", DEFAULT_CRD_TIMEOUT),
            on_name_conflict=(env.get("MCMFIXTURES_ON_NAME_CONFLICT") or ON_CONFLICT_WARN).lower(),
            fail_fast=_env_bool(env, "MCMFIXTURES_FAIL_FAST", False),
            skip_on_decode_error=_env_bool(env, "MCMFIXTURES_SKIP_ON_DECODE_ERROR", True),
        )
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
