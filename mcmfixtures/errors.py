from typing import List, Optional


class FixtureError(Exception):
    """Base class for errors raised by mcmfixtures."""


class DecodeError(FixtureError, ValueError):
    def __init__(self, message: str, index: Optional[int] = None, source: Optional[str] = None):
        super().__init__(message)
        self.index = index
        self.source = source

    def __str__(self) -> str:
        msg = super().__str__()
        where = []
        if self.source:
            where.append(self.source)
        if self.index is not None:
            where.append(f"document {self.index}")
        if where:
            return f"{', '.join(where)}: {msg}"
        return msg


class EstablishTimeoutError(FixtureError, TimeoutError):
    def __init__(self, crd_name: str, timeout: float):
        super().__init__(f"crd {crd_name} not established after {timeout}s")
        self.crd_name = crd_name
        self.timeout = timeout


class NamesConflictError(FixtureError):
    def __init__(self, crd_name: str, reason: Optional[str]):
        super().__init__(f"naming conflict for crd {crd_name}: {reason}")
        self.crd_name = crd_name
        self.reason = reason


class ApplyError(FixtureError):
    """Raised from a report when one or more sources failed to apply."""

    def __init__(self, failures: List[object]):
        self.failures = list(failures)
        lines = [str(f) for f in self.failures]
        super().__init__(f"{len(lines)} failure(s): " + "; ".join(lines))
