import enum
import time
from dataclasses import dataclass, field
from typing import List, Optional

from mcmfixtures.errors import ApplyError, DecodeError
from mcmfixtures.kube.crd import is_already_exists
from mcmfixtures.manifest import DecodedResource, SkippedDocument


class ApplyStatus(str, enum.Enum):
    APPLIED = "applied"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class ApplyResult:
    resource: DecodedResource
    status: ApplyStatus
    message: str = ""
    error: Optional[BaseException] = None

    def __str__(self) -> str:
        text = f"{self.status.value} {self.resource}"
        if self.message:
            text += f": {self.message}"
        return text


@dataclass
class FileReport:
    source: str
    results: List[ApplyResult] = field(default_factory=list)
    skipped: List[SkippedDocument] = field(default_factory=list)
    decode_errors: List[DecodeError] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def failed(self) -> List[ApplyResult]:
        return [r for r in self.results if r.status is ApplyStatus.FAILED]

    @property
    def ok(self) -> bool:
        return self.error is None and not self.decode_errors and not self.failed

    @property
    def already_exists(self) -> bool:
        """True when the only failure is an already-exists conflict."""
        errs = [r.error for r in self.failed if r.error is not None]
        if self.error is not None:
            errs.append(self.error)
        return bool(errs) and not self.decode_errors and all(is_already_exists(e) for e in errs)

    def __str__(self) -> str:
        if self.ok:
            return f"{self.source}: ok"
        reasons = [str(e) for e in self.decode_errors]
        reasons += [str(r) for r in self.failed]
        if self.error is not None:
            reasons.append(str(self.error))
        return f"{self.source}: " + "; ".join(reasons)


class BatchReport:
    def __init__(self, source: str):
        self.source = source
        self.files: List[FileReport] = []
        self.walk_errors: List[OSError] = []
        self.aborted = False
        self.start = time.time()

    @property
    def failed_files(self) -> List[FileReport]:
        return [f for f in self.files if not f.ok and not f.already_exists]

    @property
    def ok(self) -> bool:
        return not self.failed_files and not self.walk_errors

    @property
    def summary(self) -> str:
        applied = sum(
            1 for f in self.files for r in f.results if r.status is ApplyStatus.APPLIED
        )
        skipped = sum(
            1 for f in self.files for r in f.results if r.status is ApplyStatus.SKIPPED
        ) + sum(len(f.skipped) for f in self.files)
        dur = time.time() - self.start
        return (
            f"files={len(self.files)} failed_files={len(self.failed_files)} "
            f"applied={applied} skipped={skipped} walk_errors={len(self.walk_errors)} "
            f"duration_sec={round(dur, 2)}"
        )

    def raise_for_errors(self) -> None:
        failures: List[object] = list(self.walk_errors)
        failures.extend(self.failed_files)
        if failures:
            raise ApplyError(failures)
