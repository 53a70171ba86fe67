from .applier import apply_file, apply_files, apply_resource
from .dispatcher import supported_kinds
from .results import ApplyResult, ApplyStatus, BatchReport, FileReport

__all__ = [
    "apply_file",
    "apply_files",
    "apply_resource",
    "supported_kinds",
    "ApplyResult",
    "ApplyStatus",
    "BatchReport",
    "FileReport",
]
