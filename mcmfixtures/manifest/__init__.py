from .decoder import (
    SEPARATOR,
    ParseResult,
    SkippedDocument,
    join_documents,
    parse_file,
    parse_manifest,
    split_documents,
)
from .loader import is_url, load_source
from .schemes import (
    CORE_KINDS,
    CORE_SCHEME,
    CRD_KIND,
    EXTENSIONS_SCHEME,
    MACHINE_KINDS,
    MACHINE_SCHEME,
    DecodedResource,
    Scheme,
    classify,
)

__all__ = [
    "SEPARATOR",
    "ParseResult",
    "SkippedDocument",
    "join_documents",
    "parse_file",
    "parse_manifest",
    "split_documents",
    "is_url",
    "load_source",
    "CORE_KINDS",
    "CORE_SCHEME",
    "CRD_KIND",
    "EXTENSIONS_SCHEME",
    "MACHINE_KINDS",
    "MACHINE_SCHEME",
    "DecodedResource",
    "Scheme",
    "classify",
]
