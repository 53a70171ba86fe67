import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

import yaml

from mcmfixtures.errors import DecodeError

from .schemes import DecodedResource, classify

logger = logging.getLogger("mcmfixtures.manifest")

SEPARATOR = "---"
_SEPARATOR_RE = re.compile(r"^---[ \t]*(?:#[^\n]*)?(?:\r?\n|\Z)", re.MULTILINE)


@dataclass
class SkippedDocument:
    index: int
    kind: str
    scheme: str
    source: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.source or '<text>'}: document {self.index} kind {self.kind} not supported by scheme '{self.scheme}'"


@dataclass
class ParseResult:
    source: Optional[str] = None
    resources: List[DecodedResource] = field(default_factory=list)
    skipped: List[SkippedDocument] = field(default_factory=list)
    errors: List[DecodeError] = field(default_factory=list)

    @property
    def last_error(self) -> Optional[DecodeError]:
        return self.errors[-1] if self.errors else None

    @property
    def ok(self) -> bool:
        return not self.errors


def split_documents(text: str) -> List[str]:
    return [frag for frag in _SEPARATOR_RE.split(text) if frag.strip()]


def join_documents(fragments: Iterable[str]) -> str:
    parts = list(fragments)
    for i, frag in enumerate(parts[:-1]):
        if not frag.endswith("\n"):
            parts[i] = frag + "\n"
    return (SEPARATOR + "\n").join(parts)


def parse_manifest(text: str, source: Optional[str] = None) -> ParseResult:
    result = ParseResult(source=source)
    for index, fragment in enumerate(split_documents(text)):
        try:
            doc = yaml.safe_load(fragment)
        except yaml.YAMLError as e:
            err = DecodeError(f"invalid YAML: {e}", index, source)
            logger.error("Error while decoding YAML object: %s", err)
            result.errors.append(err)
            continue
        if doc is None:
            continue

        scheme = classify(doc)
        try:
            resource = scheme.decode(doc, index=index, source=source)
        except DecodeError as err:
            logger.error("Error while decoding YAML object: %s", err)
            result.errors.append(err)
            continue

        if not scheme.allows(resource.kind):
            logger.info(
                "Skipping object with unsupported type %s in %s",
                resource.kind,
                source or "<text>",
            )
            result.skipped.append(SkippedDocument(index, resource.kind, scheme.name, source))
            continue
        result.resources.append(resource)
    return result


def parse_file(path: Union[str, Path]) -> ParseResult:
    text = Path(path).read_text(encoding="utf-8")
    return parse_manifest(text, source=str(path))
