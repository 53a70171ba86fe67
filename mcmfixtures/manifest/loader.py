import requests

from .decoder import ParseResult, parse_file, parse_manifest


def is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def load_source(source: str) -> ParseResult:
    if is_url(source):
        resp = requests.get(source, timeout=20)
        resp.raise_for_status()
        return parse_manifest(resp.text, source=source)
    return parse_file(source)
