import logging
import os
from typing import Iterator, List, Optional, Tuple

import urllib3
from kubernetes.client.exceptions import OpenApiException

from mcmfixtures.config import ApplyOptions
from mcmfixtures.errors import FixtureError
from mcmfixtures.kube import ClusterHandle, is_already_exists
from mcmfixtures.manifest import DecodedResource, is_url, load_source

from .dispatcher import get_handler
from .results import ApplyResult, ApplyStatus, BatchReport, FileReport

logger = logging.getLogger("mcmfixtures.engine")


def apply_resource(
        cluster: ClusterHandle,
        resource: DecodedResource,
        namespace: Optional[str] = None,
        options: Optional[ApplyOptions] = None,
) -> ApplyResult:
    """Create one decoded resource on the cluster.

    API errors are raised unchanged. Kinds without a handler make no call
    and come back as SKIPPED.
    """
    options = options or ApplyOptions()
    ns = namespace or options.namespace
    handler = get_handler(resource.kind)
    if handler is None:
        logger.debug("No apply handler for %s, skipping", resource)
        return ApplyResult(resource, ApplyStatus.SKIPPED, "no apply handler for kind")
    message = handler(cluster, resource, ns, options)
    logger.info("%s %s", resource, message)
    return ApplyResult(resource, ApplyStatus.APPLIED, message)


def apply_file(
        cluster: ClusterHandle,
        source: str,
        namespace: Optional[str] = None,
        options: Optional[ApplyOptions] = None,
) -> FileReport:
    options = options or ApplyOptions()
    report = FileReport(source=str(source))
    try:
        parsed = load_source(str(source))
    except (OSError, ValueError) as e:
        # requests errors are OSErrors
        logger.error("Failed to read %s: %s", source, e)
        report.error = e
        return report

    report.skipped = parsed.skipped
    report.decode_errors = parsed.errors
    if parsed.errors and options.skip_on_decode_error:
        logger.error(
            "Not applying %s: %d document(s) failed to decode, last error: %s",
            source,
            len(parsed.errors),
            parsed.last_error,
        )
        return report

    for resource in parsed.resources:
        try:
            result = apply_resource(cluster, resource, namespace, options)
        except (OpenApiException, urllib3.exceptions.HTTPError, FixtureError, TimeoutError) as e:
            if is_already_exists(e):
                logger.info("%s from %s already exists", resource, source)
            else:
                logger.error("Failed to apply %s from %s: %s", resource, source, e)
            report.results.append(ApplyResult(resource, ApplyStatus.FAILED, str(e), e))
            break
        report.results.append(result)
    return report


def _walk(path: str, errors: List[OSError]) -> Iterator[Tuple[str, bool]]:
    """Yield (path, is_dir) depth first in lexical order, starting with path."""
    if not os.path.isdir(path):
        yield path, False
        return
    yield path, True
    try:
        names = sorted(os.listdir(path))
    except OSError as e:
        errors.append(e)
        return
    for name in names:
        yield from _walk(os.path.join(path, name), errors)


def apply_files(
        cluster: ClusterHandle,
        source: str,
        namespace: Optional[str] = None,
        options: Optional[ApplyOptions] = None,
) -> BatchReport:
    options = options or ApplyOptions()
    batch = BatchReport(str(source))

    if is_url(str(source)):
        paths = iter([(str(source), False)])
    elif not os.path.exists(source):
        err = FileNotFoundError(f"manifest source {source} does not exist")
        logger.error("%s", err)
        batch.walk_errors.append(err)
        return batch
    else:
        paths = _walk(str(source), batch.walk_errors)

    for path, is_dir in paths:
        if is_dir:
            logger.debug("%s is a directory", path)
            continue
        report = apply_file(cluster, path, namespace, options)
        batch.files.append(report)
        if report.ok:
            logger.info("file %s has been successfully applied to cluster", path)
        elif report.already_exists:
            logger.info("file %s already applied to cluster", path)
        else:
            logger.error("Failed to apply yaml file %s", path)
            if options.fail_fast:
                batch.aborted = True
                break

    for err in batch.walk_errors:
        logger.error("Error walking %s: %s", source, err)
    logger.info("Applied %s: %s", source, batch.summary)
    return batch
