import logging

from mcmfixtures.config import ApplyOptions
from mcmfixtures.engine import apply_files
from mcmfixtures.kube import load_cluster_handle
from mcmfixtures.manifest import load_source

logger = logging.getLogger("mcmfixtures.cli")


def run_parse(args) -> int:
    rc = 0
    for source in args.sources:
        try:
            parsed = load_source(source)
        except (OSError, ValueError) as e:
            print(f"error\t{source}\t{e}")
            rc = 1
            continue
        for res in parsed.resources:
            print(f"resource\t{source}\t{res.index}\t{res.api_version}\t{res}")
        for skip in parsed.skipped:
            print(f"skipped\t{source}\t{skip.index}\t{skip.kind}")
        for err in parsed.errors:
            print(f"error\t{source}\t{err}")
        if parsed.errors:
            rc = 1
    return rc


def run_apply(args) -> int:
    try:
        options = _options(args)
    except ValueError as e:
        logger.error("Invalid options: %s", e)
        return 2
    cluster = load_cluster_handle(args.kubeconfig, args.context)

    rc = 0
    for source in args.sources:
        batch = apply_files(cluster, source, options=options)
        for failed in batch.failed_files:
            logger.error("%s", failed)
        if not batch.ok:
            rc = 1
            if options.fail_fast:
                break
    return rc


def _options(args) -> ApplyOptions:
    return ApplyOptions.from_env(
        namespace=args.namespace,
        crd_timeout=args.timeout,
        crd_poll_interval=args.interval,
        on_name_conflict=args.on_name_conflict,
        fail_fast=args.fail_fast,
        skip_on_decode_error=False if args.keep_going_on_decode_error else None,
    )


def run(args) -> int:
    if args.command == "parse":
        return run_parse(args)
    return run_apply(args)
