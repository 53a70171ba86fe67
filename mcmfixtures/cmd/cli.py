import argparse
import logging
import os
import sys

from mcmfixtures.config import ON_CONFLICT_FAIL, ON_CONFLICT_WARN
from mcmfixtures.logfiles import rotate_log_file

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcmfixtures",
        description="Apply YAML manifest fixtures to a cluster",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (overrides --log-level to DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        help="Also log to this file, rotating previous copies to .1 .. .10",
    )
    parser.add_argument("--kubeconfig", help="Path to a kubeconfig file")
    parser.add_argument("--context", help="Kubeconfig context to use")

    sub = parser.add_subparsers(dest="command", required=True)

    apply_p = sub.add_parser("apply", help="Create resources from manifest files, directories or URLs")
    apply_p.add_argument("sources", nargs="+", metavar="SOURCE")
    apply_p.add_argument("-n", "--namespace", help="Target namespace for namespaced resources")
    apply_p.add_argument("--timeout", type=float, help="Seconds to wait for a CRD to be established")
    apply_p.add_argument("--interval", type=float, help="Seconds between CRD status polls")
    apply_p.add_argument(
        "--on-name-conflict",
        choices=[ON_CONFLICT_WARN, ON_CONFLICT_FAIL],
        help="What to do when a CRD reports NamesAccepted=False",
    )
    apply_p.add_argument(
        "--fail-fast",
        action="store_true",
        default=None,
        help="Stop at the first file that fails",
    )
    apply_p.add_argument(
        "--keep-going-on-decode-error",
        action="store_true",
        help="Apply the decodable documents of a file even if others fail to decode",
    )

    parse_p = sub.add_parser("parse", help="Decode manifests and print what would be applied")
    parse_p.add_argument("sources", nargs="+", metavar="SOURCE")
    return parser


def configure_logging(level_name: str, log_file=None):
    level = getattr(logging, level_name, logging.INFO)
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.StreamHandler(rotate_log_file(log_file)))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level_name = "DEBUG" if args.debug else args.log_level.upper()
    os.environ["LOG_LEVEL"] = level_name
    configure_logging(level_name, args.log_file)
    logging.getLogger("mcmfixtures.cli").debug("Starting mcmfixtures %s with level %s", args.command, level_name)

    from .main import run

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
