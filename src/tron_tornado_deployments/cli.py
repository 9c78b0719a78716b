"""Command-line entry point: tron-tornado-deploy [--reset]."""

import argparse
import logging
from typing import List, Optional

from .config import build_run_context
from .deployments import run_deployment

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure default logging if no handlers are present."""
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tron-tornado-deploy",
        description=(
            "Deploy the mock token, hasher, verifier and Tornado pools, reusing "
            "addresses already recorded in the address store."
        ),
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="redeploy every contract even if an address is already recorded",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        context = build_run_context(reset=args.reset)
        run_deployment(context)
    except Exception:
        logger.exception("Deployment failed")
        return 1
    return 0
