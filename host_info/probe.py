"""``host-info-probe``: fetch ``/info`` from a running service and print it.

Exits with status 1 when the service cannot be reached or answers with an
error, so it can be used as a container health check.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import requests

from .config import DEFAULT_PORT, INFO_PATH

DEFAULT_INFO_URL = f"http://127.0.0.1:{DEFAULT_PORT}{INFO_PATH}"
DEFAULT_TIMEOUT_SECONDS = 10.0

logger = logging.getLogger(__name__)


def fetch_system_info(url: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> Dict[str, Any]:
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.json()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="host-info-probe",
        description="Fetch and print host info from a running service.",
    )
    parser.add_argument("--url", default=DEFAULT_INFO_URL, help="Info endpoint (default: %(default)s)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_SECONDS,
        help="Request timeout in seconds (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # Diagnostics go to stderr; stdout carries only the JSON document.
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING, format="%(levelname)s %(message)s")

    try:
        info = fetch_system_info(args.url, timeout=args.timeout)
    except requests.RequestException as exc:
        logger.error("Failed to fetch host info from %s: %s", args.url, exc)
        return 1

    print(json.dumps(info, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
