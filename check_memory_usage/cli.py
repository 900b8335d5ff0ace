"""
Command line entry point for the check-memory-usage plugin.

Samples memory usage twice, --sample-interval seconds apart, and exits with
0 (OK), 1 (WARNING), 2 (CRITICAL) or 3 (UNKNOWN). Defaults can be overridden
with CHECK_MEMORY_USAGE_CRITICAL, CHECK_MEMORY_USAGE_WARNING and
CHECK_MEMORY_USAGE_SAMPLE_INTERVAL; flags win over the environment.
Unusable flag or environment values are reported as WARNING, exit 1.
"""

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from check_memory_usage.config import (
    DEFAULT_CRITICAL,
    DEFAULT_INTERVAL,
    DEFAULT_WARNING,
    PLUGIN_NAME,
    CheckConfig,
)
from check_memory_usage.errors import ConfigurationError
from check_memory_usage.plugin import CheckPlugin


class CheckArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors become ConfigurationError."""

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message)


def parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    # flags default to None so unset ones can fall back to the environment
    parser = CheckArgumentParser(
        prog=PLUGIN_NAME,
        description="Check memory usage and provide metrics",
    )
    parser.add_argument(
        "-c",
        "--critical",
        type=float,
        help=f"Critical threshold for overall memory usage (default: {DEFAULT_CRITICAL:g})",
    )
    parser.add_argument(
        "-w",
        "--warning",
        type=float,
        help=f"Warning threshold for overall memory usage (default: {DEFAULT_WARNING:g})",
    )
    parser.add_argument(
        "-s",
        "--sample-interval",
        type=int,
        help=f"Length of sample interval in seconds (default: {DEFAULT_INTERVAL})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Write debug logging to stderr.",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    # stdout is reserved for the single status line
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except ConfigurationError as exc:
        return CheckPlugin(CheckConfig()).report_error(exc)

    configure_logging(args.verbose)

    try:
        config = CheckConfig.from_env(
            critical=args.critical,
            warning=args.warning,
            interval=args.sample_interval,
        )
    except ConfigurationError as exc:
        return CheckPlugin(CheckConfig()).report_error(exc)

    return CheckPlugin(config).execute()


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
