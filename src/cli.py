"""Command-line driver for earthquake queries.

Usage:
    earthquake-query 2024-05-01 2024-05-10
    earthquake-query 2024-05-01 2024-05-10 --config config/config.yaml
    earthquake-query 2024-05-01 2024-05-10 --timeout 30

Prints the report to stdout, or the error message to stderr with exit
status 1.

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    USGS_API_BASE, REQUEST_TIMEOUT, LOG_LEVEL: Config overrides
"""

import argparse
import logging
import os
import sys

import yaml

from src.orchestrator import QueryRunner
from src.shell.config_loader import load_config


logger = logging.getLogger(__name__)


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def positive_float(value: str) -> float:
    """argparse type for a number of seconds greater than zero."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the earthquake-query command."""
    parser = argparse.ArgumentParser(
        prog="earthquake-query",
        description="List USGS earthquakes between two dates, newest first.",
    )
    parser.add_argument("start", help="Start date (YYYY-MM-DD)")
    parser.add_argument("end", help="End date (YYYY-MM-DD)")
    parser.add_argument(
        "--config",
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        help="HTTP timeout in seconds (default: no timeout)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one query and print the result.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit status: 0 on success, 1 if the query failed, 2 if the
        configuration is invalid
    """
    args = build_parser().parse_args(argv)

    # Before load_config, which logs
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
    )

    try:
        config = load_config(args.config)
        if args.timeout is not None:
            config.request_timeout_seconds = args.timeout
        runner = QueryRunner(config)
    except (ValueError, yaml.YAMLError) as e:
        logger.error("Could not load configuration: %s", e)
        print(f"Configuración inválida: {e}", file=sys.stderr)
        return 2

    logging.getLogger().setLevel(config.log_level_value)

    result = runner.run_query(args.start, args.end)

    if not result.success:
        print(result.error, file=sys.stderr)
        return 1

    print(result.report, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
