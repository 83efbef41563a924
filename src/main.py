"""Cloud Function Entry Point.

This module provides the HTTP entry point for Google Cloud Functions.
It's a thin wrapper that loads configuration and invokes the query runner.
"""

import logging
import os

import functions_framework
from flask import Request

from src.core.errors import ValidationError
from src.orchestrator import QueryRunner
from src.shell.config_loader import load_config


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


TEXT_HEADERS = {"Content-Type": "text/plain; charset=utf-8"}


@functions_framework.http
def earthquake_query(request: Request) -> tuple[str, int, dict[str, str]]:
    """HTTP Cloud Function entry point.

    Query parameters:
        starttime: Start date (YYYY-MM-DD)
        endtime: End date (YYYY-MM-DD)

    Args:
        request: Flask request object

    Returns:
        Tuple of (body text, HTTP status code, headers). 400 for bad
        dates, 502 when USGS fails or returns unusable data.
    """
    start = request.args.get("starttime", "")
    end = request.args.get("endtime", "")

    logger.info("Earthquake query request: %s..%s", start, end)

    runner = QueryRunner(load_config())
    result = runner.run_query(start, end)

    if result.success:
        return result.report, 200, TEXT_HEADERS

    if isinstance(result.exception, ValidationError):
        return result.error, 400, TEXT_HEADERS

    return result.error, 502, TEXT_HEADERS
