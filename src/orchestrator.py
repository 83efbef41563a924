"""Orchestrator - Wires Functional Core and Imperative Shell.

This module runs one earthquake query end to end: validate the dates,
build the URL, fetch, parse, sort and format. Each stage stops the
query on failure; nothing is retried.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from src.core.config import Config, ensure_valid_config
from src.core.earthquake import parse_response
from src.core.errors import QueryError
from src.core.formatter import build_report
from src.core.query import build_query_url
from src.core.validation import validate_date_range
from src.shell.usgs_client import USGSClient


logger = logging.getLogger(__name__)


UNEXPECTED_ERROR_MESSAGE = "Error inesperado"


@dataclass
class QueryResult:
    """Outcome of a single query.

    Attributes:
        report: Report text if the query succeeded
        error: User-facing error message if it failed
        earthquake_count: Number of events in the report
        exception: The QueryError behind a failed query
    """
    report: str | None = None
    error: str | None = None
    earthquake_count: int = 0
    exception: QueryError | None = None

    @property
    def success(self) -> bool:
        """Returns True if the query produced a report."""
        return self.error is None

    @property
    def text(self) -> str:
        """The text a driver should display: report or error message."""
        return self.report if self.success else self.error


class QueryRunner:
    """Runs earthquake queries for a date range.

    This class wires together:
    - Core functions (validation, URL building, parsing, formatting)
    - USGS client (fetches the GeoJSON response)
    """

    def __init__(
        self,
        config: Config | None = None,
        usgs_client: USGSClient | None = None,
    ) -> None:
        """Initialize runner with configuration.

        Args:
            config: Application configuration (defaults if not provided)
            usgs_client: USGS client (created if not provided)

        Raises:
            ValueError: If the configuration has critical errors
        """
        self.config = config or Config()
        ensure_valid_config(self.config)
        self.usgs_client = usgs_client or USGSClient(
            timeout=self.config.request_timeout_seconds,
        )

    def run_query(self, start: str, end: str) -> QueryResult:
        """Run one query and return its report or error message.

        Only QueryError is turned into a failed result; anything else is
        a bug and propagates.

        Args:
            start: Start date (YYYY-MM-DD)
            end: End date (YYYY-MM-DD)

        Returns:
            QueryResult with either report or error set
        """
        try:
            date_range = validate_date_range(start, end)
            url = build_query_url(date_range, self.config.api_base_url)
            body = self.usgs_client.fetch(url)
            earthquakes = parse_response(body)
        except QueryError as e:
            logger.warning("Query %s..%s failed: %s", start, end, e)
            return QueryResult(error=str(e), exception=e)

        logger.info(
            "Query %s..%s returned %d earthquakes",
            start,
            end,
            len(earthquakes),
        )

        return QueryResult(
            report=build_report(earthquakes),
            earthquake_count=len(earthquakes),
        )

    def submit(
        self,
        start: str,
        end: str,
        on_complete: Callable[[QueryResult], None],
    ) -> threading.Thread:
        """Run a query on a background thread.

        on_complete is called exactly once, from the worker thread, with
        the result. An unexpected exception is logged and delivered as a
        failed result. There is no cancellation; a new submit starts an
        independent query.

        Returns:
            The started worker thread
        """
        def _worker() -> None:
            try:
                result = self.run_query(start, end)
            except Exception as e:
                logger.exception("Unexpected error in query %s..%s", start, end)
                result = QueryResult(error=f"{UNEXPECTED_ERROR_MESSAGE}: {e}")
            on_complete(result)

        thread = threading.Thread(
            target=_worker,
            name=f"earthquake-query-{start}-{end}",
            daemon=True,
        )
        thread.start()
        return thread


def run_query(start: str, end: str, config: Config | None = None) -> QueryResult:
    """Run a single query with a default runner."""
    return QueryRunner(config).run_query(start, end)
