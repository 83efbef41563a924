"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Date range validation
- Query URL construction
- GeoJSON response parsing
- Sorting and report formatting

All functions here are deterministic and have no I/O.
"""

from src.core.errors import (
    QueryError,
    InvalidFormatError,
    InvalidDateError,
    DateRangeError,
    TransportError,
    HttpStatusError,
    MalformedResponseError,
)
from src.core.validation import DateRange, validate_date_range
from src.core.query import USGS_API_BASE, build_query_url
from src.core.earthquake import Earthquake, parse_response
from src.core.formatter import build_report, format_report, sort_by_recency

__all__ = [
    # Errors
    "QueryError",
    "InvalidFormatError",
    "InvalidDateError",
    "DateRangeError",
    "TransportError",
    "HttpStatusError",
    "MalformedResponseError",
    # Validation
    "DateRange",
    "validate_date_range",
    # Query
    "USGS_API_BASE",
    "build_query_url",
    # Earthquake
    "Earthquake",
    "parse_response",
    # Formatter
    "build_report",
    "format_report",
    "sort_by_recency",
]
