"""Report formatting - Pure functions.

This module orders earthquakes and renders them as the text report.
All functions are pure with no side effects.
"""

from datetime import timedelta

from src.core.earthquake import EPOCH, Earthquake


REPORT_HEADER = "Terremotos:"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def sort_by_recency(earthquakes: list[Earthquake]) -> list[Earthquake]:
    """Sort earthquakes by time, newest first.

    Pure function. The sort is stable, so events with the same time keep
    their document order.
    """
    return sorted(earthquakes, key=lambda e: e.time_ms, reverse=True)


def format_timestamp(time_ms: int) -> str:
    """Format epoch milliseconds as YYYY-MM-DD HH:MM:SS in UTC.

    Pure function. Sub-second precision is dropped.
    """
    return (EPOCH + timedelta(milliseconds=time_ms)).strftime(TIMESTAMP_FORMAT)


def format_earthquake_line(earthquake: Earthquake) -> str:
    """Format a one-line entry of the report.

    Pure function.
    """
    return (
        f"Fecha: {format_timestamp(earthquake.time_ms)}, "
        f"Magnitud: {earthquake.magnitude:.1f}, "
        f"Ubicación: {earthquake.place}"
    )


def format_report(earthquakes: list[Earthquake]) -> str:
    """Render earthquakes as the report text, in the given order.

    Pure function.

    Args:
        earthquakes: Earthquakes to list

    Returns:
        Header, blank line, then one newline-terminated line per event
    """
    lines = "".join(f"{format_earthquake_line(eq)}\n" for eq in earthquakes)
    return f"{REPORT_HEADER}\n\n{lines}"


def build_report(earthquakes: list[Earthquake]) -> str:
    """Sort earthquakes newest first and render the report."""
    return format_report(sort_by_recency(earthquakes))
