"""USGS query URL construction - Pure functions."""

from src.core.validation import DateRange


# USGS FDSN Event Web Service base URL
USGS_API_BASE = "https://earthquake.usgs.gov/fdsnws/event/1/query"


def build_query_url(date_range: DateRange, base_url: str = USGS_API_BASE) -> str:
    """Build the GeoJSON event query URL for a validated date range.

    Pure function. The dates are inserted verbatim; YYYY-MM-DD needs no
    escaping.

    Args:
        date_range: Validated date range
        base_url: Event service endpoint

    Returns:
        Full request URL
    """
    return (
        f"{base_url}?format=geojson"
        f"&starttime={date_range.start}"
        f"&endtime={date_range.end}"
    )
