"""USGS API Client - Imperative Shell.

This module handles HTTP communication with the USGS Earthquake API.
All I/O is contained here; business logic is in the core module.
"""

import logging
from http import HTTPStatus

import requests

from src.core.errors import HttpStatusError, TransportError


logger = logging.getLogger(__name__)


class USGSClient:
    """Client for fetching earthquake data from USGS API.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(self, timeout: float | None = None) -> None:
        """Initialize USGS client.

        Args:
            timeout: Request timeout in seconds, None to wait indefinitely
        """
        self.timeout = timeout

    def fetch(self, url: str) -> str:
        """Fetch a query URL and return the response body.

        This method performs HTTP I/O. It blocks until the body is fully
        read or the request fails.

        Args:
            url: Full query URL (from build_query_url)

        Returns:
            Response body text

        Raises:
            TransportError: If the request could not be completed
            HttpStatusError: If the status is not 200
        """
        logger.info("Fetching earthquakes from USGS: %s", url)

        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("USGS request failed: %s", e)
            raise TransportError(str(e)) from e

        if response.status_code != HTTPStatus.OK:
            logger.warning("USGS returned status %d", response.status_code)
            raise HttpStatusError(response.status_code)

        logger.debug("Received %d bytes from USGS", len(response.content))

        return response.text
