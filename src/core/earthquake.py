"""Earthquake data models and parsing - Pure functions.

This module handles parsing USGS GeoJSON data into typed Earthquake objects.
All functions are pure with no side effects.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from src.core.errors import MalformedResponseError


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Earthquake:
    """Immutable earthquake record.

    Attributes:
        magnitude: Earthquake magnitude
        place: Human-readable location description
        time_ms: Event time in milliseconds since epoch (UTC)
    """
    magnitude: float
    place: str
    time_ms: int

    @property
    def time(self) -> datetime:
        """Event time as an aware UTC datetime."""
        return EPOCH + timedelta(milliseconds=self.time_ms)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def decode_feature_collection(body: str) -> list[Any]:
    """Decode a response body and return its features array.

    Pure function.

    Args:
        body: Raw response text

    Returns:
        The list under the top-level "features" key

    Raises:
        MalformedResponseError: If the body is not JSON, not an object,
            or has no features list
    """
    try:
        document = json.loads(body)
    except ValueError as e:
        raise MalformedResponseError(f"JSON no válido ({e})") from e

    if not isinstance(document, dict):
        raise MalformedResponseError("se esperaba un objeto JSON")

    features = document.get("features")
    if not isinstance(features, list):
        raise MalformedResponseError("falta el arreglo 'features'")

    return features


def parse_earthquake(feature: Any) -> Earthquake | None:
    """Parse a single GeoJSON feature into an Earthquake.

    Features without a magnitude are returned as None; USGS leaves mag
    null for some events. Any other missing or mistyped field is an error.

    Args:
        feature: GeoJSON feature from the USGS API

    Returns:
        Earthquake, or None if the feature has no magnitude

    Raises:
        MalformedResponseError: If the feature is not usable
    """
    if not isinstance(feature, dict):
        raise MalformedResponseError("elemento de 'features' no es un objeto")

    props = feature.get("properties")
    if not isinstance(props, dict):
        raise MalformedResponseError("elemento sin 'properties'")

    magnitude = props.get("mag")
    if magnitude is None:
        return None

    if not _is_number(magnitude):
        raise MalformedResponseError(f"'mag' no es numérico: {magnitude!r}")

    place = props.get("place")
    if not isinstance(place, str):
        raise MalformedResponseError(f"'place' ausente o no es texto: {place!r}")

    time_ms = props.get("time")
    if not _is_integer(time_ms):
        raise MalformedResponseError(f"'time' ausente o no es entero: {time_ms!r}")

    # datetime only covers years 1..9999
    try:
        EPOCH + timedelta(milliseconds=time_ms)
    except OverflowError as e:
        raise MalformedResponseError(f"'time' fuera de rango: {time_ms!r}") from e

    return Earthquake(
        magnitude=float(magnitude),
        place=place,
        time_ms=time_ms,
    )


def parse_earthquakes(features: list[Any]) -> list[Earthquake]:
    """Parse features into Earthquakes, in document order.

    Pure function: skips features without a magnitude.
    """
    earthquakes = []

    for feature in features:
        earthquake = parse_earthquake(feature)
        if earthquake is not None:
            earthquakes.append(earthquake)

    return earthquakes


def parse_response(body: str) -> list[Earthquake]:
    """Parse a USGS GeoJSON response body into Earthquakes.

    Args:
        body: Raw response text

    Returns:
        Earthquakes in document order

    Raises:
        MalformedResponseError: If the document or any magnitude-bearing
            feature is malformed
    """
    return parse_earthquakes(decode_feature_collection(body))
