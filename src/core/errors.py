"""Query errors - one exception per pipeline failure.

Every stage of the query pipeline fails by raising a subclass of
QueryError. The message of each exception is the user-facing text that
the driver displays verbatim.
"""


class QueryError(Exception):
    """Base class for all errors that terminate a query."""


class ValidationError(QueryError):
    """The user-supplied date range was rejected."""


class InvalidFormatError(ValidationError):
    """A date string does not match YYYY-MM-DD."""

    def __init__(self, value: str) -> None:
        super().__init__("Formato de fecha inválido. Usa el formato YYYY-MM-DD.")
        self.value = value


class InvalidDateError(ValidationError):
    """A well-formed date string is not a real calendar date."""

    def __init__(self, value: str, cause: str) -> None:
        super().__init__(f"Error al procesar las fechas: {cause}")
        self.value = value


class DateRangeError(ValidationError):
    """Start date is after end date."""

    def __init__(self, start: str, end: str) -> None:
        super().__init__(
            "La fecha de inicio no puede ser posterior a la fecha de finalización."
        )
        self.start = start
        self.end = end


class UpstreamError(QueryError):
    """The USGS service could not be reached or returned unusable data."""


class TransportError(UpstreamError):
    """Connection or I/O failure talking to the service."""

    def __init__(self, cause: str) -> None:
        super().__init__(f"Error al obtener datos: {cause}")
        self.cause = cause


class HttpStatusError(UpstreamError):
    """The service answered with a non-200 status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Error en la consulta a la API: {status_code}")
        self.status_code = status_code


class MalformedResponseError(UpstreamError):
    """The response body is not the expected feature collection."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Respuesta inválida de la API: {detail}")
        self.detail = detail
