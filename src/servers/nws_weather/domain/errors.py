class WeatherToolError(Exception):
    """Base class for every failure a weather tool knows how to report.

    The application layer converts these into plain text responses, so
    the message should read well on its own.
    """


class TransportError(WeatherToolError):
    """Connection failure, timeout or non-2xx response from the weather API."""


class DataShapeError(WeatherToolError):
    """Upstream body is not valid JSON or lacks a required field."""


class InputError(WeatherToolError):
    """Tool argument cannot be used to build a request."""
