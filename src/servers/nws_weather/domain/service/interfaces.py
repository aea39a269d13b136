from abc import ABC, abstractmethod

from servers.nws_weather.domain.models import AlertSnapshot, Forecast


class WeatherService(ABC):
    """Abstract interface for weather data retrieval services.

    Defines the domain contract for weather operations. Implementations
    handle external API communication and raise the errors defined in
    ``servers.nws_weather.domain.errors``; turning those into text is
    left to the application layer.
    """

    @abstractmethod
    async def get_forecast(self, latitude: float, longitude: float) -> Forecast:
        """Retrieve the current forecast for geographic coordinates.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees

        Returns:
            Forecast holding the first forecast period, or no period when
            the API has none for the location

        Raises:
            TransportError: The API could not be reached or refused the request
            DataShapeError: A response was not the expected JSON
            InputError: The coordinates cannot be formatted into a request
        """
        pass

    @abstractmethod
    async def get_alerts(self, state: str) -> AlertSnapshot:
        """Retrieve active weather alerts for a US state.

        Args:
            state: Two-letter US state code (e.g., "CA", "TX", "FL")
                Case-insensitive, normalized to uppercase by implementations

        Returns:
            AlertSnapshot for the normalized state. An empty snapshot
            means no active alerts (normal condition, not an error).

        Raises:
            TransportError: The API could not be reached or refused the request
            DataShapeError: An alert lacks a required field
            InputError: The state is not a string
        """
        pass
