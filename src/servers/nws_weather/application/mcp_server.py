import logging
from typing import Annotated, Callable, List, Tuple

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from servers.nws_weather.domain.errors import TransportError, WeatherToolError
from servers.nws_weather.domain.service.interfaces import WeatherService
from servers.nws_weather.infrastructure.application import MCPApplicationService

logger = logging.getLogger(__name__)


class WeatherMCPService(MCPApplicationService):
    """MCP Application Service for weather domain operations.

    Exposes weather domain capabilities through the Model Context Protocol.
    Every tool returns plain text: failures are reported as a message
    starting with "Error ..." or "Unexpected error: ..." and never raised
    to the host agent.

    Available Tools:
        - get_weather_forecast_by_location: Current forecast for coordinates
        - get_alerts: Active weather alerts for a US state
    """

    def __init__(self, mcp: FastMCP, weather_service: WeatherService):
        self.weather_service = weather_service
        super().__init__(mcp)

    @property
    def tools(self) -> List[Tuple[str, str, Callable]]:
        """Register tools for the MCP server"""
        return [
            (
                "get_weather_forecast_by_location",
                "Get weather forecast for a specific latitude/longitude",
                self.get_weather_forecast_by_location,
            ),
            (
                "get_alerts",
                "Get weather alerts for a US state",
                self.get_alerts,
            ),
        ]

    async def get_weather_forecast_by_location(
        self,
        latitude: Annotated[float, Field(description="Latitude coordinate")],
        longitude: Annotated[float, Field(description="Longitude coordinate")],
    ) -> str:
        """MCP tool: Get weather forecast for coordinates.

        Returns detailed forecast for the current period including the
        temperature and unit, wind speed and direction, and the detailed
        forecast description.

        Args:
            latitude: Decimal degrees latitude
            longitude: Decimal degrees longitude

        Returns:
            Three-line forecast text, "No forecast data available." when
            the location has no periods, or an error message
        """
        try:
            forecast = await self.weather_service.get_forecast(latitude, longitude)
            return forecast.to_display_string()
        except WeatherToolError as e:
            logger.warning(f"Forecast lookup failed for ({latitude}, {longitude}): {e}")
            return f"Error fetching weather data: {e}"
        except Exception as e:
            logger.exception("Unexpected failure in forecast lookup")
            return f"Unexpected error: {e}"

    async def get_alerts(
        self,
        state: Annotated[
            str, Field(description="Two-letter US state code (e.g. CA, NY)")
        ],
    ) -> str:
        """Retrieve active weather alerts for a US state.

        Each alert lists its event type, affected area, severity,
        description and safety instructions.

        Args:
            state: Two-letter US state code (e.g., "CA", "TX", "FL")
                   Case-insensitive, automatically normalized to uppercase

        Returns:
            One block per active alert, a "No active alerts" message, or
            an error message
        """
        try:
            snapshot = await self.weather_service.get_alerts(state)
            return snapshot.to_display_string()
        except TransportError as e:
            logger.warning(f"Alert lookup failed for {state}: {e}")
            return f"Error fetching alerts: {e}"
        except Exception as e:
            logger.exception(f"Unexpected failure in alert lookup for {state}")
            return f"Unexpected error: {e}"
