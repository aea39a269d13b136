import json
import logging
from typing import Any, Dict, List

from servers.nws_weather.domain.errors import DataShapeError, InputError
from servers.nws_weather.domain.models import (
    AlertSnapshot,
    Forecast,
    WeatherAlert,
    WeatherPeriod,
)
from servers.nws_weather.domain.service.interfaces import WeatherService
from servers.nws_weather.infrastructure.adaptors import NWSHttpClient

logger = logging.getLogger(__name__)


def _parse_json(body: str, source: str) -> Any:
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise DataShapeError(f"Invalid JSON in {source} response: {e}") from e


def _lookup(data: Any, path: str) -> Any:
    """Follow a dotted path through nested JSON objects.

    Returns None when any step is missing or is not an object, mirroring
    how an absent and a null field look the same to callers.
    """
    node = data
    for key in path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _as_text(value: Any) -> str:
    """Render a JSON scalar the way it appears in the response body."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _require_text(data: Dict[str, Any], key: str, source: str) -> str:
    value = data.get(key)
    if value is None:
        raise DataShapeError(f"Missing '{key}' in {source}")
    return _as_text(value)


class NWSWeatherService(WeatherService):
    """National Weather Service implementation of WeatherService.

    Integrates with the NWS API (weather.gov) which provides free
    weather data for US locations. Uses the two-step process:
    1. GET /points/{lat},{lon} to get forecast endpoint
    2. GET forecast endpoint to retrieve actual forecast data

    Args:
        http_client: Shared client bound to the NWS base URL and headers
    """

    def __init__(self, http_client: NWSHttpClient):
        self.http_client = http_client

    async def get_forecast(self, latitude: float, longitude: float) -> Forecast:
        """Get the current weather forecast for a location.

        Args:
            latitude: Latitude of the location
            longitude: Longitude of the location
        """
        try:
            points_path = f"/points/{latitude:.4f},{longitude:.4f}"
        except (TypeError, ValueError) as e:
            raise InputError(
                f"Invalid coordinates ({latitude!r}, {longitude!r}): {e}"
            ) from e

        # First get the forecast grid endpoint
        points_data = _parse_json(
            await self.http_client.get_text(points_path), "points"
        )
        forecast_url = _lookup(points_data, "properties.forecast")
        if not isinstance(forecast_url, str):
            raise DataShapeError(
                "Missing 'properties.forecast' in points response"
            )

        forecast_data = _parse_json(
            await self.http_client.get_text(forecast_url), "forecast"
        )
        periods = _lookup(forecast_data, "properties.periods")

        if not isinstance(periods, list) or not periods:
            logger.info(f"No forecast periods returned for {points_path}")
            return Forecast(latitude=latitude, longitude=longitude)

        first = periods[0]
        if not isinstance(first, dict):
            raise DataShapeError("Forecast period is not a JSON object")

        source = "forecast period"
        period = WeatherPeriod(
            temperature=_require_text(first, "temperature", source),
            temperature_unit=_require_text(first, "temperatureUnit", source),
            wind_speed=_require_text(first, "windSpeed", source),
            wind_direction=_require_text(first, "windDirection", source),
            detailed_forecast=_require_text(first, "detailedForecast", source),
        )
        return Forecast(latitude=latitude, longitude=longitude, period=period)

    async def get_alerts(self, state: str) -> AlertSnapshot:
        """Get weather alerts for a US state.

        Args:
            state: Two-letter US state code (e.g. CA, NY)
        """
        if not isinstance(state, str):
            raise InputError(f"State code must be a string, got {state!r}")
        state = state.upper()

        data = _parse_json(
            await self.http_client.get_text(
                "/alerts/active", params={"area": state}
            ),
            "alerts",
        )
        features = _lookup(data, "features")

        if not isinstance(features, list) or not features:
            return AlertSnapshot(state=state)

        alerts: List[WeatherAlert] = []
        for feature in features:
            props = _lookup(feature, "properties")
            if not isinstance(props, dict):
                raise DataShapeError("Alert feature has no 'properties' object")

            source = "alert properties"
            instruction = props.get("instruction")
            alerts.append(
                WeatherAlert(
                    event=_require_text(props, "event", source),
                    area=_require_text(props, "areaDesc", source),
                    severity=_require_text(props, "severity", source),
                    description=_require_text(props, "description", source),
                    instructions=""
                    if instruction is None
                    else _as_text(instruction),
                )
            )

        logger.info(f"Found {len(alerts)} active alert(s) for {state}")
        return AlertSnapshot(state=state, alerts=alerts)
