"""Shared fixtures: a stubbed NWS API served through httpx.MockTransport."""

from typing import Any, Callable, Dict, List

import httpx
import pytest
import pytest_asyncio

from servers.nws_weather.infrastructure.adaptors import NWSHttpClient

FORECAST_URL = "https://api.weather.gov/gridpoints/LWX/97,71/forecast"


def points_payload(forecast_url: str = FORECAST_URL) -> Dict[str, Any]:
    return {"properties": {"forecast": forecast_url, "gridId": "LWX"}}


def period_payload(**overrides: Any) -> Dict[str, Any]:
    period = {
        "number": 1,
        "name": "Tonight",
        "temperature": 54,
        "temperatureUnit": "F",
        "windSpeed": "5 to 10 mph",
        "windDirection": "NW",
        "detailedForecast": "Mostly clear, with a low around 54.",
    }
    period.update(overrides)
    return period


def alert_feature(event: str, **overrides: Any) -> Dict[str, Any]:
    properties = {
        "event": event,
        "areaDesc": "Los Angeles County",
        "severity": "Moderate",
        "description": f"{event} in effect until 6 PM.",
        "instruction": "Stay indoors.",
    }
    properties.update(overrides)
    return {"type": "Feature", "properties": properties}


class StubAPI:
    """Routes requests to canned handlers and records what was sent."""

    def __init__(self):
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add_json(self, path: str, payload: Any, status_code: int = 200):
        self.routes[path] = lambda request: httpx.Response(status_code, json=payload)

    def add_text(self, path: str, text: str, status_code: int = 200):
        self.routes[path] = lambda request: httpx.Response(status_code, text=text)

    def add_handler(self, path: str, handler: Callable[[httpx.Request], httpx.Response]):
        self.routes[path] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, json={"title": "Not Found"})
        return handler(request)


@pytest.fixture
def stub_api() -> StubAPI:
    return StubAPI()


@pytest_asyncio.fixture
async def http_client(stub_api):
    client = NWSHttpClient(transport=httpx.MockTransport(stub_api))
    yield client
    await client.aclose()
