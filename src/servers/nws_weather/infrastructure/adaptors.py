import logging
from typing import Dict, Optional

import httpx

from servers.nws_weather.domain.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "WeatherApiClient/1.0 (your@email.com)"
DEFAULT_TIMEOUT = 30.0
GEO_JSON = "application/geo+json"


class NWSHttpClient:
    """HTTP client adapter for the National Weather Service API.

    Provides a thin wrapper around a single long-lived httpx.AsyncClient
    so every request shares the connection pool, the base URL and the
    headers the NWS API requires (Accept and User-Agent).

    Args:
        base_url: Root of the weather API; relative paths resolve against it
        user_agent: Product/version and contact, as the NWS asks for
        timeout: Seconds before a request is abandoned
        transport: Optional httpx transport, used to stub the network in tests

    Note:
        No retries are attempted. Any transport problem or non-2xx status
        surfaces as TransportError for the caller to report.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.headers = {
            "Accept": GEO_JSON,
            "User-Agent": user_agent,
        }
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=self.headers,
            timeout=timeout,
            transport=transport,
        )

    async def get_text(self, url: str, params: Optional[Dict[str, str]] = None) -> str:
        """GET a path or absolute URL and return the response body.

        Args:
            url: Path relative to the base URL, or an absolute URL
            params: Optional query parameters

        Returns:
            Raw response body as text

        Raises:
            TransportError: Network failure, timeout or non-success status
        """
        logger.debug(f"GET {url} params={params}")
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"{e.response.status_code} {e.response.reason_phrase} "
                f"for url '{e.request.url}'"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        return response.text

    async def aclose(self):
        """Release pooled connections"""
        await self._client.aclose()

    async def __aenter__(self) -> "NWSHttpClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
