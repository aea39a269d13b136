import os
from dataclasses import dataclass
from typing import Mapping, Optional

from servers.nws_weather.infrastructure.adaptors import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)


@dataclass(frozen=True)
class WeatherServiceConfig:
    """Runtime settings for the weather MCP server.

    Attributes:
        base_url: Root URL of the NWS API
        user_agent: User-Agent sent with every request
        timeout: Request timeout in seconds
        transport: MCP transport to serve on ("stdio", "sse", ...)
        log_level: Name of the root logging level
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    transport: str = "stdio"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WeatherServiceConfig":
        """Build a config from environment variables, falling back to defaults.

        Raises:
            ValueError: NWS_TIMEOUT is set but is not a number
        """
        env = os.environ if environ is None else environ

        timeout_raw = env.get("NWS_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"NWS_TIMEOUT must be a number, got {timeout_raw!r}")

        return cls(
            base_url=env.get("NWS_BASE_URL") or DEFAULT_BASE_URL,
            user_agent=env.get("NWS_USER_AGENT") or DEFAULT_USER_AGENT,
            timeout=timeout,
            transport=env.get("MCP_TRANSPORT") or "stdio",
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
