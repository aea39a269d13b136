import logging
import pathlib

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from servers.nws_weather.application.mcp_server import WeatherMCPService
from servers.nws_weather.domain.service.services import NWSWeatherService
from servers.nws_weather.infrastructure.adaptors import NWSHttpClient
from servers.nws_weather.infrastructure.config import WeatherServiceConfig

__FILE_PATH__ = pathlib.Path(__file__).resolve()

logger = logging.getLogger(__name__)


def build_service(config: WeatherServiceConfig) -> WeatherMCPService:
    """Wire the HTTP client, domain service and MCP application service"""
    http_client = NWSHttpClient(
        base_url=config.base_url,
        user_agent=config.user_agent,
        timeout=config.timeout,
    )
    weather_service = NWSWeatherService(http_client)

    return WeatherMCPService(
        mcp=FastMCP("nws_weather"),
        weather_service=weather_service,
    )


def main():
    load_dotenv(__FILE_PATH__.parent.parent / "env" / "weather.env")
    config = WeatherServiceConfig.from_env()

    # logging.basicConfig writes to stderr, leaving stdout to the stdio transport
    logging.basicConfig(level=config.log_level)

    weather_mcp = build_service(config)

    logger.info(f"Starting Weather MCP Service on {config.transport}...")
    weather_mcp.run(transport=config.transport)


if __name__ == "__main__":
    main()
