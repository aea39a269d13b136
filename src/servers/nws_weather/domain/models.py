from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class WeatherPeriod:
    """Represents a single period in a weather forecast.

    A weather period typically corresponds to a 12-hour timeframe
    (e.g., "Tonight", "Monday"). Values are kept as the text the
    weather API returned so they can be echoed back verbatim.

    Attributes:
        temperature: Temperature value (e.g., "72")
        temperature_unit: Temperature unit ("F" for Fahrenheit, "C" for Celsius)
        wind_speed: Wind speed description (e.g., "5 to 10 mph")
        wind_direction: Wind direction abbreviation (e.g., "NW", "SSE")
        detailed_forecast: Complete narrative forecast for this period
    """

    temperature: str
    temperature_unit: str
    wind_speed: str
    wind_direction: str
    detailed_forecast: str

    def to_display_string(self) -> str:
        """Format for human-readable display"""
        return (
            f"Forecast: {self.detailed_forecast}\n"
            f"Temperature: {self.temperature} {self.temperature_unit}\n"
            f"Wind: {self.wind_speed} {self.wind_direction}"
        )


@dataclass
class Forecast:
    """Current forecast for a location.

    Only the first upstream period is kept; the tool reports what is
    happening now rather than the full multi-day outlook.

    Attributes:
        latitude: Location latitude in decimal degrees
        longitude: Location longitude in decimal degrees
        period: First forecast period, None if the API returned none
    """

    latitude: float
    longitude: float
    period: Optional[WeatherPeriod] = None

    def to_display_string(self) -> str:
        """Format for human-readable display"""
        if self.period is None:
            return "No forecast data available."

        return self.period.to_display_string()


@dataclass
class WeatherAlert:
    """Individual weather alert issued by meteorological authorities.

    Represents a single weather warning, watch, or advisory (e.g., tornado
    warning, flood watch, heat advisory). Alerts are value objects in DDD
    terms - they're identified by their content rather than a unique ID.

    Attributes:
        event: Alert type/category (e.g., "Tornado Warning", "Heat Advisory")
        area: Geographic description of affected area (e.g., "Harris County, TX")
        severity: Alert severity level ("Minor", "Moderate", "Severe", "Extreme")
        description: Full alert description with details and impacts
        instructions: Safety instructions for the public (empty if not provided)
    """

    event: str
    area: str
    severity: str
    description: str
    instructions: str = ""

    def to_display_string(self) -> str:
        """Format alert for display, ending with a blank line"""
        return (
            f"🔔 Event: {self.event}\n"
            f"📍 Area: {self.area}\n"
            f"⚠️ Severity: {self.severity}\n"
            f"📝 Description: {self.description}\n"
            f"🛡️ Instructions: {self.instructions or 'N/A'}\n"
            "\n"
        )


@dataclass
class AlertSnapshot:
    """Active weather alerts for a state at the time of the request.

    Attributes:
        state: Uppercase two-letter US state code
        alerts: Alerts in the order the API returned them
    """

    state: str
    alerts: List[WeatherAlert] = field(default_factory=list)

    def to_display_string(self) -> str:
        """Format alert set for display"""
        if not self.alerts:
            return f"No active alerts for state: {self.state}"

        return "".join(alert.to_display_string() for alert in self.alerts)
