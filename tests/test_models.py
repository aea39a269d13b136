"""Tests for the text rendering of the weather domain models."""

from servers.nws_weather.domain.models import (
    AlertSnapshot,
    Forecast,
    WeatherAlert,
    WeatherPeriod,
)


def make_alert(event: str, instructions: str = "") -> WeatherAlert:
    return WeatherAlert(
        event=event,
        area="Harris County, TX",
        severity="Severe",
        description="Storms expected.",
        instructions=instructions,
    )


def test_period_display():
    period = WeatherPeriod(
        temperature="18",
        temperature_unit="C",
        wind_speed="10 km/h",
        wind_direction="SSE",
        detailed_forecast="Light rain.",
    )

    assert period.to_display_string() == (
        "Forecast: Light rain.\nTemperature: 18 C\nWind: 10 km/h SSE"
    )


def test_forecast_without_period():
    assert Forecast(latitude=1.0, longitude=2.0).to_display_string() == (
        "No forecast data available."
    )


def test_alert_block_ends_with_blank_line():
    block = make_alert("Tornado Warning", "Take shelter now.").to_display_string()

    assert block == (
        "🔔 Event: Tornado Warning\n"
        "📍 Area: Harris County, TX\n"
        "⚠️ Severity: Severe\n"
        "📝 Description: Storms expected.\n"
        "🛡️ Instructions: Take shelter now.\n"
        "\n"
    )


def test_alert_without_instructions_shows_na():
    assert "🛡️ Instructions: N/A\n" in make_alert("Heat Advisory").to_display_string()


def test_empty_snapshot():
    assert AlertSnapshot(state="TX").to_display_string() == (
        "No active alerts for state: TX"
    )


def test_snapshot_concatenates_blocks_in_order():
    alerts = [make_alert("Flood Watch"), make_alert("Flash Flood Warning")]

    result = AlertSnapshot(state="TX", alerts=alerts).to_display_string()

    assert result == alerts[0].to_display_string() + alerts[1].to_display_string()
    assert result.index("Flood Watch") < result.index("Flash Flood Warning")
