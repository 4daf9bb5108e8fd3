"""
Daily weather summaries from the met.no locationforecast API (yr.no).

Pipeline
========
1. Fetch the compact forecast for each configured location.
2. Keep today's timeseries entries and reduce them to min/max temperature,
   average wind and humidity and total precipitation.
3. Render a short plain-text block the MOTD prompt can quote.

Failures are per location: one unreachable forecast does not drop the others.
"""

from __future__ import annotations

import asyncio
import datetime
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

import aiohttp

logger = logging.getLogger(__name__)

API_URL = "https://api.met.no/weatherapi/locationforecast/2.0/compact"
USER_AGENT = "rooivalk-discord-bot/0.1"

_COMPASS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


@dataclass(frozen=True, slots=True)
class WeatherLocation:
    name: str
    latitude: float
    longitude: float


LOCATIONS: Dict[str, WeatherLocation] = {
    "CAPE_TOWN": WeatherLocation("Cape Town, South Africa", -33.92584, 18.42322),
    "DUBAI": WeatherLocation("Dubai, United Arab Emirates", 25.26472, 55.29241),
    "TAMARIN": WeatherLocation("Tamarin, Mauritius", -20.32922, 57.37768),
}


@dataclass(frozen=True, slots=True)
class WeatherForecast:
    location: str
    friendly_name: str
    min_temp: float
    max_temp: float
    avg_wind_speed: float
    avg_wind_direction: str
    avg_humidity: float
    total_precipitation: float


def degrees_to_compass(degrees: float) -> str:
    """Map a bearing in degrees onto a 16-point compass label."""
    return _COMPASS[round(degrees / 22.5) % 16]


def parse_forecast(
    key: str, payload: Dict[str, Any], today: datetime.date | None = None
) -> WeatherForecast:
    """
    Reduce a locationforecast payload to today's summary for ``key``.

    :raises ValueError: if the payload has no entries for today.
    """
    today_iso = (today or datetime.datetime.now(datetime.timezone.utc).date()).isoformat()
    series = payload.get("properties", {}).get("timeseries", [])
    entries = [entry for entry in series if str(entry.get("time", "")).startswith(today_iso)]
    if not entries:
        raise ValueError(f"No weather data available for {key} on {today_iso}")

    details = [entry["data"]["instant"]["details"] for entry in entries]
    temps = [d["air_temperature"] for d in details]
    winds = [d["wind_speed"] for d in details]
    humidity = [d["relative_humidity"] for d in details]
    directions = [d["wind_from_direction"] for d in details]
    precipitation = sum(
        entry["data"].get("next_1_hours", {}).get("details", {}).get("precipitation_amount", 0.0)
        for entry in entries
    )

    def _avg(values: List[float]) -> float:
        return sum(values) / len(values)

    return WeatherForecast(
        location=key,
        friendly_name=LOCATIONS[key].name if key in LOCATIONS else key,
        min_temp=min(temps),
        max_temp=max(temps),
        avg_wind_speed=_avg(winds),
        avg_wind_direction=degrees_to_compass(_avg(directions)),
        avg_humidity=_avg(humidity),
        total_precipitation=precipitation,
    )


async def get_forecast(session: aiohttp.ClientSession, key: str) -> WeatherForecast:
    location = LOCATIONS.get(key)
    if location is None:
        raise ValueError(f"Invalid location: {key}")

    params = {"lat": location.latitude, "lon": location.longitude}
    async with session.get(API_URL, params=params) as resp:
        resp.raise_for_status()
        data = await resp.json()
    return parse_forecast(key, data)


async def get_all_forecasts() -> List[WeatherForecast]:
    """Return today's forecast for every location that answered."""
    async with aiohttp.ClientSession(headers={"User-Agent": USER_AGENT}) as session:
        results = await asyncio.gather(
            *(get_forecast(session, key) for key in LOCATIONS),
            return_exceptions=True,
        )

    forecasts: List[WeatherForecast] = []
    for key, result in zip(LOCATIONS, results):
        if isinstance(result, BaseException):
            logger.warning("Weather lookup failed for %s: %s", key, result)
            continue
        forecasts.append(result)
    return forecasts


def format_forecasts(forecasts: List[WeatherForecast]) -> str:
    lines = [
        f"- {f.friendly_name}: min {f.min_temp:.0f}°C, max {f.max_temp:.0f}°C, "
        f"wind {f.avg_wind_speed:.1f} m/s {f.avg_wind_direction}, "
        f"humidity {f.avg_humidity:.0f}%, precipitation {f.total_precipitation:.1f} mm"
        for f in forecasts
    ]
    return "\n".join(lines)


__all__ = [
    "WeatherLocation",
    "WeatherForecast",
    "LOCATIONS",
    "degrees_to_compass",
    "parse_forecast",
    "get_forecast",
    "get_all_forecasts",
    "format_forecasts",
]
