"""Weather fetch service — fetch-and-refresh and cached reads.

``execute`` is the only path that talks to the upstream provider. Every failure
inside it (transport, provider-reported error, malformed payload, storage) is
wrapped into a single ``FetchFailed`` so callers never see raw errors.
``get_weather`` only reads what a previous ``execute`` stored.
"""
import logging
from typing import Any

import httpx

from app.errors import FetchFailed, NotFoundError
from app.models.weather import WeatherReading
from app.providers.weatherstack import WeatherProvider
from app.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The provider answered with a payload-level ``error`` object."""


def normalize(payload: dict[str, Any]) -> dict[str, Any]:
    """Map a Weatherstack ``current`` payload onto the canonical reading shape."""
    if payload.get("error"):
        error = payload["error"]
        info = error.get("info") if isinstance(error, dict) else error
        raise UpstreamError(info or "Unknown provider error")

    location = payload["location"]
    current = payload["current"]
    return {
        "city": location["name"],
        "temperature": current["temperature"],
        "description": current["weather_descriptions"][0],
        "humidity": current["humidity"],
    }


class WeatherService:
    def __init__(self, repository: WeatherRepository, provider: WeatherProvider):
        self.repository = repository
        self.provider = provider

    def execute(self, city: str) -> dict[str, Any]:
        """Fetch current weather for ``city``, store it, and return the reading."""
        try:
            payload = self.provider.current(city)
            weather_data = normalize(payload)
            self.repository.insert_reading(weather_data)
        except Exception as exc:
            reason = _reason(exc)
            logger.warning("Weather fetch for %r failed: %s", city, reason)
            raise FetchFailed(reason) from exc

        logger.info("Stored weather reading for %s", weather_data["city"])
        return weather_data

    def get_weather(self, city: str) -> WeatherReading:
        """Return the most recent stored reading for ``city``."""
        reading = self.repository.latest_reading_for_city(city)
        if reading is None:
            logger.info("No cached weather for %r", city)
            raise NotFoundError("No weather data found for this city")
        return reading


def _reason(exc: Exception) -> str:
    # httpx puts the full request URL, access key included, in this message
    if isinstance(exc, httpx.HTTPStatusError):
        return f"Request failed with status code {exc.response.status_code}"
    # KeyError's str() is just the quoted key
    if isinstance(exc, (KeyError, IndexError, TypeError)):
        return f"Malformed provider response ({exc.__class__.__name__}: {exc})"
    return str(exc)
