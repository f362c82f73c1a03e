"""Weatherstack current-weather client."""
import logging
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://api.weatherstack.com/current"


class WeatherProvider(Protocol):
    def current(self, city: str) -> dict[str, Any]:
        ...


class WeatherstackClient:
    """Calls the Weatherstack ``current`` endpoint and returns the raw JSON payload.

    Weatherstack reports most failures with HTTP 200 and an ``error`` object in
    the body; interpreting that is left to the caller.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_URL, client: httpx.Client | None = None):
        self.api_key = api_key
        self.base_url = base_url
        self.client = client or httpx.Client()

    def current(self, city: str) -> dict[str, Any]:
        params = {"access_key": self.api_key, "query": city}
        logger.debug("Requesting current weather for %r", city)
        response = self.client.get(self.base_url, params=params)
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        self.client.close()
