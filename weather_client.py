# weather_client.py
import logging
from typing import List

import requests
from pydantic import ValidationError

from config import DEFAULT_BASE_URL
from errors import PayloadError, PlaceNotFound, ProviderError
from models import CurrentConditions, CurrentPayload, ForecastEntry, ForecastPayload

logger = logging.getLogger("weather_client")


class OpenWeatherClient:
    """Blocking client for the OpenWeatherMap ``/weather`` and ``/forecast`` endpoints."""

    def __init__(self, api_key, base_url=DEFAULT_BASE_URL, units="metric", timeout=10.0):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout

    def _get(self, endpoint, place):
        url = f"{self.base_url}/{endpoint}"
        params = {"q": place, "appid": self.api_key, "units": self.units}
        try:
            resp = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise ProviderError(f"{endpoint} request for {place!r} failed: {e}") from e
        try:
            body = resp.json()
        except ValueError as e:
            raise ProviderError(f"{endpoint} for {place!r} returned non-JSON (HTTP {resp.status_code})") from e
        return resp, body

    def current(self, place: str) -> CurrentConditions:
        """Current conditions for ``place``; ``PlaceNotFound`` unless the envelope says 200."""
        resp, body = self._get("weather", place)
        if not isinstance(body, dict):
            raise PayloadError(f"weather for {place!r}: expected an object, got {type(body).__name__}")
        code = body.get("cod")
        if code != 200:
            raise PlaceNotFound(place, code)
        try:
            payload = CurrentPayload.model_validate(body)
        except ValidationError as e:
            raise PayloadError(f"weather for {place!r}: {e}") from e
        logger.debug("Current conditions for %r: HTTP %s", place, resp.status_code)
        return CurrentConditions.from_payload(payload)

    def forecast(self, place: str) -> List[ForecastEntry]:
        """All 3-hour samples of the 5-day forecast, in provider order."""
        resp, body = self._get("forecast", place)
        if resp.status_code != 200:
            raise ProviderError(f"forecast for {place!r} failed with HTTP {resp.status_code}")
        try:
            payload = ForecastPayload.model_validate(body)
        except ValidationError as e:
            raise PayloadError(f"forecast for {place!r}: {e}") from e
        return [ForecastEntry.from_payload(sample) for sample in payload.list]
