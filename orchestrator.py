# orchestrator.py
import asyncio
import logging
from typing import Iterable, List

from errors import PlaceNotFound, WeatherError
from models import Found, ForecastEntry, NotFound
from state import QueryResult

logger = logging.getLogger("orchestrator")

NOON = "12:00:00"


def noon_entries(samples: Iterable[ForecastEntry]) -> List[ForecastEntry]:
    """Keeps the 12:00:00 sample of each day (provider format ``YYYY-MM-DD HH:MM:SS``)."""
    return [s for s in samples if s.timestamp.endswith(" " + NOON)]


class QueryOrchestrator:
    """Runs one search: current conditions, then forecast, then persist."""

    def __init__(self, client, store, state):
        self.client = client
        self.store = store
        self.state = state

    async def fetch(self, place: str, keep_result: bool = False) -> QueryResult:
        generation = self.state.begin(keep_result=keep_result)
        logger.info("Searching %r (generation %s)", place, generation)

        try:
            result = await self._lookup(place)
        except BaseException:
            # cancellation or an unexpected bug must not leave the page on Pending
            self.state.settle(generation, NotFound())
            raise

        if self.state.settle(generation, result) and isinstance(result, Found):
            await asyncio.to_thread(self.store.save, place, result.conditions)
        return result

    async def _lookup(self, place: str) -> QueryResult:
        try:
            conditions = await asyncio.to_thread(self.client.current, place)
        except PlaceNotFound as e:
            logger.info("%s", e)
            return NotFound()
        except WeatherError as e:
            logger.error("Current conditions lookup failed: %s", e)
            return NotFound()

        try:
            samples = await asyncio.to_thread(self.client.forecast, place)
        except WeatherError as e:
            # Current conditions are still shown, only the forecast row stays empty.
            logger.error("Forecast lookup failed, showing current conditions only: %s", e)
            return Found(conditions)

        forecast = noon_entries(samples)
        logger.info("Found %r: %s, %d forecast days", conditions.name, conditions.condition, len(forecast))
        return Found(conditions, tuple(forecast))
