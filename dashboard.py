# dashboard.py
import asyncio
import logging

from last_query import LastQueryStore
from models import Found
from orchestrator import QueryOrchestrator
from state import DashboardState, ResultState
from weather_client import OpenWeatherClient

logger = logging.getLogger("dashboard")


class DashboardController:
    """Owns the dashboard state; the web layer only talks to this."""

    def __init__(self, client, store, state=None):
        self.state = state or ResultState()
        self.store = store
        self.orchestrator = QueryOrchestrator(client, store, self.state)
        # prefills the search box after a restore, emptied by the next search
        self.restored_place = None

    @classmethod
    def from_config(cls, config):
        client = OpenWeatherClient(
            config.api_key,
            base_url=config.base_url,
            units=config.units,
            timeout=config.request_timeout,
        )
        return cls(client, LastQueryStore(config.last_query_db))

    def snapshot_state(self) -> DashboardState:
        return self.state.current

    async def search(self, raw_input: str) -> DashboardState:
        self.restored_place = None
        place = (raw_input or "").strip()
        if not place:
            logger.debug("Empty search input, clearing result")
            self.state.clear()
            return self.state.current
        await self.orchestrator.fetch(place)
        return self.state.current

    async def startup(self) -> DashboardState:
        """Shows the cached snapshot, then refreshes it from the provider."""
        snapshot = await asyncio.to_thread(self.store.load_snapshot)
        last_place = await asyncio.to_thread(self.store.load_last_place)

        if snapshot is not None:
            logger.info("Showing cached snapshot for %r", snapshot.name)
            self.state.show(Found(snapshot))

        if last_place is None:
            logger.info("No previous search to restore")
            return self.state.current

        self.restored_place = last_place
        await self.orchestrator.fetch(last_place, keep_result=snapshot is not None)
        return self.state.current
